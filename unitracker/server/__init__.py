"""
UniTracker Server Package.

This package contains the web server implementation for the UniTracker study tracker.
It includes the API definition, middleware, exception handling and configuration.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    middleware: Request logging middleware.
    exception_handlers: Global and domain exception handlers.
    services: Dependencies and business logic spanning several tables.
"""
