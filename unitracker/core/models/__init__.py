"""
Models that are not database tables.

Subpackages:
- domain: Enums shared by every layer
- io: Request and response schemas for the HTTP API
"""
