"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitracker.core.database import engine, init_db
from unitracker.core.logging_config import get_logger, setup_logging
from unitracker.core.monitoring import initialize_logfire

from .api import (
    auth,
    data,
    health,
    notes,
    preferences,
    profile,
    stats,
    study_sessions,
    subjects,
    tasks,
    timers,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup when ``DATABASE_AUTO_CREATE`` is on.
    """
    # Startup
    try:
        logger.info("Starting up UniTracker Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down UniTracker Server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    UniTracker Server API

    Backend for the UniTracker study planner: Kanban tasks, notes, study sessions
    recorded by the timers, subjects, preferences and dashboard statistics.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)
initialize_logfire(app=app, engine=engine)


app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=constant.API_PREFIX)
app.include_router(profile.router, prefix=f"{constant.API_PREFIX}/profile")
app.include_router(tasks.router, prefix=f"{constant.API_PREFIX}/tasks")
app.include_router(notes.router, prefix=f"{constant.API_PREFIX}/notes")
app.include_router(study_sessions.router, prefix=f"{constant.API_PREFIX}/study-sessions")
# Path used by the timer components of the web client.
app.include_router(study_sessions.router, prefix=f"{constant.API_PREFIX}/sessions", include_in_schema=False)
app.include_router(preferences.router, prefix=f"{constant.API_PREFIX}/preferences")
app.include_router(subjects.router, prefix=f"{constant.API_PREFIX}/subjects")
app.include_router(stats.router, prefix=f"{constant.API_PREFIX}/stats")
app.include_router(timers.router, prefix=f"{constant.API_PREFIX}/timers")
app.include_router(data.router, prefix=constant.API_PREFIX)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "unitracker.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )
