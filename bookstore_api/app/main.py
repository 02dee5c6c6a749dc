"""
Main entrypoint for the Bookstore API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn bookstore_api.app.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.error_handlers import register_exception_handlers
from .api.v1.router import router as v1_router
from .core.db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates the database file if needed and applies migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
