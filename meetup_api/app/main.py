"""
Main entrypoint for the Meetup API.

This module assembles the FastAPI application: it sets up logging,
creates the shared ``Database``, includes the routers and registers
the exception handlers.  ``create_app`` builds a new application each
time it is called, so tests can create isolated instances.  To serve
the app, run ``python run.py`` or use uvicorn's factory mode::

    uvicorn meetup_api.app.main:create_app --factory

Settings are read from the environment (and ``.env``) via
``Settings.from_environment`` unless passed in explicitly.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.router import router as api_router
from .api.endpoints import pages
from .core.config import Settings
from .core.db import Database
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Loaded from the environment when
        omitted, in which case a missing ``SOCKET_ADDR`` or
        ``DATABASE_URL`` raises ``ConfigurationError``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if settings is None:
        settings = Settings.from_environment()

    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    db = Database(settings.database_url, max_connections=settings.max_connections)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.db = db

    app.include_router(pages.router)
    app.include_router(api_router, prefix="/api")
    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if it does not exist and brings
        # the schema up to date.
        db.init_db()
        logger.info("%s ready, database %s", settings.project_name, db.path)

    return app
