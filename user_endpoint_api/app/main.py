"""
Main entrypoint for the User Endpoint API.

This module assembles the FastAPI application, sets up logging, picks
the user repository and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with uvicorn::

    uvicorn user_endpoint_api.app.main:app --reload

Tests and embedding applications call ``create_app`` with their own
repository instead.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging
from .repositories.user_repository import (
    InMemoryUserRepository,
    SQLiteUserRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

# Prefix under which endpoints expose their named operations.
CONNECT_PREFIX = "/connect"


def build_repository(database_url: str) -> UserRepository:
    """Create the repository described by ``database_url``."""
    if database_url == ":memory:":
        return InMemoryUserRepository()
    return SQLiteUserRepository(get_database_path(database_url))


def create_app(repository: Optional[UserRepository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[UserRepository]
        Storage used by the user endpoint.  When omitted, one is built
        from ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Configure logging first so everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    if repository is None:
        repository = build_repository(settings.database_url)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_repository = repository
    app.include_router(v1_router, prefix=CONNECT_PREFIX)

    @app.on_event("startup")
    def startup_event() -> None:
        # SQLite schemas are migrated on start-up; other stores need nothing.
        if isinstance(repository, SQLiteUserRepository):
            version = init_db(repository.db_path)
            logger.info("Database %s at schema version %s", repository.db_path, version)

    logger.info("Using %s for user storage", type(repository).__name__)
    return app


app = create_app()
