"""
Main entrypoint for the Church Records API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn church_records_api.app.main:app --reload

The database is opened and migrated when the application starts, not
at import time.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.errors import request_validation_handler
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.context import Repositories, init_repositories
from .core.logging_config import setup_logging


def create_app(
    db_path: Optional[str] = None,
    repositories: Optional[Repositories] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    db_path : Optional[str]
        SQLite file to open at startup.  Defaults to
        ``settings.database_url``.
    repositories : Optional[Repositories]
        Ready‑made stores to serve instead of opening ``db_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(
        settings.log_level,
        settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if repositories is None:
            app.state.repositories = init_repositories(db_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    if repositories is not None:
        app.state.repositories = repositories

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(v1_router, prefix="/api/v1")
    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
