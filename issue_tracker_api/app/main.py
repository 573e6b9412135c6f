"""
Main entrypoint for the Issue Tracker API.

This module assembles the FastAPI application, sets up logging,
installs the error envelope handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn::

    uvicorn issue_tracker_api.app.main:app

or through the ``issue-tracker`` console script, which calls ``run``.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.issue_store import IssueStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[IssueStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[IssueStore]
        Store backing the application.  A fresh, empty store is created
        when omitted; it lives as long as the application does.
    settings : Optional[Settings]
        Configuration to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else IssueStore()

    register_exception_handlers(app)
    app.include_router(router)
    return app


def run() -> None:
    """Serve the module level ``app`` with uvicorn."""
    logger.info("Starting server at %s:%s", default_settings.host, default_settings.port)
    config = uvicorn.Config(
        app=app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    uvicorn.Server(config).run()


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
