"""
Main entrypoint for the Customer Directory API.

This module assembles the FastAPI application: it sets up logging,
creates the directory store, installs the CORS middleware and the
error handlers and includes the API router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Importing the app here makes it easy to
run with uvicorn or another ASGI server, e.g.::

    uvicorn customer_directory_api.app.main:app --port 8080

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_exception_handlers
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import configure_logging
from .core.middleware import add_cors_middleware
from .services.directory_store import DirectoryStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DirectoryStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[DirectoryStore]
        Store to serve.  A new, empty store is created when omitted, so
        every application owns its own records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    configure_logging(settings)

    # The UI calls ``/customers`` exactly; ``/customers/`` (an empty id)
    # must be a plain 404 rather than a redirect to the collection.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else DirectoryStore()

    add_cors_middleware(app, settings)
    register_exception_handlers(app)
    app.include_router(api_router)

    logging.getLogger(__name__).info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
