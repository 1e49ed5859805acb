"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is split into layers that only depend on the
layers below them:

* ``schemas`` – the customer record and the wire shapes of the API.
* ``services`` – payload validation and the in‑memory directory store.
* ``api`` – FastAPI routers, dependencies and error handlers.
* ``core`` – configuration, logging, CORS and the error hierarchy.
"""

from .main import app  # noqa: F401
