"""
FastAPI dependencies shared by the endpoint modules.

The application factory stores the directory store and the settings on
``app.state``; handlers receive them through these dependencies instead
of importing module‑level objects, which keeps every application (and
every test) isolated from the others.
"""

from fastapi import Request

from customer_directory_api.app.core.config import Settings
from customer_directory_api.app.services.directory_store import DirectoryStore


def get_store(request: Request) -> DirectoryStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
