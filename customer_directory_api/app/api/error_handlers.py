"""
Exception handlers mapping errors onto JSON ``{"error": ...}`` bodies.

Domain errors from the validation and store layers carry their own
status code and message.  Starlette's ``HTTPException`` (unknown route,
wrong method) is rewritten so that its body uses the same ``error``
key as every other failure of the API.  FastAPI's own request
validation (a request body that is not JSON, a malformed parameter) is
a bad request like any other and answers ``400`` instead of ``422``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from customer_directory_api.app.core.errors import CustomerDirectoryError
from customer_directory_api.app.services.validation import format_validation_errors


logger = logging.getLogger(__name__)


async def customer_error_handler(request: Request, exc: CustomerDirectoryError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(list(exc.errors()))
    logger.info("%s %s -> 400: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) and exc.detail else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomerDirectoryError, customer_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
