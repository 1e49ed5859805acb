"""
HTTP middleware for cross‑origin access.

The browser UI is served from another origin, so every response the
API produces carries permissive CORS headers: successful responses,
error responses, responses for unknown routes and the bare ``204``
answers to ``OPTIONS`` preflight requests.  Starlette's stock
``CORSMiddleware`` only adds headers when the request has an
``Origin`` header; the UI and its test harness expect them
unconditionally, hence this small middleware.

The middleware is the outermost layer the application controls, so it
also turns unexpected exceptions into a JSON ``500`` response; that way
even a crashed request is answered with CORS headers and an ``error``
body.
"""

import logging
from typing import Awaitable, Callable, Dict

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from .config import Settings


logger = logging.getLogger(__name__)


def cors_headers(settings: Settings) -> Dict[str, str]:
    """Return the CORS headers configured in ``settings``."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": settings.cors_allow_methods,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
    }


def add_cors_middleware(app: FastAPI, settings: Settings) -> None:
    """Register the CORS middleware on ``app``."""
    headers = cors_headers(settings)

    @app.middleware("http")
    async def cors_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error"},
            )
        response.headers.update(headers)
        return response
