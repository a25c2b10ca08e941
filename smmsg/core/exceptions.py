"""
Custom Exceptions and Handlers

This module defines the service's exceptions and the FastAPI handlers
that turn them into HTTP responses.

Design Decisions:
- Callers only ever see generic error bodies
- The specific reason is written to the operator log, never echoed back
- Nothing escapes to the host unformatted: unknown errors become a 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from smmsg.api.schemas import ErrorResponse

logger = logging.getLogger("smmsg")

INVALID_REQUEST_URL = "Invalid request URL"
INTERNAL_SERVER_ERROR = "Internal server error"


class SmmsgException(Exception):
    """Base exception for the smmsg function."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidURLError(SmmsgException):
    """Raised when the request URL fails validation."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str):
        # Only the reason is kept; the raw URL may hold secrets
        self.reason = reason
        super().__init__(reason)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turn any error that escapes the routes into a logged, generic 500.

    Starlette re-raises to the server after running an Exception handler,
    so unknown errors are caught here instead and go no further.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error while processing request")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(error=INTERNAL_SERVER_ERROR).model_dump(),
            )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers on the FastAPI app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(InvalidURLError)
    async def invalid_url_handler(request: Request, exc: InvalidURLError) -> JSONResponse:
        logger.info(f"Invalid URL received: {exc.reason}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=INVALID_REQUEST_URL).model_dump(),
        )

    app.add_middleware(UnhandledErrorMiddleware)
