"""
FastAPI Application Entry Point

This module initializes the FastAPI application and configures:
- Logging
- API routes
- Middleware and exception handlers

The Azure Functions host loads this app through function_app.py;
it can also be served directly by any ASGI server.
"""

import logging

from fastapi import FastAPI

from smmsg.api import endpoints
from smmsg.api.schemas import HealthResponse
from smmsg.core.exceptions import register_exception_handlers
from smmsg.core.setting import settings
from smmsg.middleware.logging import add_logging_middleware


def configure_logging() -> None:
    """Apply LOG_LEVEL to the 'smmsg' logger. Handlers belong to the host."""
    logging.getLogger("smmsg").setLevel(settings.LOG_LEVEL.upper())


configure_logging()

app = FastAPI(
    title="smmsg",
    description="HTTP function that validates and sanitizes its request URL before logging it",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
)

# Error middleware is added first so it sits inside the timing middleware
register_exception_handlers(app)
add_logging_middleware(app)


@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns:
        Health status of the service
    """
    return {"status": "healthy"}


app.include_router(endpoints.router, tags=["smmsg"])
