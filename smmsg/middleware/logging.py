"""
Request Timing Middleware

Records how long each request took. It captures:
- Request method and path
- Response status code
- Request processing time

Design Decisions:
- Uses Starlette's BaseHTTPMiddleware for compatibility
- Logs the path only: query strings may carry secrets and are logged
  solely by the smmsg handler, after sanitization
- Logs at DEBUG on 'smmsg.access' so the handler's line stays the only
  INFO line per invocation
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("smmsg.access")


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for timing HTTP requests.

    Adds an X-Process-Time header to every response.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process request and log timing details.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/endpoint in the chain

        Returns:
            Response object
        """
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        # Format: METHOD PATH STATUS_CODE PROCESS_TIME_MS
        logger.debug(
            f"{request.method} {request.url.path} "
            f"{response.status_code} {process_time*1000:.2f}ms"
        )

        response.headers["X-Process-Time"] = str(process_time)

        return response


def add_logging_middleware(app):
    """
    Add logging middleware to FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(LoggingMiddleware)
