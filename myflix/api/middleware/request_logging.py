"""
Request Logging Middleware
==========================

Logs one line per HTTP request: method, path, status, duration and client.
Request bodies and Authorization headers are never logged.
"""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("myflix.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with the level chosen by status class (5xx ERROR, 4xx WARNING, else INFO)."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            client_ip,
        )
        return response
