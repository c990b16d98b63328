"""
PhotoShare Backend: Request Logging Middleware
===============================================

What:  One access log line per HTTP request, API calls and static files alike.
How:   Times the downstream app and logs method, path, status, duration,
       response size, request ID and client address.
When:  Inside RequestIDMiddleware so the request ID is already set.

Log level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO
Successful static file hits are logged at DEBUG; a page load pulls in
dozens of them.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from photoshare.middleware.request_id import request_id_var

logger = logging.getLogger("photoshare.access")

API_PREFIXES = ("/test", "/user/", "/photosOfUser/")


def is_api_path(path: str) -> bool:
    return path == "/" or path.startswith(API_PREFIXES)


def access_log_level(path: str, status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    if not is_api_path(path):
        return logging.DEBUG
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logging keyed by request ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        path = request.url.path
        status = response.status_code
        rid = request_id_var.get("")
        # request.client is None under ASGITransport
        client = request.client.host if request.client else "unknown"
        size = response.headers.get("content-length", "-")

        logger.log(
            access_log_level(path, status),
            "%s %s %d %sB %.1fms [%s] from %s",
            request.method,
            path,
            status,
            size,
            elapsed_ms,
            rid,
            client,
            extra={
                "request_id": rid,
                "status": status,
                "duration_ms": round(elapsed_ms, 2),
                "static": not is_api_path(path),
            },
        )
        return response
