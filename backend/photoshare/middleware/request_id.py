"""
PhotoShare Backend: Request ID Middleware
==========================================

What:  Tags each incoming request with a short correlation ID and returns it
       in the X-Request-ID response header.
How:   A client-supplied X-Request-ID is reused only when it is a short token
       of letters, digits, '.', '_' or '-'; anything else is replaced by a
       generated ID. The ID lives in a ContextVar for loggers and on
       request.state for handlers.
When:  Outermost middleware, so every later log line can reference the ID.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def accepted_request_id(supplied: Optional[str]) -> str:
    """The client's ID when it is safe to log and echo, else a fresh one."""
    if supplied and _VALID_REQUEST_ID.match(supplied):
        return supplied
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request ID and echoes it back in the response headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = accepted_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = rid

        # Not reset afterwards: the outer error handlers still read it
        request_id_var.set(rid)
        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
