"""
FiscalAPI Samples — Request ID Middleware
===========================================

What:  Tags each request with a short correlation id and echoes it back in
       the X-Request-ID response header.
How:   Reuses the caller's X-Request-ID when present, otherwise generates
       one. The id is kept in a ContextVar so any logger in the request's
       call chain (routes, FiscalAPI client, error handlers) can read it
       without passing it around.

A failed FiscalAPI call is logged by the route with this id, so a client
reporting an X-Request-ID can be matched to the FiscalAPI error message.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local, so concurrent requests never see each other's id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


def new_request_id() -> str:
    """Eight hex chars: short enough for log lines, unique enough per day."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request id, stores it on request.state and the ContextVar."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
