"""
FiscalAPI Samples — Access Log Middleware
===========================================

What:  One log line per request: method, path, status, duration, request
       id and client address.
How:   Log level follows the status code so a failed FiscalAPI call (400)
       shows up as WARNING and an unreachable FiscalAPI (503) as ERROR.

Example line:
    GET /api/people/obtener-lista-paginada 200 412.3ms [3f9a1c2e] from 127.0.0.1

Request and response bodies are never logged: they carry tax ids, API
keys and base64 certificate content.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from fiscal_samples.middleware.request_id import request_id_var

logger = logging.getLogger("fiscal_samples.access")

# Probes and API docs, too frequent or too boring to log
QUIET_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log line after the response is produced."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
