"""
FiscalAPI Samples — Envelope to HTTP Response Mapping
======================================================

What:  Turns a FiscalAPI envelope into the HTTP response a demo route returns.
Why:   Every route follows the same rule, so it lives in one place:
           succeeded → 200 with the envelope's data (or the whole envelope)
           otherwise → 400 with the whole envelope
How:   Returns a JSONResponse built from the camelCase envelope dump.
"""

import logging
from typing import Any, Dict

from fastapi.responses import JSONResponse

from fiscal_samples.middleware.request_id import request_id_var
from fiscal_samples.schemas.fiscal import ApiResponse
from fiscal_samples.schemas.responses import ErrorResponse

logger = logging.getLogger(__name__)

# OpenAPI documentation for the error answers every demo route can give
ENVELOPE_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {
        "model": ApiResponse,
        "description": "FiscalAPI rejected the call; body is the full FiscalAPI envelope",
    },
    500: {"model": ErrorResponse, "description": "Unexpected error in this service"},
    503: {"model": ErrorResponse, "description": "FiscalAPI unreachable"},
}

# Routes that write a downloaded file can also fail locally or find nothing
FILE_RESPONSES: Dict[int, Dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "FiscalAPI returned no file"},
    500: {"model": ErrorResponse, "description": "File could not be decoded or written"},
}


def respond(api_response: ApiResponse, data_only: bool = True) -> JSONResponse:
    """
    Map an envelope to 200/400.

    Args:
        api_response: What the FiscalAPI client returned
        data_only:    On success, return only `data` (True) or the whole
                      envelope (False). Failures always return the envelope.
    """
    body = api_response.to_response()
    if api_response.succeeded:
        return JSONResponse(status_code=200, content=body["data"] if data_only else body)

    logger.warning(
        "[%s] FiscalAPI call failed: status=%s message=%s",
        request_id_var.get(""),
        api_response.http_status_code,
        api_response.message,
    )
    return JSONResponse(status_code=400, content=body)
