"""
FiscalAPI Samples — Health Check Route
========================================

What:  Liveness endpoint for Docker health checks and load balancers.
How:   Reports configuration state and uptime. It does NOT call FiscalAPI:
       every FiscalAPI request counts against the account, and a probe
       every few seconds would spend it for nothing.

Status levels:
    healthy:   API key and tenant are configured
    degraded:  credentials missing; every FiscalAPI route will answer 400
               (FiscalAPI rejects the request), but the process is up
"""

import logging
import time

from fastapi import APIRouter

from fiscal_samples import __version__
from fiscal_samples.config import settings
from fiscal_samples.schemas.responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Configuration state and uptime. Makes no call to FiscalAPI.",
)
async def health_check() -> HealthResponse:
    credentials_configured = settings.has_credentials
    if not credentials_configured:
        logger.warning("Health check: FISCALAPI_API_KEY or FISCALAPI_TENANT is not set")

    return HealthResponse(
        status="healthy" if credentials_configured else "degraded",
        version=__version__,
        fiscalapi_url=settings.fiscalapi_url,
        credentials_configured=credentials_configured,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
