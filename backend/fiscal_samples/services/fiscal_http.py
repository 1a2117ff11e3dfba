"""
FiscalAPI Samples — FiscalAPI HTTP Core
========================================

What:  The single place that performs HTTP requests against FiscalAPI.
Why:   Every resource (people, products, tax files, ...) shares the same
       authentication headers, connection pool, retry policy and envelope
       parsing. Resources only decide method, path and body.
How:   One long-lived httpx.AsyncClient; tenacity retries transport errors;
       every HTTP answer is turned into an ApiResponse envelope.
Who:   Owned by FiscalApiClient; used by every FiscalResource.
When:  Created at import (connection pool opens lazily), closed on shutdown.

Failure Model:
    FiscalAPI answered (any status)   → ApiResponse, succeeded from the body.
                                        Non-envelope error bodies (HTML pages,
                                        ProblemDetails, empty) → succeeded=False
    FiscalAPI unreachable / timed out → retried with exponential backoff + jitter
                                        (POST only on connect errors)
                                        → FiscalApiUnavailableError when exhausted
    HTTP error statuses are never retried: a 400 today is a 400 on retry.
"""

import json
import logging
import time
import uuid
from typing import Any, Dict, Optional, Tuple, Type

import httpx
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)
from tenacity.wait import wait_base

from fiscal_samples.config import settings
from fiscal_samples.exceptions import FiscalApiUnavailableError
from fiscal_samples.schemas.fiscal import ApiResponse

logger = logging.getLogger(__name__)

API_VERSION = "v4"

# Methods FiscalAPI treats idempotently; safe to resend after a read timeout
RESENDABLE_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})
# Raised before the request reached FiscalAPI
CONNECT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


class FiscalHttpCore:
    """
    Authenticated, retrying HTTP transport for FiscalAPI.

    Headers sent on every request:
        X-API-KEY:      account API key
        X-TENANT-KEY:   account tenant
        X-TIME-ZONE:    time zone FiscalAPI uses to interpret dates
        X-API-VERSION:  always v4

    Args (all default to settings; overridden in tests):
        transport:  httpx transport, e.g. httpx.MockTransport in tests
        retry_wait: tenacity wait strategy between transport retries
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        tenant: Optional[str] = None,
        time_zone: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        retry_wait: Optional[wait_base] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.fiscalapi_url).rstrip("/")
        self.max_attempts = max_attempts or settings.retry_max_attempts
        self.retry_wait = retry_wait or wait_exponential_jitter(
            initial=settings.retry_min_wait,
            max=settings.retry_max_wait,
            jitter=1,
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "X-API-KEY": api_key if api_key is not None else settings.fiscalapi_api_key,
                "X-TENANT-KEY": tenant if tenant is not None else settings.fiscalapi_tenant,
                "X-TIME-ZONE": time_zone or settings.fiscalapi_time_zone,
                "X-API-VERSION": API_VERSION,
                "Accept": "application/json",
            },
            timeout=timeout or settings.fiscalapi_timeout,
            transport=transport,
        )
        logger.info(
            "FiscalHttpCore initialized with base_url=%s, retry(max_attempts=%d)",
            self.base_url,
            self.max_attempts,
        )

    @staticmethod
    def retryable_errors(method: str) -> Tuple[Type[Exception], ...]:
        """
        Transport errors worth a retry for this method.

        GET/PUT/DELETE can be resent after any transport error. POST cannot:
        a read timeout means FiscalAPI may already have created the person,
        upload or download request, so only errors raised before the request
        left (connect failures) are retried.
        """
        if method.upper() in RESENDABLE_METHODS:
            return (httpx.TransportError,)
        return CONNECT_ERRORS

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """
        Send one request and return FiscalAPI's answer as an envelope.

        Raises:
            FiscalApiUnavailableError: no HTTP answer after the allowed attempts
        """
        call_id = str(uuid.uuid4())[:8]
        start_time = time.perf_counter()
        attempts = 0

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(self.retryable_errors(method)),
                stop=stop_after_attempt(self.max_attempts),
                wait=self.retry_wait,
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    response = await self._client.request(
                        method, path, params=params, json=json_body
                    )
        except (httpx.TransportError, RetryError) as e:
            logger.error(
                "[%s] FiscalAPI unreachable: %s %s after %d attempt(s): %s",
                call_id,
                method,
                path,
                attempts,
                str(e),
            )
            raise FiscalApiUnavailableError(
                message="FiscalAPI could not be reached. Please try again later.",
                retry_after=settings.retry_max_wait,
                context={
                    "call_id": call_id,
                    "path": path,
                    "attempts": attempts,
                    "error_type": type(e).__name__,
                },
            )

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "[%s] %s %s -> %d in %.0fms",
            call_id,
            method,
            path,
            response.status_code,
            duration_ms,
        )
        return self.parse_envelope(response)

    @staticmethod
    def parse_envelope(response: httpx.Response) -> ApiResponse:
        """
        Turn any HTTP answer into an ApiResponse.

        FiscalAPI answers with {data, succeeded, message, details, httpStatusCode}.
        Gateways, auth middleware and crashes may answer with something else;
        those become failed envelopes carrying the status and the raw body so
        the caller still sees what happened.
        """
        status = response.status_code
        is_success = response.is_success
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return ApiResponse(
                succeeded=is_success,
                message=None if is_success else (response.reason_phrase or f"HTTP {status}"),
                details=None if is_success else (response.text or None),
                http_status_code=status,
            )

        if isinstance(body, dict) and "succeeded" in body:
            envelope = ApiResponse.model_validate(body)
            if not envelope.http_status_code:
                envelope.http_status_code = status
            return envelope

        if is_success:
            return ApiResponse(data=body, succeeded=True, http_status_code=status)

        # ProblemDetails ({"title", "status", "errors"}) or any other JSON
        message = None
        if isinstance(body, dict):
            message = body.get("title") or body.get("message")
        return ApiResponse(
            succeeded=False,
            message=message or response.reason_phrase or f"HTTP {status}",
            details=json.dumps(body, ensure_ascii=False),
            http_status_code=status,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
