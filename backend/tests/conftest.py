"""
FiscalAPI Samples — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   No test talks to the real FiscalAPI. Routes are tested against a
       fake client; the HTTP layer against httpx.MockTransport.
How:   Environment is set before any fiscal_samples import so the
       settings singleton picks up test values.

Fixture Hierarchy:
    ├── fake_client:       FiscalApiClient look-alike, one AsyncMock per resource
    ├── downloads_dir:     Temporary DOWNLOADS_ROOT for file writes
    ├── file_service:      FileService bound to downloads_dir
    ├── test_client:       HTTPX AsyncClient over the app, with both injected
    └── envelope / failed: ApiResponse builders
"""

import os
import tempfile
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

os.environ["FISCALAPI_URL"] = "https://fiscalapi.test"
os.environ["FISCALAPI_API_KEY"] = "test-key-not-real"
os.environ["FISCALAPI_TENANT"] = "test-tenant"
os.environ["DOWNLOADS_ROOT"] = tempfile.mkdtemp(prefix="fiscal_samples_test_")
os.environ["LOG_LEVEL"] = "WARNING"

from fiscal_samples.schemas.fiscal import ApiResponse  # noqa: E402
from fiscal_samples.services.file_service import FileService, get_file_service  # noqa: E402
from fiscal_samples.services.fiscal_client import get_fiscal_client  # noqa: E402
from fiscal_samples.services.resources import (  # noqa: E402
    ApiKeyResource,
    CatalogResource,
    DownloadCatalogResource,
    DownloadRequestResource,
    DownloadRuleResource,
    PersonResource,
    ProductResource,
    TaxFileResource,
)


def envelope(data=None, status: int = 200) -> ApiResponse:
    """A successful FiscalAPI envelope."""
    return ApiResponse(data=data, succeeded=True, http_status_code=status)


def failed(message: str = "Bad request", details=None, status: int = 400) -> ApiResponse:
    """A failed FiscalAPI envelope."""
    return ApiResponse(
        succeeded=False, message=message, details=details, http_status_code=status
    )


@pytest.fixture
def fake_client():
    """
    Stand-in for FiscalApiClient.

    Each resource is an AsyncMock specced on the real resource class, so a
    misspelled method fails the test instead of silently passing.

    Usage:
        fake_client.persons.get_list.return_value = envelope([...])
    """
    return SimpleNamespace(
        api_keys=AsyncMock(spec=ApiKeyResource),
        catalogs=AsyncMock(spec=CatalogResource),
        tax_files=AsyncMock(spec=TaxFileResource),
        persons=AsyncMock(spec=PersonResource),
        products=AsyncMock(spec=ProductResource),
        download_catalogs=AsyncMock(spec=DownloadCatalogResource),
        download_rules=AsyncMock(spec=DownloadRuleResource),
        download_requests=AsyncMock(spec=DownloadRequestResource),
    )


@pytest.fixture
def downloads_dir(tmp_path):
    return tmp_path / "facturas"


@pytest.fixture
def file_service(downloads_dir):
    return FileService(str(downloads_dir))


@pytest_asyncio.fixture
async def test_client(fake_client, file_service):
    """
    HTTPX AsyncClient talking to the app through ASGITransport, with the
    FiscalAPI client and file service replaced by the fixtures above.
    """
    from fiscal_samples.main import app

    app.dependency_overrides[get_fiscal_client] = lambda: fake_client
    app.dependency_overrides[get_file_service] = lambda: file_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
