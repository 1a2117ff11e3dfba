"""
FiscalAPI Samples — FiscalAPI Resources
========================================

What:  One class per FiscalAPI resource, each bound to its v4 path.
Why:   Routes ask for "the people resource, get by id" without knowing
       URLs, query parameter names or how bodies are serialized.
How:   FiscalResource implements the CRUD calls every resource shares;
       subclasses add resource-specific calls. All of them delegate the
       actual HTTP work to FiscalHttpCore and return ApiResponse.

Resource Inventory:
    ApiKeyResource            api/v4/apikeys
    CatalogResource           api/v4/catalogs
    TaxFileResource           api/v4/tax-files
    PersonResource            api/v4/people
    ProductResource           api/v4/products
    DownloadCatalogResource   api/v4/download-catalogs
    DownloadRuleResource      api/v4/download-rules
    DownloadRequestResource   api/v4/download-requests
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from fiscal_samples.schemas.fiscal import ApiResponse, FileResponse, FiscalModel
from fiscal_samples.services.fiscal_http import FiscalHttpCore

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Escape a value for use as a single URL path segment."""
    return quote(str(value), safe="")


class FiscalResource:
    """CRUD calls shared by every paged FiscalAPI resource."""

    path: str = ""

    def __init__(self, core: FiscalHttpCore):
        self._core = core

    def _url(self, *segments: str) -> str:
        return "/".join([self.path, *(_segment(s) for s in segments)])

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self._core.request("GET", url, params=params)

    async def get_list(self, page_number: int, page_size: int) -> ApiResponse:
        return await self._get(
            self._url(), params={"pageNumber": page_number, "pageSize": page_size}
        )

    async def get_by_id(self, resource_id: str) -> ApiResponse:
        return await self._get(self._url(resource_id))

    async def create(self, model: FiscalModel) -> ApiResponse:
        return await self._core.request("POST", self._url(), json_body=model.to_payload())

    async def update(self, resource_id: str, model: FiscalModel) -> ApiResponse:
        return await self._core.request("PUT", self._url(resource_id), json_body=model.to_payload())

    async def delete(self, resource_id: str) -> ApiResponse:
        return await self._core.request("DELETE", self._url(resource_id))


class ApiKeyResource(FiscalResource):
    path = "api/v4/apikeys"


class PersonResource(FiscalResource):
    path = "api/v4/people"


class ProductResource(FiscalResource):
    path = "api/v4/products"

    async def get_taxes(self, resource_id: str) -> ApiResponse:
        return await self._get(self._url(resource_id, "taxes"))


class TaxFileResource(FiscalResource):
    """Certificates and private keys (CSD / FIEL) of a person."""

    path = "api/v4/tax-files"

    async def get_default_values(self, person_id: str) -> ApiResponse:
        """Latest valid certificate + key of a person, with their content."""
        return await self._get(self._url(person_id, "default-values"))

    async def get_default_references(self, person_id: str) -> ApiResponse:
        """Latest valid certificate + key of a person, ids only."""
        return await self._get(self._url(person_id, "default-references"))


class CatalogResource:
    """SAT catalogs (product codes, units of measure, tax regimes, ...)."""

    path = "api/v4/catalogs"

    def __init__(self, core: FiscalHttpCore):
        self._core = core

    async def get_list(self) -> ApiResponse:
        """Names of all available catalogs."""
        return await self._core.request("GET", self.path)

    async def get_record_by_id(self, catalog_name: str, record_id: str) -> ApiResponse:
        url = f"{self.path}/{_segment(catalog_name)}/key/{_segment(record_id)}"
        return await self._core.request("GET", url)

    async def search_catalog(
        self,
        catalog_name: str,
        search_text: str,
        page_number: int,
        page_size: int,
    ) -> ApiResponse:
        url = f"{self.path}/{_segment(catalog_name)}/{_segment(search_text)}"
        return await self._core.request(
            "GET", url, params={"pageNumber": page_number, "pageSize": page_size}
        )


class DownloadCatalogResource:
    """Catalogs used by bulk-download rules (query types, invoice statuses, ...)."""

    path = "api/v4/download-catalogs"

    def __init__(self, core: FiscalHttpCore):
        self._core = core

    async def get_list(self) -> ApiResponse:
        return await self._core.request("GET", self.path)

    async def get_record_by_name(self, catalog_name: str) -> ApiResponse:
        return await self._core.request("GET", f"{self.path}/{_segment(catalog_name)}")


class DownloadRuleResource(FiscalResource):
    path = "api/v4/download-rules"

    async def create_test_rule(self) -> ApiResponse:
        """Ask FiscalAPI to create a rule with its built-in test configuration."""
        return await self._core.request("POST", self._url("test"))


class DownloadRequestResource(FiscalResource):
    """
    Bulk-download requests and everything they produced.

    The three download calls return files. Their envelopes come back with
    data already parsed into FileResponse (a list for package, a single
    file for the raw SAT request/response) so callers never handle dicts.
    """

    path = "api/v4/download-requests"

    async def get_xmls(self, resource_id: str) -> ApiResponse:
        return await self._get(self._url(resource_id, "xmls"))

    async def get_metadata_items(self, resource_id: str) -> ApiResponse:
        return await self._get(self._url(resource_id, "meta-items"))

    async def download_package(self, resource_id: str) -> ApiResponse:
        response = await self._get(self._url(resource_id, "package"))
        return self._with_files(response, many=True)

    async def download_sat_request(self, resource_id: str) -> ApiResponse:
        response = await self._get(self._url(resource_id, "raw-request"))
        return self._with_files(response, many=False)

    async def download_sat_response(self, resource_id: str) -> ApiResponse:
        response = await self._get(self._url(resource_id, "raw-response"))
        return self._with_files(response, many=False)

    async def search(self, created_at: datetime) -> ApiResponse:
        """Requests created on the given date."""
        return await self._get(
            self._url("search"), params={"createdAt": created_at.isoformat()}
        )

    @staticmethod
    def _with_files(response: ApiResponse, many: bool) -> ApiResponse:
        if not response.succeeded:
            return response
        try:
            if many:
                items = response.data or []
                if isinstance(items, dict):
                    items = [items]
                response.data = [FileResponse.model_validate(item) for item in items]
            else:
                response.data = FileResponse.model_validate(response.data)
        except PydanticValidationError as e:
            logger.warning("FiscalAPI returned an unexpected file payload: %s", str(e))
            return ApiResponse(
                succeeded=False,
                message="Unexpected file payload from FiscalAPI",
                details=str(e),
                http_status_code=response.http_status_code,
            )
        return response
