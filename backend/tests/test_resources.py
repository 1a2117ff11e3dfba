"""
FiscalAPI Samples — FiscalAPI Resource Tests
==============================================

What:  Each resource call hits the right method, path and query string,
       and sends the model as a camelCase body.
How:   A real FiscalApiClient over httpx.MockTransport records requests.
"""

import json
from datetime import datetime

import httpx
import pytest
from tenacity import wait_none

from fiscal_samples import samples
from fiscal_samples.schemas.fiscal import FileResponse
from fiscal_samples.services.fiscal_client import FiscalApiClient
from fiscal_samples.services.fiscal_http import FiscalHttpCore


class Recorder:
    """MockTransport handler that records requests and answers with `body`."""

    def __init__(self, body=None, status: int = 200):
        self.requests = []
        self.body = body if body is not None else {"succeeded": True, "data": None}
        self.status = status

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_client(recorder: Recorder) -> FiscalApiClient:
    core = FiscalHttpCore(
        base_url="https://fiscalapi.test",
        api_key="k",
        tenant="t",
        retry_wait=wait_none(),
        transport=httpx.MockTransport(recorder),
    )
    return FiscalApiClient(core=core)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def client(recorder):
    return make_client(recorder)


class TestCrudResources:
    """Shared FiscalResource calls, exercised through people and products."""

    @pytest.mark.asyncio
    async def test_get_list_sends_paging_params(self, client, recorder):
        await client.persons.get_list(1, 10)
        assert recorder.last.method == "GET"
        assert recorder.last.url.path == "/api/v4/people"
        assert recorder.last.url.params["pageNumber"] == "1"
        assert recorder.last.url.params["pageSize"] == "10"

    @pytest.mark.asyncio
    async def test_get_by_id(self, client, recorder):
        await client.api_keys.get_by_id("abc")
        assert recorder.last.url.path == "/api/v4/apikeys/abc"

    @pytest.mark.asyncio
    async def test_id_is_escaped_as_one_segment(self, client, recorder):
        await client.persons.get_by_id("a/b")
        assert recorder.last.url.raw_path == b"/api/v4/people/a%2Fb"

    @pytest.mark.asyncio
    async def test_create_posts_camel_case_body(self, client, recorder):
        await client.persons.create(samples.new_person())
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/v4/people"
        body = json.loads(recorder.last.content)
        assert body["legalName"] == "Persona de Prueba"
        assert "id" not in body

    @pytest.mark.asyncio
    async def test_update_puts_to_id(self, client, recorder):
        await client.products.update("prod-1", samples.product_update("prod-1"))
        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v4/products/prod-1"
        body = json.loads(recorder.last.content)
        assert body["id"] == "prod-1"
        assert body["unitPrice"] == 200

    @pytest.mark.asyncio
    async def test_delete(self, client, recorder):
        await client.persons.delete("p1")
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/v4/people/p1"

    @pytest.mark.asyncio
    async def test_product_taxes(self, client, recorder):
        await client.products.get_taxes("prod-1")
        assert recorder.last.url.path == "/api/v4/products/prod-1/taxes"


class TestTaxFiles:

    @pytest.mark.asyncio
    async def test_default_values_and_references(self, client, recorder):
        await client.tax_files.get_default_values("p1")
        assert recorder.last.url.path == "/api/v4/tax-files/p1/default-values"
        await client.tax_files.get_default_references("p1")
        assert recorder.last.url.path == "/api/v4/tax-files/p1/default-references"

    @pytest.mark.asyncio
    async def test_certificate_upload_body(self, client, recorder):
        await client.tax_files.create(samples.csd_certificate("p1"))
        body = json.loads(recorder.last.content)
        assert body["personId"] == "p1"
        assert body["tin"] == "EKU9003173C9"
        assert body["fileType"] == 0
        assert body["password"] == "12345678a"


class TestCatalogs:

    @pytest.mark.asyncio
    async def test_list(self, client, recorder):
        await client.catalogs.get_list()
        assert recorder.last.url.path == "/api/v4/catalogs"

    @pytest.mark.asyncio
    async def test_record_by_id(self, client, recorder):
        await client.catalogs.get_record_by_id("SatProductCodes", "84111500")
        assert recorder.last.url.path == "/api/v4/catalogs/SatProductCodes/key/84111500"

    @pytest.mark.asyncio
    async def test_search(self, client, recorder):
        await client.catalogs.search_catalog("SatUnitMeasurements", "inter", 1, 10)
        assert recorder.last.url.path == "/api/v4/catalogs/SatUnitMeasurements/inter"
        assert recorder.last.url.params["pageSize"] == "10"

    @pytest.mark.asyncio
    async def test_download_catalog_by_name(self, client, recorder):
        await client.download_catalogs.get_record_by_name("SatInvoiceStatuses")
        assert recorder.last.url.path == "/api/v4/download-catalogs/SatInvoiceStatuses"


class TestDownloads:

    @pytest.mark.asyncio
    async def test_create_test_rule(self, client, recorder):
        await client.download_rules.create_test_rule()
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/v4/download-rules/test"

    @pytest.mark.asyncio
    async def test_xmls_and_meta_items(self, client, recorder):
        await client.download_requests.get_xmls("r1")
        assert recorder.last.url.path == "/api/v4/download-requests/r1/xmls"
        await client.download_requests.get_metadata_items("r1")
        assert recorder.last.url.path == "/api/v4/download-requests/r1/meta-items"

    @pytest.mark.asyncio
    async def test_search_by_creation_date(self, client, recorder):
        await client.download_requests.search(datetime(2025, 1, 15))
        assert recorder.last.url.path == "/api/v4/download-requests/search"
        assert recorder.last.url.params["createdAt"] == "2025-01-15T00:00:00"

    @pytest.mark.asyncio
    async def test_package_data_becomes_file_list(self):
        recorder = Recorder(
            body={
                "succeeded": True,
                "data": [{"base64File": "aGVsbG8=", "fileName": "pkg.zip", "fileExtension": ".zip"}],
            }
        )
        client = make_client(recorder)
        result = await client.download_requests.download_package("r1")

        assert recorder.last.url.path == "/api/v4/download-requests/r1/package"
        assert result.succeeded is True
        assert result.data == [
            FileResponse(base64_file="aGVsbG8=", file_name="pkg.zip", file_extension=".zip")
        ]

    @pytest.mark.asyncio
    async def test_single_package_object_is_wrapped_in_list(self):
        recorder = Recorder(
            body={"succeeded": True, "data": {"base64File": "aGVsbG8=", "fileName": "pkg.zip"}}
        )
        result = await make_client(recorder).download_requests.download_package("r1")
        assert len(result.data) == 1
        assert result.data[0].file_name == "pkg.zip"

    @pytest.mark.asyncio
    async def test_raw_request_data_becomes_file(self):
        recorder = Recorder(
            body={"succeeded": True, "data": {"base64File": "PHg+", "fileName": "req.xml"}}
        )
        client = make_client(recorder)
        result = await client.download_requests.download_sat_request("r1")

        assert recorder.last.url.path == "/api/v4/download-requests/r1/raw-request"
        assert isinstance(result.data, FileResponse)
        assert result.data.file_name == "req.xml"

    @pytest.mark.asyncio
    async def test_raw_response_path(self, client, recorder):
        recorder.body = {"succeeded": True, "data": {"base64File": "PHg+", "fileName": "r.xml"}}
        await client.download_requests.download_sat_response("r1")
        assert recorder.last.url.path == "/api/v4/download-requests/r1/raw-response"

    @pytest.mark.asyncio
    async def test_unexpected_file_payload_is_a_failed_envelope(self):
        recorder = Recorder(body={"succeeded": True, "data": {"unexpected": True}})
        result = await make_client(recorder).download_requests.download_sat_response("r1")
        assert result.succeeded is False
        assert result.message == "Unexpected file payload from FiscalAPI"

    @pytest.mark.asyncio
    async def test_failed_download_is_returned_untouched(self):
        recorder = Recorder(
            body={"succeeded": False, "message": "Package not ready"}, status=400
        )
        result = await make_client(recorder).download_requests.download_package("r1")
        assert result.succeeded is False
        assert result.message == "Package not ready"
        assert result.data is None
