"""
FiscalAPI Samples — Route Tests: SAT Bulk Downloads
=====================================================

What:  Download catalogs, rules and requests, including the endpoints that
       decode a file from FiscalAPI and write it to DOWNLOADS_ROOT.

Test Strategy:
    ✅ Literal segments (/search, /test) win over /{id}
    ✅ Package: first file written, empty list → 404, failure → 400
    ✅ Raw SAT request/response written under their basename
    ✅ Invalid base64 from FiscalAPI → 500 file_storage_error
"""

import base64
from datetime import datetime

import pytest

from fiscal_samples import samples
from fiscal_samples.schemas.fiscal import DownloadRequest, FileResponse

from conftest import envelope, failed


def file_of(content: bytes, name: str) -> FileResponse:
    return FileResponse(base64_file=base64.b64encode(content).decode("ascii"), file_name=name)


class TestDownloadCatalogRoutes:

    @pytest.mark.asyncio
    async def test_list(self, test_client, fake_client):
        fake_client.download_catalogs.get_list.return_value = envelope(["SatInvoiceStatuses"])

        response = await test_client.get("/api/v4/downloadcatalogs")

        assert response.status_code == 200
        assert response.json() == ["SatInvoiceStatuses"]

    @pytest.mark.asyncio
    async def test_record_by_name(self, test_client, fake_client):
        fake_client.download_catalogs.get_record_by_name.return_value = envelope([{"id": "Vigente"}])

        response = await test_client.get("/api/v4/downloadcatalogs/SatInvoiceStatuses")

        assert response.json() == [{"id": "Vigente"}]
        fake_client.download_catalogs.get_record_by_name.assert_awaited_once_with(
            "SatInvoiceStatuses"
        )


class TestDownloadRuleRoutes:

    @pytest.mark.asyncio
    async def test_list(self, test_client, fake_client):
        fake_client.download_rules.get_list.return_value = envelope({"items": []})

        await test_client.get("/api/v4/downloadrules")

        fake_client.download_rules.get_list.assert_awaited_once_with(1, 10)

    @pytest.mark.asyncio
    async def test_create_sends_sample_rule(self, test_client, fake_client):
        fake_client.download_rules.create.return_value = envelope({"id": "r1"})

        response = await test_client.post("/api/v4/downloadrules")

        assert response.json() == {"id": "r1"}
        sent = fake_client.download_rules.create.await_args.args[0]
        assert sent.person_id == samples.SAMPLE_RULE_PERSON_ID
        assert sent.sat_invoice_status_id == "Vigente"

    @pytest.mark.asyncio
    async def test_test_rule_is_not_an_id(self, test_client, fake_client):
        fake_client.download_rules.create_test_rule.return_value = envelope({"id": "t1"})

        response = await test_client.post("/api/v4/downloadrules/test")

        assert response.json() == {"id": "t1"}
        fake_client.download_rules.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_update_delete(self, test_client, fake_client):
        fake_client.download_rules.get_by_id.return_value = envelope({"id": "r1"})
        fake_client.download_rules.update.return_value = envelope({"id": "r1"})
        fake_client.download_rules.delete.return_value = envelope(True)

        got = await test_client.get("/api/v4/downloadrules/r1")
        updated = await test_client.put("/api/v4/downloadrules/r1")
        deleted = await test_client.delete("/api/v4/downloadrules/r1")

        assert got.json() == {"id": "r1"}
        assert updated.status_code == 200
        assert deleted.json() is True
        _, model = fake_client.download_rules.update.await_args.args
        assert model.description == "Regla descarga actualizada"


class TestDownloadRequestRoutes:

    @pytest.mark.asyncio
    async def test_list(self, test_client, fake_client):
        fake_client.download_requests.get_list.return_value = envelope({"items": []})

        await test_client.get("/api/v4/downloadrequests")

        fake_client.download_requests.get_list.assert_awaited_once_with(1, 10)

    @pytest.mark.asyncio
    async def test_create_covers_last_five_days(self, test_client, fake_client):
        fake_client.download_requests.create.return_value = envelope({"id": "dr1"})

        await test_client.post("/api/v4/downloadrequests")

        sent = fake_client.download_requests.create.await_args.args[0]
        assert isinstance(sent, DownloadRequest)
        assert sent.download_rule_id == samples.SAMPLE_DOWNLOAD_RULE_ID
        assert (sent.end_date - sent.start_date).days == 5

    @pytest.mark.asyncio
    async def test_search_returns_whole_envelope(self, test_client, fake_client):
        fake_client.download_requests.search.return_value = envelope([{"id": "dr1"}])

        response = await test_client.get(
            "/api/v4/downloadrequests/search", params={"createdAt": "2025-01-15T00:00:00"}
        )

        assert response.status_code == 200
        assert response.json()["data"] == [{"id": "dr1"}]
        fake_client.download_requests.search.assert_awaited_once_with(datetime(2025, 1, 15))
        fake_client.download_requests.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_requires_created_at(self, test_client, fake_client):
        response = await test_client.get("/api/v4/downloadrequests/search")

        assert response.status_code == 422
        fake_client.download_requests.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_delete_xmls_meta_items(self, test_client, fake_client):
        requests = fake_client.download_requests
        requests.get_by_id.return_value = envelope({"id": "dr1"})
        requests.delete.return_value = envelope(True)
        requests.get_xmls.return_value = envelope({"items": ["x"]})
        requests.get_metadata_items.return_value = envelope({"items": ["m"]})

        assert (await test_client.get("/api/v4/downloadrequests/dr1")).json() == {"id": "dr1"}
        assert (await test_client.delete("/api/v4/downloadrequests/dr1")).json() is True
        assert (await test_client.get("/api/v4/downloadrequests/dr1/xmls")).json() == {"items": ["x"]}
        assert (
            await test_client.get("/api/v4/downloadrequests/dr1/meta-items")
        ).json() == {"items": ["m"]}

    @pytest.mark.asyncio
    async def test_package_writes_first_file(self, test_client, fake_client, downloads_dir):
        fake_client.download_requests.download_package.return_value = envelope(
            [file_of(b"PK-one", "one.zip"), file_of(b"PK-two", "two.zip")]
        )

        response = await test_client.get("/api/v4/downloadrequests/dr1/package")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Archivo descargado y guardado en disco.",
            "fileName": "one.zip",
        }
        assert (downloads_dir / "one.zip").read_bytes() == b"PK-one"
        assert not (downloads_dir / "two.zip").exists()

    @pytest.mark.asyncio
    async def test_empty_package_is_404(self, test_client, fake_client):
        fake_client.download_requests.download_package.return_value = envelope([])

        response = await test_client.get("/api/v4/downloadrequests/dr1/package")

        assert response.status_code == 404
        assert response.json()["message"] == "No se encontró el archivo del paquete."

    @pytest.mark.asyncio
    async def test_failed_package_is_400(self, test_client, fake_client, downloads_dir):
        fake_client.download_requests.download_package.return_value = failed("Not ready")

        response = await test_client.get("/api/v4/downloadrequests/dr1/package")

        assert response.status_code == 400
        assert response.json()["message"] == "Not ready"
        assert not downloads_dir.exists() or not any(downloads_dir.iterdir())

    @pytest.mark.asyncio
    async def test_raw_request_written_under_basename(self, test_client, fake_client, downloads_dir):
        fake_client.download_requests.download_sat_request.return_value = envelope(
            file_of(b"<soap/>", "..\\..\\solicitud.xml")
        )

        response = await test_client.get("/api/v4/downloadrequests/dr1/raw-request")

        assert response.status_code == 200
        assert response.json()["fileName"] == "solicitud.xml"
        assert (downloads_dir / "solicitud.xml").read_bytes() == b"<soap/>"

    @pytest.mark.asyncio
    async def test_raw_response_written(self, test_client, fake_client, downloads_dir):
        fake_client.download_requests.download_sat_response.return_value = envelope(
            file_of(b"<resp/>", "respuesta.xml")
        )

        response = await test_client.get("/api/v4/downloadrequests/dr1/raw-response")

        assert response.status_code == 200
        assert response.json()["message"] == "Archivo descargado y guardado en disco."
        assert (downloads_dir / "respuesta.xml").read_bytes() == b"<resp/>"

    @pytest.mark.asyncio
    async def test_invalid_base64_is_500(self, test_client, fake_client):
        fake_client.download_requests.download_sat_response.return_value = envelope(
            FileResponse(base64_file="%%%", file_name="respuesta.xml")
        )

        response = await test_client.get("/api/v4/downloadrequests/dr1/raw-response")

        assert response.status_code == 500
        assert response.json()["error"] == "file_storage_error"
