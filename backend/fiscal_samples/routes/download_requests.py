"""
FiscalAPI Samples — Bulk Download Request Routes
==================================================

What:  Create and inspect SAT bulk-download requests, list the XMLs and
       metadata they produced, and save the package or the raw SAT
       request/response to disk.

File Downloads:
    /{id}/package, /{id}/raw-request and /{id}/raw-response fetch base64
    file content from FiscalAPI, decode it, and write it under
    DOWNLOADS_ROOT (default ./facturas) via FileService. The response only
    confirms the write:

        {"message": "Archivo descargado y guardado en disco.", "fileName": "..."}

    A package download returns a list of files; only the first one is
    written. An empty list is a 404.

Route Order:
    /search is declared before /{download_request_id} so "search" is never
    captured as an id.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query

from fiscal_samples import samples
from fiscal_samples.exceptions import NotFoundError
from fiscal_samples.routes.results import ENVELOPE_RESPONSES, FILE_RESPONSES, respond
from fiscal_samples.schemas.fiscal import FileResponse
from fiscal_samples.schemas.responses import FileSavedResponse
from fiscal_samples.services.file_service import FileService, get_file_service
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v4/downloadrequests", tags=["DownloadRequests"], responses=ENVELOPE_RESPONSES
)


async def _save(file: FileResponse, file_service: FileService) -> FileSavedResponse:
    path = await file_service.save_file(file)
    return FileSavedResponse(file_name=path.name)


@router.get("", summary="Paged list of download requests (page 1, size 10)")
async def get_download_requests_page(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_requests.get_list(
        samples.FIRST_PAGE, samples.DEFAULT_PAGE_SIZE
    )
    return respond(result)


@router.post("", summary="Create a download request for the last five days")
async def create_download_request(client: FiscalApiClient = Depends(get_fiscal_client)):
    """Manual request over the sample rule, from five days ago until now."""
    result = await client.download_requests.create(samples.new_download_request())
    return respond(result)


@router.get("/search", summary="Download requests created on a date")
async def search_download_requests(
    created_at: datetime = Query(..., alias="createdAt", description="Creation date to match"),
    client: FiscalApiClient = Depends(get_fiscal_client),
):
    result = await client.download_requests.search(created_at)
    return respond(result, data_only=False)


@router.get("/{download_request_id}", summary="Download request by id")
async def get_download_request(
    download_request_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.download_requests.get_by_id(download_request_id)
    return respond(result)


@router.delete("/{download_request_id}", summary="Delete a download request")
async def delete_download_request(
    download_request_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.download_requests.delete(download_request_id)
    return respond(result)


@router.get("/{download_request_id}/xmls", summary="XMLs downloaded by a request")
async def get_download_request_xmls(
    download_request_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.download_requests.get_xmls(download_request_id)
    return respond(result)


@router.get("/{download_request_id}/meta-items", summary="Metadata items downloaded by a request")
async def get_download_request_meta_items(
    download_request_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.download_requests.get_metadata_items(download_request_id)
    return respond(result)


@router.get(
    "/{download_request_id}/package",
    response_model=FileSavedResponse,
    responses=FILE_RESPONSES,
    summary="Save the request's package to disk",
)
async def download_package(
    download_request_id: str,
    client: FiscalApiClient = Depends(get_fiscal_client),
    file_service: FileService = Depends(get_file_service),
):
    result = await client.download_requests.download_package(download_request_id)
    if not result.succeeded:
        return respond(result)

    files = result.data or []
    if not files:
        raise NotFoundError(
            resource="package",
            resource_id=download_request_id,
            message="No se encontró el archivo del paquete.",
        )
    if len(files) > 1:
        logger.info(
            "Package %s has %d files; saving only the first", download_request_id, len(files)
        )
    return await _save(files[0], file_service)


@router.get(
    "/{download_request_id}/raw-request",
    response_model=FileSavedResponse,
    responses=FILE_RESPONSES,
    summary="Save the raw SAT request to disk",
)
async def download_sat_request(
    download_request_id: str,
    client: FiscalApiClient = Depends(get_fiscal_client),
    file_service: FileService = Depends(get_file_service),
):
    result = await client.download_requests.download_sat_request(download_request_id)
    if not result.succeeded:
        return respond(result)
    return await _save(result.data, file_service)


@router.get(
    "/{download_request_id}/raw-response",
    response_model=FileSavedResponse,
    responses=FILE_RESPONSES,
    summary="Save the raw SAT response to disk",
)
async def download_sat_response(
    download_request_id: str,
    client: FiscalApiClient = Depends(get_fiscal_client),
    file_service: FileService = Depends(get_file_service),
):
    result = await client.download_requests.download_sat_response(download_request_id)
    if not result.succeeded:
        return respond(result)
    return await _save(result.data, file_service)
