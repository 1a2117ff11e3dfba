"""
FiscalAPI Samples — Bulk Download Catalog Routes
==================================================

What:  The catalogs used to build download rules and requests (document
       types, statuses, and so on).
"""

from fastapi import APIRouter, Depends

from fiscal_samples.routes.results import ENVELOPE_RESPONSES, respond
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

router = APIRouter(
    prefix="/api/v4/downloadcatalogs", tags=["DownloadCatalogs"], responses=ENVELOPE_RESPONSES
)


@router.get("", summary="All download catalog names")
async def get_download_catalogs(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_catalogs.get_list()
    return respond(result)


@router.get("/{catalog_name}", summary="Records of one download catalog")
async def get_download_catalog(
    catalog_name: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.download_catalogs.get_record_by_name(catalog_name)
    return respond(result)
