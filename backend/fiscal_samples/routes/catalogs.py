"""
FiscalAPI Samples — SAT Catalog Routes
========================================

What:  Catalog listing, single record lookup and text search over SAT
       catalogs, all with hardcoded catalog names and search terms.
"""

from fastapi import APIRouter, Depends

from fiscal_samples import samples
from fiscal_samples.routes.results import ENVELOPE_RESPONSES, respond
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

router = APIRouter(prefix="/api/catalogs", tags=["Catalogs"], responses=ENVELOPE_RESPONSES)


@router.get("/disponibles", summary="All available catalogs")
async def get_available_catalogs(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.catalogs.get_list()
    return respond(result)


@router.get("/record", summary="Record 84111500 of SatProductCodes")
async def get_catalog_record(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.catalogs.get_record_by_id(
        samples.SAT_PRODUCT_CODES, samples.SAMPLE_PRODUCT_CODE
    )
    return respond(result)


@router.get("/buscar-catalogo", summary="Search 'inter' in SatUnitMeasurements")
async def search_catalog(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.catalogs.search_catalog(
        samples.SAT_UNIT_MEASUREMENTS,
        samples.UNIT_SEARCH_TEXT,
        samples.FIRST_PAGE,
        samples.DEFAULT_PAGE_SIZE,
    )
    return respond(result)


@router.get("/buscar-codigo-producto-servicio", summary="Search 'serv' in SatProductCodes")
async def search_product_codes(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.catalogs.search_catalog(
        samples.SAT_PRODUCT_CODES,
        samples.PRODUCT_SEARCH_TEXT,
        samples.FIRST_PAGE,
        samples.DEFAULT_PAGE_SIZE,
    )
    return respond(result)


@router.get("/buscar-codigo-unidad", summary="Search 'inter' in SatUnitMeasurements")
async def search_unit_codes(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.catalogs.search_catalog(
        samples.SAT_UNIT_MEASUREMENTS,
        samples.UNIT_SEARCH_TEXT,
        samples.FIRST_PAGE,
        samples.DEFAULT_PAGE_SIZE,
    )
    return respond(result)
