"""
FiscalAPI Samples — API Key Routes
====================================

What:  List, read, create, update and revoke FiscalAPI API keys.
How:   Each handler sends a fixed sample request (or the id from the path)
       and maps the envelope with respond().
"""

from fastapi import APIRouter, Depends

from fiscal_samples import samples
from fiscal_samples.routes.results import ENVELOPE_RESPONSES, respond
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

router = APIRouter(prefix="/api/apikeys", tags=["ApiKeys"], responses=ENVELOPE_RESPONSES)


@router.get("/obtener-lista-paginada", summary="Paged list of API keys (page 1, size 2)")
async def get_api_keys_page(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.api_keys.get_list(samples.FIRST_PAGE, samples.API_KEYS_PAGE_SIZE)
    return respond(result)


@router.get("/{api_key_id}", summary="API key by id")
async def get_api_key(api_key_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.api_keys.get_by_id(api_key_id)
    return respond(result)


@router.post("/crear-apikey/{person_id}", summary="Create an API key for a person")
async def create_api_key(person_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.api_keys.create(samples.api_key_for(person_id))
    return respond(result)


@router.delete("/{api_key_id}", summary="Revoke (delete) an API key")
async def revoke_api_key(api_key_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    """Returns the whole envelope on success, not just its data."""
    result = await client.api_keys.delete(api_key_id)
    return respond(result, data_only=False)


@router.put("/actualizar-apikey/{api_key_id}", summary="Update an API key with sample data")
async def update_api_key(api_key_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    """Sets description "Api-key server 001" and status Enabled."""
    result = await client.api_keys.update(api_key_id, samples.api_key_update(api_key_id))
    return respond(result)
