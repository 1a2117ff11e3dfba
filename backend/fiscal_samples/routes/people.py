"""
FiscalAPI Samples — People Routes
===================================

What:  CRUD over FiscalAPI people (issuers, receivers, customers, users).
       In FiscalAPI they are one resource; only their role in a given
       invoice differs.

Create and update take no request body: they send the sample person from
`fiscal_samples.samples`. A real integration would accept a `Person` body
instead.
"""

from fastapi import APIRouter, Depends

from fiscal_samples import samples
from fiscal_samples.routes.results import ENVELOPE_RESPONSES, respond
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

router = APIRouter(prefix="/api/people", tags=["People"], responses=ENVELOPE_RESPONSES)


@router.get("/obtener-lista-paginada", summary="Paged list of people (page 1, size 10)")
async def get_people_page(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.persons.get_list(samples.FIRST_PAGE, samples.DEFAULT_PAGE_SIZE)
    return respond(result)


@router.post("/crear-persona", summary="Create the sample person")
async def create_person(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.persons.create(samples.new_person())
    return respond(result)


@router.get("/obtener-persona-by-id/{person_id}", summary="Person by id")
async def get_person(person_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.persons.get_by_id(person_id)
    return respond(result)


@router.put("/actualizar-persona/{person_id}", summary="Update a person with sample data")
async def update_person(person_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.persons.update(person_id, samples.person_update(person_id))
    return respond(result)


@router.delete("/borrar-persona/{person_id}", summary="Delete a person")
async def delete_person(person_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.persons.delete(person_id)
    return respond(result, data_only=False)
