"""
FiscalAPI Samples — Bulk Download Rule Routes
===============================================

What:  CRUD over the rules that tell FiscalAPI which CFDIs to pull from
       the SAT, plus FiscalAPI's built-in test rule.

/test is declared before /{rule_id} so "test" is never captured as an id.
"""

from fastapi import APIRouter, Depends

from fiscal_samples import samples
from fiscal_samples.routes.results import ENVELOPE_RESPONSES, respond
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

router = APIRouter(
    prefix="/api/v4/downloadrules", tags=["DownloadRules"], responses=ENVELOPE_RESPONSES
)


@router.get("", summary="Paged list of download rules (page 1, size 10)")
async def get_download_rules_page(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_rules.get_list(samples.FIRST_PAGE, samples.DEFAULT_PAGE_SIZE)
    return respond(result)


@router.post("", summary="Create the sample download rule")
async def create_download_rule(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_rules.create(samples.new_download_rule())
    return respond(result)


@router.post("/test", summary="Create FiscalAPI's test download rule")
async def create_test_download_rule(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_rules.create_test_rule()
    return respond(result)


@router.get("/{rule_id}", summary="Download rule by id")
async def get_download_rule(rule_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_rules.get_by_id(rule_id)
    return respond(result)


@router.put("/{rule_id}", summary="Update a download rule's description")
async def update_download_rule(rule_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_rules.update(rule_id, samples.download_rule_update(rule_id))
    return respond(result)


@router.delete("/{rule_id}", summary="Delete a download rule")
async def delete_download_rule(rule_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.download_rules.delete(rule_id)
    return respond(result)
