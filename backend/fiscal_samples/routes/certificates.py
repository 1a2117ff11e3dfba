"""
FiscalAPI Samples — Certificate (Tax File) Routes
===================================================

What:  Upload, list, read and delete CSD certificates and private keys,
       plus the "default" (latest valid) pair of a person.

Upload Behavior:
    POST /cargar-certificados/{person_id} uploads two files, the sample CSD
    certificate and then its private key, and ALWAYS answers 200 with both
    envelopes:

        {
            "certificadoCsdResponse":  {data, succeeded, message, ...},
            "clavePrivadaCsdResponse": {data, succeeded, message, ...}
        }

    One upload can fail while the other succeeds, so the caller inspects
    each `succeeded` instead of relying on the status code.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from fiscal_samples import samples
from fiscal_samples.routes.results import ENVELOPE_RESPONSES, respond
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/certificates", tags=["Certificates"], responses=ENVELOPE_RESPONSES
)


@router.get("/listar-certificados", summary="Paged list of tax files (page 1, size 10)")
async def list_certificates(client: FiscalApiClient = Depends(get_fiscal_client)):
    """Returns the whole envelope (with the page inside) on success."""
    result = await client.tax_files.get_list(samples.FIRST_PAGE, samples.DEFAULT_PAGE_SIZE)
    return respond(result, data_only=False)


@router.post(
    "/cargar-certificados/{person_id}",
    summary="Upload the sample CSD certificate and private key for a person",
)
async def upload_certificates(
    person_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
) -> JSONResponse:
    certificate_result = await client.tax_files.create(samples.csd_certificate(person_id))
    private_key_result = await client.tax_files.create(samples.csd_private_key(person_id))

    logger.info(
        "CSD upload for person %s: certificate=%s private_key=%s",
        person_id,
        certificate_result.succeeded,
        private_key_result.succeeded,
    )
    return JSONResponse(
        status_code=200,
        content={
            "certificadoCsdResponse": certificate_result.to_response(),
            "clavePrivadaCsdResponse": private_key_result.to_response(),
        },
    )


@router.get("/obtener-certificado-by-id/{tax_file_id}", summary="Tax file by id")
async def get_certificate(tax_file_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.tax_files.get_by_id(tax_file_id)
    return respond(result)


@router.delete("/eliminar-certificado/{tax_file_id}", summary="Delete a tax file")
async def delete_certificate(
    tax_file_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.tax_files.delete(tax_file_id)
    return respond(result, data_only=False)


@router.get(
    "/cert-default-values/{person_id}",
    summary="Latest valid certificate and key of a person (with content)",
)
async def get_default_values(person_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.tax_files.get_default_values(person_id)
    return respond(result)


@router.get(
    "/cert-default-refs/{person_id}",
    summary="Ids of the latest valid certificate and key of a person",
)
async def get_default_references(
    person_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.tax_files.get_default_references(person_id)
    return respond(result)
