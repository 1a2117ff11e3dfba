"""
FiscalAPI Samples — Product Routes
====================================

What:  CRUD over FiscalAPI products plus their tax lines.

Two update flavors:
    PUT /actualizar-producto/{id}   description/price/codes only; taxes untouched
    PUT /actualizar-impuestos/{id}  also sends a tax list, which REPLACES
                                    the product's taxes (IVA 16% transferred,
                                    ISR 10% withheld, 2/3 of IVA withheld)
"""

from fastapi import APIRouter, Depends

from fiscal_samples import samples
from fiscal_samples.routes.results import ENVELOPE_RESPONSES, respond
from fiscal_samples.services.fiscal_client import FiscalApiClient, get_fiscal_client

router = APIRouter(prefix="/api/products", tags=["Products"], responses=ENVELOPE_RESPONSES)


@router.get("/obtener-lista-paginada", summary="Paged list of products (page 1, size 10)")
async def get_products_page(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.products.get_list(samples.FIRST_PAGE, samples.DEFAULT_PAGE_SIZE)
    return respond(result)


@router.post("/crear-producto", summary="Create the sample product")
async def create_product(client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.products.create(samples.new_product())
    return respond(result)


@router.get("/{product_id}", summary="Product by id")
async def get_product(product_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    """Returns the whole envelope on success, not just its data."""
    result = await client.products.get_by_id(product_id)
    return respond(result, data_only=False)


@router.put("/actualizar-producto/{product_id}", summary="Update a product with sample data")
async def update_product(product_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.products.update(product_id, samples.product_update(product_id))
    return respond(result)


@router.put("/actualizar-impuestos/{product_id}", summary="Replace a product's taxes")
async def update_product_taxes(
    product_id: str, client: FiscalApiClient = Depends(get_fiscal_client)
):
    result = await client.products.update(product_id, samples.product_taxes_update(product_id))
    return respond(result)


@router.get("/{product_id}/taxes", summary="Tax lines of a product")
async def get_product_taxes(product_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.products.get_taxes(product_id)
    return respond(result)


@router.delete("/{product_id}", summary="Delete a product")
async def delete_product(product_id: str, client: FiscalApiClient = Depends(get_fiscal_client)):
    result = await client.products.delete(product_id)
    return respond(result)
