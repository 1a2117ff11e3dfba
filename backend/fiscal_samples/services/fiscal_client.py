"""
FiscalAPI Samples — FiscalAPI Client Facade
============================================

What:  The one object routes talk to: `client.persons.get_by_id(...)`,
       `client.tax_files.create(...)`, and so on.
Why:   Routes depend on a single collaborator, which FastAPI injects and
       tests replace wholesale through dependency overrides.
How:   Builds one FiscalHttpCore and hands it to every resource, so all
       resources share the connection pool and credentials.
"""

import logging
from typing import Optional

from fiscal_samples.services.fiscal_http import FiscalHttpCore
from fiscal_samples.services.resources import (
    ApiKeyResource,
    CatalogResource,
    DownloadCatalogResource,
    DownloadRequestResource,
    DownloadRuleResource,
    PersonResource,
    ProductResource,
    TaxFileResource,
)

logger = logging.getLogger(__name__)


class FiscalApiClient:
    """
    Facade over every FiscalAPI resource.

    Attributes:
        api_keys, catalogs, tax_files, persons, products,
        download_catalogs, download_rules, download_requests
    """

    def __init__(self, core: Optional[FiscalHttpCore] = None):
        self.core = core or FiscalHttpCore()
        self.api_keys = ApiKeyResource(self.core)
        self.catalogs = CatalogResource(self.core)
        self.tax_files = TaxFileResource(self.core)
        self.persons = PersonResource(self.core)
        self.products = ProductResource(self.core)
        self.download_catalogs = DownloadCatalogResource(self.core)
        self.download_rules = DownloadRuleResource(self.core)
        self.download_requests = DownloadRequestResource(self.core)

    async def aclose(self) -> None:
        await self.core.aclose()
        logger.info("FiscalApiClient closed")


# ── Singleton Instance ────────────────────────────────────────────────────
# One connection pool for the whole process; closed by the app lifespan.
fiscal_client = FiscalApiClient()


def get_fiscal_client() -> FiscalApiClient:
    """FastAPI dependency returning the shared client."""
    return fiscal_client
