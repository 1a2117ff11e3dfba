"""
FiscalAPI Samples — FiscalAPI Wire Models
==========================================

What:  Pydantic models for the entities exchanged with the FiscalAPI REST
       service (people, products, API keys, tax files, download rules and
       requests) plus the response envelope every call returns.
Why:   FiscalAPI speaks camelCase JSON; Python code speaks snake_case.
       An alias generator bridges the two so the rest of the code never
       spells a camelCase key by hand.
How:   All models extend FiscalModel, which sets alias_generator=to_camel
       and populate_by_name=True (construct with snake_case, read either).
       Request bodies are produced by FiscalModel.to_payload().

These models describe FiscalAPI's data, not ours: this application stores
nothing. Fields FiscalAPI returns that are not declared here are kept on
the model as extras so nothing is silently dropped on a round trip.
"""

from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Money and tax rates are Decimal in Python but must travel as JSON numbers.
# Pydantic's default JSON form for Decimal is a string, which FiscalAPI rejects.
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class FiscalModel(BaseModel):
    """Base for every FiscalAPI model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready request body: camelCase keys, unset (None) fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Enumerations
# ══════════════════════════════════════════════════════════════════════════


class ApiKeyStatus(IntEnum):
    DISABLED = 0
    ENABLED = 1


class FileType(IntEnum):
    """Kind of tax file: CSD is the invoicing seal, FIEL the e-signature."""

    CERTIFICATE_CSD = 0
    PRIVATE_KEY_CSD = 1
    CERTIFICATE_FIEL = 2
    PRIVATE_KEY_FIEL = 3


# ══════════════════════════════════════════════════════════════════════════
# Response Envelope
# ══════════════════════════════════════════════════════════════════════════


class ApiResponse(FiscalModel):
    """
    What:  The envelope every FiscalAPI call returns.
    Who:   Produced by FiscalHttpCore for every request; consumed by routes.

    Fields:
        data:             Payload on success (object, list, page, or None)
        succeeded:        The only flag routes look at (200 vs 400)
        message:          Short error/success text from FiscalAPI
        details:          Longer error detail (validation messages, etc.)
        http_status_code: Status FiscalAPI answered with

    The whole envelope is what a 400 response body carries, so it is dumped
    with nulls included rather than via to_payload().
    """

    data: Any = None
    succeeded: bool = False
    message: Optional[str] = None
    details: Any = None
    http_status_code: int = 0

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class FileResponse(FiscalModel):
    """A downloaded file as FiscalAPI returns it: base64 content plus a name."""

    base64_file: str
    file_name: str
    file_extension: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Entities
# ══════════════════════════════════════════════════════════════════════════


class ApiKey(FiscalModel):
    id: Optional[str] = None
    person_id: Optional[str] = None
    description: Optional[str] = None
    api_key_status: Optional[ApiKeyStatus] = None


class Person(FiscalModel):
    """
    A person in FiscalAPI: issuer, receiver, customer or user.

    It is the same resource in every role; only the context in which it is
    used (who issues, who receives) changes.
    """

    id: Optional[str] = None
    legal_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    sat_tax_regime_id: Optional[str] = None
    sat_cfdi_use_id: Optional[str] = None
    tin: Optional[str] = None
    zip_code: Optional[str] = None
    base64_photo: Optional[str] = None


class ProductTax(FiscalModel):
    """
    One tax line of a product.

    tax_id:      SAT tax code ("001" ISR, "002" IVA, "003" IEPS)
    tax_flag_id: "T" transferred, "R" withheld
    tax_type_id: "Tasa", "Cuota" or "Exento"
    """

    rate: JsonDecimal
    tax_id: str
    tax_flag_id: str
    tax_type_id: str


class Product(FiscalModel):
    """
    A product or service.

    When product_taxes is omitted on create, FiscalAPI applies IVA 16%;
    on update it keeps the current taxes. When present, the list replaces
    the existing taxes entirely.
    """

    id: Optional[str] = None
    description: Optional[str] = None
    unit_price: Optional[JsonDecimal] = None
    sat_unit_measurement_id: Optional[str] = None
    sat_tax_object_id: Optional[str] = None
    sat_product_code_id: Optional[str] = None
    product_taxes: Optional[List[ProductTax]] = None


class TaxFile(FiscalModel):
    """A certificate or private key (CSD or FIEL) uploaded for a person."""

    id: Optional[str] = None
    person_id: Optional[str] = None
    tin: Optional[str] = None
    base64_file: Optional[str] = None
    file_type: Optional[FileType] = None
    password: Optional[str] = None


class DownloadRule(FiscalModel):
    """Which CFDI to fetch from SAT in bulk: query type, direction, status."""

    id: Optional[str] = None
    person_id: Optional[str] = None
    description: Optional[str] = None
    sat_query_type_id: Optional[str] = None
    download_type_id: Optional[str] = None
    sat_invoice_status_id: Optional[str] = None


class DownloadRequest(FiscalModel):
    """A bulk-download run of a rule over a date range."""

    id: Optional[str] = None
    download_rule_id: Optional[str] = None
    download_request_type_id: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
