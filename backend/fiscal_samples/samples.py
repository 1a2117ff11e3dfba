"""
FiscalAPI Samples — Demo Payloads
==================================

What:  The fixed inputs every demo endpoint sends to FiscalAPI: page sizes,
       catalog names, sample people/products, the test CSD certificate and
       key, download rules and requests.
Why:   The endpoints are demonstrations, not a CRUD API: they take no body
       and always send the same sample data. Keeping that data here leaves
       the route handlers as plain "call, then map the result" glue, and
       gives tests one place to assert against.

The CSD certificate and private key below are SAT's public test
credentials for the RFC EKU9003173C9 (ESCUELA KEMPER URGATE). They only
work against FiscalAPI's test environment.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from fiscal_samples.schemas.fiscal import (
    ApiKey,
    ApiKeyStatus,
    DownloadRequest,
    DownloadRule,
    FileType,
    Person,
    Product,
    ProductTax,
    TaxFile,
)

# ── Paging ────────────────────────────────────────────────────────────────
FIRST_PAGE = 1
API_KEYS_PAGE_SIZE = 2
DEFAULT_PAGE_SIZE = 10

# ── Catalogs ──────────────────────────────────────────────────────────────
SAT_PRODUCT_CODES = "SatProductCodes"
SAT_UNIT_MEASUREMENTS = "SatUnitMeasurements"
SAMPLE_PRODUCT_CODE = "84111500"  # Servicios de facturación
UNIT_SEARCH_TEXT = "inter"
PRODUCT_SEARCH_TEXT = "serv"

# ── Tax Files ─────────────────────────────────────────────────────────────
TEST_CSD_TIN = "EKU9003173C9"
TEST_CSD_PASSWORD = "12345678a"

TEST_CSD_CERTIFICATE = (
    "MIIFsDCCA5igAwIBAgIUMzAwMDEwMDAwMDA1MDAwMDM0MTYwDQYJKoZIhvcNAQELBQAwggErMQ8w"
    "DQYDVQQDDAZBQyBVQVQxLjAsBgNVBAoMJVNFUlZJQ0lPIERFIEFETUlOSVNUUkFDSU9OIFRSSUJV"
    "VEFSSUExGjAYBgNVBAsMEVNBVC1JRVMgQXV0aG9yaXR5MSgwJgYJKoZIhvcNAQkBFhlvc2Nhci5t"
    "YXJ0aW5lekBzYXQuZ29iLm14MR0wGwYDVQQJDBQzcmEgY2VycmFkYSBkZSBjYWxpejEOMAwGA1UE"
    "EQwFMDYzNzAxCzAJBgNVBAYTAk1YMRkwFwYDVQQIDBBDSVVEQUQgREUgTUVYSUNPMREwDwYDVQQH"
    "DAhDT1lPQUNBTjERMA8GA1UELRMIMi41LjQuNDUxJTAjBgkqhkiG9w0BCQITFnJlc3BvbnNhYmxl"
    "OiBBQ0RNQS1TQVQwHhcNMjMwNTE4MTE0MzUxWhcNMjcwNTE4MTE0MzUxWjCB1zEnMCUGA1UEAxMe"
    "RVNDVUVMQSBLRU1QRVIgVVJHQVRFIFNBIERFIENWMScwJQYDVQQpEx5FU0NVRUxBIEtFTVBFUiBV"
    "UkdBVEUgU0EgREUgQ1YxJzAlBgNVBAoTHkVTQ1VFTEEgS0VNUEVSIFVSR0FURSBTQSBERSBDVjEl"
    "MCMGA1UELRMcRUtVOTAwMzE3M0M5IC8gVkFEQTgwMDkyN0RKMzEeMBwGA1UEBRMVIC8gVkFEQTgw"
    "MDkyN0hTUlNSTDA1MRMwEQYDVQQLEwpTdWN1cnNhbCAxMIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8A"
    "MIIBCgKCAQEAtmecO6n2GS0zL025gbHGQVxznPDICoXzR2uUngz4DqxVUC/w9cE6FxSiXm2ap8Gc"
    "jg7wmcZfm85EBaxCx/0J2u5CqnhzIoGCdhBPuhWQnIh5TLgj/X6uNquwZkKChbNe9aeFirU/JbyN"
    "7Egia9oKH9KZUsodiM/pWAH00PCtoKJ9OBcSHMq8Rqa3KKoBcfkg1ZrgueffwRLws9yOcRWLb02s"
    "DOPzGIm/jEFicVYt2Hw1qdRE5xmTZ7AGG0UHs+unkGjpCVeJ+BEBn0JPLWVvDKHZAQMj6s5Bku35"
    "+d/MyATkpOPsGT/VTnsouxekDfikJD1f7A1ZpJbqDpkJnss3vQIDAQABox0wGzAMBgNVHRMBAf8E"
    "AjAAMAsGA1UdDwQEAwIGwDANBgkqhkiG9w0BAQsFAAOCAgEAFaUgj5PqgvJigNMgtrdXZnbPfVBb"
    "ukAbW4OGnUhNrA7SRAAfv2BSGk16PI0nBOr7qF2mItmBnjgEwk+DTv8Zr7w5qp7vleC6dIsZFNJo"
    "a6ZndrE/f7KO1CYruLXr5gwEkIyGfJ9NwyIagvHHMszzyHiSZIA850fWtbqtythpAliJ2jF35M5p"
    "NS+YTkRB+T6L/c6m00ymN3q9lT1rB03YywxrLreRSFZOSrbwWfg34EJbHfbFXpCSVYdJRfiVdvHn"
    "ewN0r5fUlPtR9stQHyuqewzdkyb5jTTw02D2cUfL57vlPStBj7SEi3uOWvLrsiDnnCIxRMYJ2UA2"
    "ktDKHk+zWnsDmaeleSzonv2CHW42yXYPCvWi88oE1DJNYLNkIjua7MxAnkNZbScNw01A6zbLsZ3y"
    "8G6eEYnxSTRfwjd8EP4kdiHNJftm7Z4iRU7HOVh79/lRWB+gd171s3d/mI9kte3MRy6V8MMEMCAn"
    "MboGpaooYwgAmwclI2XZCczNWXfhaWe0ZS5PmytD/GDpXzkX0oEgY9K/uYo5V77NdZbGAjmyi8cE"
    "2B2ogvyaN2XfIInrZPgEffJ4AB7kFA2mwesdLOCh0BLD9itmCve3A1FGR4+stO2ANUoiI3w3Tv2y"
    "QSg4bjeDlJ08lXaaFCLW2peEXMXjQUk7fmpb5MNuOUTW6BE="
)

TEST_CSD_PRIVATE_KEY = (
    "MIIFDjBABgkqhkiG9w0BBQ0wMzAbBgkqhkiG9w0BBQwwDgQIAgEAAoIBAQACAggAMBQGCCqGSIb3"
    "DQMHBAgwggS/AgEAMASCBMh4EHl7aNSCaMDA1VlRoXCZ5UUmqErAbucoZQObOaLUEm+I+QZ7Y8Gi"
    "upo+F1XWkLvAsdk/uZlJcTfKLJyJbJwsQYbSpLOCLataZ4O5MVnnmMbfG//NKJn9kSMvJQZhSwAw"
    "oGLYDm1ESGezrvZabgFJnoQv8Si1nAhVGTk9FkFBesxRzq07dmZYwFCnFSX4xt2fDHs1PMpQbeq8"
    "3aL/PzLCce3kxbYSB5kQlzGtUYayiYXcu0cVRu228VwBLCD+2wTDDoCmRXtPesgrLKUR4WWWb5N2"
    "AqAU1mNDC+UEYsENAerOFXWnmwrcTAu5qyZ7GsBMTpipW4Dbou2yqQ0lpA/aB06n1kz1aL6mNqGP"
    "aJ+OqoFuc8Ugdhadd+MmjHfFzoI20SZ3b2geCsUMNCsAd6oXMsZdWm8lzjqCGWHFeol0ik/xHMQv"
    "uQkkeCsQ28PBxdnUgf7ZGer+TN+2ZLd2kvTBOk6pIVgy5yC6cZ+o1Tloql9hYGa6rT3xcMbXlW+9"
    "e5jM2MWXZliVW3ZhaPjptJFDbIfWxJPjz4QvKyJk0zok4muv13Iiwj2bCyefUTRz6psqI4cGaYm9"
    "JpscKO2RCJN8UluYGbbWmYQU+Int6LtZj/lv8p6xnVjWxYI+rBPdtkpfFYRp+MJiXjgPw5B6UGuo"
    "ruv7+vHjOLHOotRo+RdjZt7NqL9dAJnl1Qb2jfW6+d7NYQSI/bAwxO0sk4taQIT6Gsu/8kfZOPC2"
    "xk9rphGqCSS/4q3Os0MMjA1bcJLyoWLp13pqhK6bmiiHw0BBXH4fbEp4xjSbpPx4tHXzbdn8oDsH"
    "KZkWh3pPC2J/nVl0k/yF1KDVowVtMDXE47k6TGVcBoqe8PDXCG9+vjRpzIidqNo5qebaUZu6riWM"
    "Wzldz8x3Z/jLWXuDiM7/Yscn0Z2GIlfoeyz+GwP2eTdOw9EUedHjEQuJY32bq8LICimJ4Ht+zMJK"
    "UyhwVQyAER8byzQBwTYmYP5U0wdsyIFitphw+/IH8+v08Ia1iBLPQAeAvRfTTIFLCs8foyUrj5Zv"
    "2B/wTYIZy6ioUM+qADeXyo45uBLLqkN90Rf6kiTqDld78NxwsfyR5MxtJLVDFkmf2IMMJHTqSfhb"
    "i+7QJaC11OOUJTD0v9wo0X/oO5GvZhe0ZaGHnm9zqTopALuFEAxcaQlc4R81wjC4wrIrqWnbcl2d"
    "xiBtD73KW+wcC9ymsLf4I8BEmiN25lx/OUc1IHNyXZJYSFkEfaxCEZWKcnbiyf5sqFSSlEqZLc4l"
    "UPJFAoP6s1FHVcyO0odWqdadhRZLZC9RCzQgPlMRtji/OXy5phh7diOBZv5UYp5nb+MZ2NAB/eFX"
    "m2JLguxjvEstuvTDmZDUb6Uqv++RdhO5gvKf/AcwU38ifaHQ9uvRuDocYwVxZS2nr9rOwZ8nAh+P"
    "2o4e0tEXjxFKQGhxXYkn75H3hhfnFYjik/2qunHBBZfcdG148MaNP6DjX33M238T9Zw/GyGx00JM"
    "ogr2pdP4JAErv9a5yt4YR41KGf8guSOUbOXVARw6+ybh7+meb7w4BeTlj3aZkv8tVGdfIt3lrwVn"
    "lbzhLjeQY6PplKp3/a5Kr5yM0T4wJoKQQ6v3vSNmrhpbuAtKxpMILe8CQoo="
)

# ── Download Requests / Rules ─────────────────────────────────────────────
SAMPLE_DOWNLOAD_RULE_ID = "89aba371-3f9a-431c-a92d-dcb1e606fcfd"
# Person that received the CFDI to download
SAMPLE_RULE_PERSON_ID = "b0c1cf6c-153a-464e-99df-5741f45d6695"
DOWNLOAD_WINDOW_DAYS = 5


def api_key_for(person_id: str) -> ApiKey:
    return ApiKey(person_id=person_id)


def api_key_update(api_key_id: str) -> ApiKey:
    return ApiKey(
        id=api_key_id,
        description="Api-key server 001",
        api_key_status=ApiKeyStatus.ENABLED,
    )


def csd_certificate(person_id: str) -> TaxFile:
    return TaxFile(
        person_id=person_id,
        base64_file=TEST_CSD_CERTIFICATE,
        file_type=FileType.CERTIFICATE_CSD,
        password=TEST_CSD_PASSWORD,
        tin=TEST_CSD_TIN,
    )


def csd_private_key(person_id: str) -> TaxFile:
    return TaxFile(
        person_id=person_id,
        base64_file=TEST_CSD_PRIVATE_KEY,
        file_type=FileType.PRIVATE_KEY_CSD,
        password=TEST_CSD_PASSWORD,
        tin=TEST_CSD_TIN,
    )


def new_person() -> Person:
    return Person(
        legal_name="Persona de Prueba",
        email="someone4@somewhere.com",
        password="YourStrongPassword123!",
    )


def person_update(person_id: str) -> Person:
    """Regime 601 (General de Ley Personas Morales), CFDI use G01 (goods acquisition)."""
    return Person(
        id=person_id,
        legal_name="Personita 2",
        sat_tax_regime_id="601",
        sat_cfdi_use_id="G01",
        tin="AAA010101AAA",
        zip_code="12345",
        base64_photo="base64",
    )


def new_product() -> Product:
    """Without product_taxes FiscalAPI applies IVA 16% by default."""
    return Product(
        description="Consultoría de software",
        unit_price=Decimal("100"),
        sat_unit_measurement_id="E48",  # Unidad de servicio
        sat_tax_object_id="02",  # Sí objeto de impuesto
        sat_product_code_id=SAMPLE_PRODUCT_CODE,
    )


def product_update(product_id: str) -> Product:
    return Product(
        id=product_id,
        description="Consultoría de software updated.",
        unit_price=Decimal("200"),
        sat_unit_measurement_id="E48",
        sat_tax_object_id="01",  # No objeto de impuesto
        sat_product_code_id="01010101",
    )


def product_taxes_update(product_id: str) -> Product:
    """The tax list replaces every tax the product had."""
    return Product(
        id=product_id,
        description="Consultoría de software updated con impuestos",
        unit_price=Decimal("100"),
        sat_unit_measurement_id="E48",
        sat_tax_object_id="02",
        sat_product_code_id=SAMPLE_PRODUCT_CODE,
        product_taxes=[
            # IVA 16% transferred
            ProductTax(rate=Decimal("0.16"), tax_id="002", tax_flag_id="T", tax_type_id="Tasa"),
            # ISR 10% withheld
            ProductTax(rate=Decimal("0.10"), tax_id="001", tax_flag_id="R", tax_type_id="Tasa"),
            # Two thirds of IVA withheld
            ProductTax(
                rate=Decimal("0.10666666666"), tax_id="002", tax_flag_id="R", tax_type_id="Tasa"
            ),
        ],
    )


def new_download_rule() -> DownloadRule:
    """Received CFDI that are still valid (not cancelled)."""
    return DownloadRule(
        person_id=SAMPLE_RULE_PERSON_ID,
        description="Regla descarga demo ...",
        sat_query_type_id="CFDI",
        download_type_id="Recibidos",
        sat_invoice_status_id="Vigente",
    )


def download_rule_update(rule_id: str) -> DownloadRule:
    return DownloadRule(id=rule_id, description="Regla descarga actualizada")


def new_download_request(now: Optional[datetime] = None) -> DownloadRequest:
    """Manual request for the last DOWNLOAD_WINDOW_DAYS days, ending now."""
    end = now or datetime.now()
    return DownloadRequest(
        download_rule_id=SAMPLE_DOWNLOAD_RULE_ID,
        download_request_type_id="Manual",
        start_date=end - timedelta(days=DOWNLOAD_WINDOW_DAYS),
        end_date=end,
    )
