"""
FiscalAPI Samples — Application Package Initializer
====================================================

What: Marks the `fiscal_samples` directory as a Python package.
Why:  Enables module imports like `from fiscal_samples.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend is a set of demonstration endpoints over the FiscalAPI
    REST service. It is layered like this:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← Hardcoded sample inputs, 200/400 mapping
    ├─────────────────────────────────────┤
    │     Samples (demo payload builders) │  ← The fixed requests each route sends
    ├─────────────────────────────────────┤
    │   Services (FiscalAPI client, disk) │  ← HTTP calls, envelopes, file writes
    ├─────────────────────────────────────┤
    │        Schemas (camelCase models)   │  ← Wire models for FiscalAPI entities
    └─────────────────────────────────────┘

    The routes never talk to httpx directly. They receive a FiscalApiClient
    through FastAPI dependency injection, which is what the tests replace.

NOTE: The route paths of this sample application do not necessarily match
the real FiscalAPI endpoints. They exist only for demonstration. See the
official documentation at https://docs.fiscalapi.com/ for the real API.
"""

__version__ = "1.0.0"
