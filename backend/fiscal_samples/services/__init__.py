# Services package init
"""
FiscalAPI Samples — Services Layer
====================================

What:  Everything that talks to the outside world: FiscalAPI over HTTP and
       the local disk for downloaded files.

Service Inventory:
    - FiscalHttpCore:   httpx client, auth headers, transport retries,
                        response → ApiResponse envelope
    - resources:        one class per FiscalAPI resource (paths and params)
    - FiscalApiClient:  the resources bundled behind one object, injected
                        into routes via get_fiscal_client()
    - FileService:      base64 decode and write under DOWNLOADS_ROOT
"""
