# Routes package init
"""
FiscalAPI Samples — API Routes Package
========================================

What:  One router per FiscalAPI resource, each a thin demo over the client.

Route Inventory:
    - api_keys.py:           /api/apikeys/...
    - catalogs.py:           /api/catalogs/...
    - certificates.py:       /api/certificates/...
    - people.py:             /api/people/...
    - products.py:           /api/products/...
    - download_catalogs.py:  /api/v4/downloadcatalogs/...
    - download_rules.py:     /api/v4/downloadrules/...
    - download_requests.py:  /api/v4/downloadrequests/...
    - health.py:             GET /health
    - results.py:            envelope → HTTP response mapping shared by all

Response Rule:
    FiscalAPI answers every call with an envelope
    {data, succeeded, message, details, httpStatusCode}.
    succeeded → 200 with `data` (a few routes return the whole envelope)
    otherwise → 400 with the whole envelope, whatever FiscalAPI's status was
"""
