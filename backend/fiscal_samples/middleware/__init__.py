# Middleware package init
"""
FiscalAPI Samples — Middleware Package
========================================

What:  Per-request concerns shared by every route.

Chain (outermost first):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route

    Request ID runs outermost so the access log line, the route's own
    warnings and the error handlers all see the same correlation id.
"""
