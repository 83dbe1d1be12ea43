# Middleware package init
"""
Portfolio API — Middleware Package
===================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assigns the correlation ID used by every log line and
       error body of the request
    2. Logging: logs method, path, status and duration once the response
       is ready
"""
