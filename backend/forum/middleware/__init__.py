"""
Forum Backend — Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Access Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so the access log line and every error response
      carry the same correlation id.
    - Access logging measures the full handler duration and logs the status.
"""
