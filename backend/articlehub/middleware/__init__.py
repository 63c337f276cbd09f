# Middleware package init
"""
ArticleHub Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: sets the correlation ID used by every later log line
    2. Logging: logs method, path, status and duration with that ID

    Responses travel the chain in reverse, so the X-Request-ID header is
    attached after logging has recorded the final status.
"""
