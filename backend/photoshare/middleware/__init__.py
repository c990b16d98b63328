"""
PhotoShare Backend: Middleware Package
=======================================

Cross-cutting concerns applied to every request, API and static alike.

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler / Static Files

    Responses flow back in reverse, so the logging middleware sees the final
    status code and the request ID header is attached last.
"""
