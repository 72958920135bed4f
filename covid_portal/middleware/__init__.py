"""
Covid Portal Backend - Middleware Package
===========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route (auth gate → handler)

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log method, path, status and duration with that ID

Authentication is NOT middleware: protected routers use AuthenticatedRoute so
that POST /login/ can stay open while every other route is gated.
"""
