"""
Covid Portal Backend - Request ID Middleware
==============================================

What:  Assigns a short ID to each incoming request and echoes it in the response.
How:   Uses the client's X-Request-ID when present, otherwise generates one;
       stores it in a ContextVar for loggers and in request.state for handlers.
When:  Outermost custom middleware (runs before request logging).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Client sent X-Request-ID → reuse it
        2. Otherwise → first 8 chars of a new UUID4
        3. Store in ContextVar and request.state
        4. Add to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
