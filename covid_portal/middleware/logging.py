"""
Covid Portal Backend - Request Logging Middleware
===================================================

What:  One access log line per HTTP request.
How:   Times the request, then logs method, path, status, duration, request
       ID, client IP and (when the auth gate accepted the token) the username.
       An exception that escapes the app is logged with its traceback and
       answered here with the fixed 500 JSON body, so it still gets an access
       line and an X-Request-ID header.

Log level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Never logged: request bodies (passwords), Authorization headers (tokens).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from covid_portal.exceptions import INTERNAL_SERVER_ERROR_BODY
from covid_portal.middleware.request_id import request_id_var

logger = logging.getLogger("covid_portal.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Duration covers everything downstream: token verification, queries,
    and serialization.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client may be None in testing
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            response = JSONResponse(status_code=500, content=INTERNAL_SERVER_ERROR_BODY)

        duration_ms = (time.perf_counter() - start_time) * 1000
        # Set by the auth gate; absent for /login/ and rejected requests
        username = getattr(request.state, "username", None) or "-"

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] user=%s from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            username,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
                "username": username,
            },
        )

        return response
