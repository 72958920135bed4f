"""
Covid Portal Backend - Auth Gate
==================================

What:  Rejects requests to protected routes unless they carry a valid bearer token.
How:   authenticate() reads `Authorization: Bearer <token>`, verifies the token
       with the secret from app.state.settings, and stores the username on
       request.state. AuthenticatedRoute runs it before FastAPI reads the
       request body, so a missing token is reported as 401 even when the body
       is malformed.
Who:   Used as `route_class` by the /states/ and /districts/ routers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute

from covid_portal.exceptions import MissingAuthHeaderError

from .security import verify_token

logger = logging.getLogger(__name__)


def authenticate(request: Request) -> str:
    """Authenticate a request from its `Authorization: Bearer <token>` header.

    The token is the second whitespace-delimited part of the header; the
    scheme word itself is not inspected. On success the username is attached
    to `request.state.username` for the rest of this request only.

    Raises MissingAuthHeaderError / InvalidTokenError, both answered with
    401 "Invalid JWT Token" by the global handlers.
    """

    auth_header = request.headers.get("authorization")
    if auth_header is None:
        raise MissingAuthHeaderError()

    parts = auth_header.split()
    token = parts[1] if len(parts) > 1 else ""

    cfg = request.app.state.settings
    payload = verify_token(token=token, secret=cfg.jwt_secret, algorithm=cfg.jwt_algorithm)

    username = payload["username"]
    request.state.username = username
    logger.debug("Authenticated request %s %s as %s", request.method, request.url.path, username)
    return username


class AuthenticatedRoute(APIRoute):
    """
    APIRoute that authenticates before any parameter or body handling.

    Router-level dependencies are solved only after the body is decoded, so
    an unauthenticated request with invalid JSON would surface as 400. This
    route class moves the gate in front of the whole handler.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def authenticated_handler(request: Request) -> Response:
            authenticate(request)
            return await handler(request)

        return authenticated_handler
