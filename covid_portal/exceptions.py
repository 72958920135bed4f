"""
Covid Portal Backend - Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for every failure a request can hit.
How:   Each exception carries a client-facing message, the HTTP status it maps
       to, and an optional context dict. Global exception handlers (registered
       in main.py) turn them into exactly one response per request.
Who:   Raised by the auth gate and services; caught by global handlers.

Exception Hierarchy:
    PortalError (base)
    ├── InvalidTokenError          → 401 "Invalid JWT Token"
    │   └── MissingAuthHeaderError → 401 "Invalid JWT Token"
    ├── InvalidUserError           → 400 "Invalid user"
    ├── InvalidPasswordError       → 400 "Invalid password"
    ├── NotFoundError              → 404 "<Resource> not found"
    └── DatabaseError              → 500 {"error": "Internal Server Error"}

Client errors (4xx) are answered with their message as plain text. Server
errors (5xx) are answered with a fixed JSON body; the context dict is logged
server-side and never returned.
"""

from typing import Any, Dict, Optional


class PortalError(Exception):
    """
    Base exception for all portal application errors.

    Attributes:
        message:      Client-facing description (plain-text response body for 4xx)
        status_code:  HTTP status the global handler responds with
        context:      Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidTokenError(PortalError):
    """
    Raised when a bearer token is malformed, blank, or fails signature checks.

    HTTP:    401 Unauthorized, body "Invalid JWT Token"

    Every auth failure shares one body so the client cannot tell a missing
    header from a forged token.
    """

    status_code = 401

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid JWT Token", context=context)


class MissingAuthHeaderError(InvalidTokenError):
    """Raised when a protected route is called without an Authorization header."""


class InvalidUserError(PortalError):
    """Login attempted for a username that is not in the credential store. HTTP 400."""

    status_code = 400

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid user", context=context)


class InvalidPasswordError(PortalError):
    """Login attempted with a password that does not match the stored hash. HTTP 400."""

    status_code = 400

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid password", context=context)


class NotFoundError(PortalError):
    """
    Raised when a requested resource does not exist.

    What:    GET /states/{id}/ or GET /districts/{id}/ matched no row.
    HTTP:    404 Not Found, body "State not found" / "District not found"

    SQLAlchemy returns None for missing records (not an exception); services
    convert None into NotFoundError so the route stays free of HTTP details.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class DatabaseError(PortalError):
    """
    Raised when a database operation fails unexpectedly.

    What:    A query, insert, update or delete raised inside the driver.
    When:    Database file missing or locked, table absent, constraint violation.
    HTTP:    500 Internal Server Error, body {"error": "Internal Server Error"}

    The original driver error is attached as context for the server log only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


# Fixed body of every 500 response; never carries internal details
INTERNAL_SERVER_ERROR_BODY = {"error": "Internal Server Error"}
