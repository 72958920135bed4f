"""
Covid Portal Backend - Password Hashing & Bearer Tokens
=========================================================

What:  Pure functions for the credential check and the stateless token.
How:   bcrypt (via passlib) for stored password digests; HS256 JWTs (PyJWT)
       whose payload is {username, iat}. The signing secret is always an
       explicit argument, never read from global configuration.
Who:   UserService (login) and the auth gate in deps.py.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

import jwt
from passlib.context import CryptContext

from covid_portal.exceptions import InvalidTokenError


_pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")
_JWT_ALG = "HS256"


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plaintext password with a stored bcrypt digest.

    An unreadable digest counts as a mismatch rather than an error.
    """
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def issue_token(*, secret: str, username: str, algorithm: str = _JWT_ALG) -> str:
    """Sign a bearer token for `username`.

    The payload is {username, iat}. No `exp` claim is set, so a token stays
    valid until the secret changes.
    """
    if not secret:
        raise ValueError("jwt_secret_blank")

    payload: Dict[str, Any] = {
        "username": username,
        "iat": int(datetime.now(timezone.utc).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(*, secret: str, token: str, algorithm: str = _JWT_ALG) -> Dict[str, Any]:
    """Check the signature of `token` and return its payload.

    Raises InvalidTokenError for a blank, malformed or forged token, or for a
    payload without a username.
    """
    if not secret:
        raise ValueError("jwt_secret_blank")
    if not token:
        raise InvalidTokenError(context={"reason": "token_blank"})

    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(context={"reason": type(e).__name__}) from e

    if not payload.get("username"):
        raise InvalidTokenError(context={"reason": "token_missing_username"})
    return payload
