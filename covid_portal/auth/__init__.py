"""Authentication: password hashing, bearer token signing, and the request gate.

- `security`: pure functions (no request, no database, no global secret)
- `deps`: the request gate and the route class every protected router uses
"""

from .deps import AuthenticatedRoute, authenticate
from .security import hash_password, issue_token, verify_password, verify_token

__all__ = [
    "AuthenticatedRoute",
    "authenticate",
    "hash_password",
    "issue_token",
    "verify_password",
    "verify_token",
]
