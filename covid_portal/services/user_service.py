"""
Covid Portal Backend - User Service (Credential Store + Login)
================================================================

What:  Looks up users and exchanges valid credentials for a bearer token.
How:   One parameterized SELECT against `user`, a bcrypt comparison, and a
       token signed with the secret the caller passes in.
Who:   Called by POST /login/ (the only route exempt from the auth gate).

Login Outcomes:
    unknown username   → InvalidUserError     (400 "Invalid user")
    password mismatch  → InvalidPasswordError (400 "Invalid password")
    storage failure    → DatabaseError        (500)
    success            → LoginResponse        (200 {"jwtToken": ...})
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from covid_portal.auth.security import issue_token, verify_password
from covid_portal.exceptions import DatabaseError, InvalidPasswordError, InvalidUserError
from covid_portal.models.user import User
from covid_portal.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)


class UserService:
    """
    Read-only access to the credential store.

    Users are seeded out-of-band; this service never creates, changes or
    removes them.
    """

    async def get_user(self, db: AsyncSession, username: str) -> Optional[User]:
        """
        Fetch a user by username, or None when absent.

        Query plan:
            SELECT username, password FROM user WHERE username = :username
        """
        try:
            result = await db.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not read the credential store",
                context={"error_type": type(e).__name__},
            )

    async def login(
        self,
        db: AsyncSession,
        username: str,
        password: str,
        secret: str,
        algorithm: str = "HS256",
    ) -> LoginResponse:
        """
        Verify credentials and issue a bearer token.

        bcrypt is deliberately slow, so the comparison runs in the threadpool
        instead of on the event loop.

        Raises:
            InvalidUserError:     No row for `username`
            InvalidPasswordError: Stored hash does not match `password`
            DatabaseError:        The lookup failed
        """
        user = await self.get_user(db, username)
        if user is None:
            logger.warning("Login rejected: unknown user")
            raise InvalidUserError()

        is_valid = await run_in_threadpool(verify_password, password, user.password)
        if not is_valid:
            logger.warning("Login rejected: bad password for %s", user.username)
            raise InvalidPasswordError(context={"username": user.username})

        token = issue_token(secret=secret, username=user.username, algorithm=algorithm)
        logger.info("Issued token for %s", user.username)
        return LoginResponse(jwt_token=token)


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
