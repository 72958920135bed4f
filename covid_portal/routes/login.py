"""
Covid Portal Backend - Login Route Handler
============================================

What:  Handles POST /login/, exchanging a username and password for a bearer token.
How:   Validates the JSON body, delegates to UserService, returns {"jwtToken": ...}.
Who:   Any client; this is the only route NOT behind the auth gate.

Error responses (handled by global exception handlers):
    HTTP 400: "Invalid user" / "Invalid password" (plain text)
    HTTP 400: Malformed body (JSON, from request validation)
    HTTP 500: Credential store unavailable (JSON)
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from covid_portal.database import get_db_session
from covid_portal.schemas.auth import LoginRequest, LoginResponse
from covid_portal.schemas.common import BadRequestResponse, ServerErrorResponse
from covid_portal.services.user_service import user_service


router = APIRouter(tags=["Auth"])


@router.post(
    "/login/",
    response_model=LoginResponse,
    responses={
        200: {"description": "Credentials accepted", "model": LoginResponse},
        400: {"description": "Invalid user, invalid password, or malformed body", "model": BadRequestResponse},
        500: {"description": "Server error", "model": ServerErrorResponse},
    },
    summary="Log in and obtain a bearer token",
)
async def login(
    credentials: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    """
    Verify credentials and return a signed token.

    The signing secret comes from the settings the app was created with;
    it is handed to the service explicitly.
    """
    cfg = request.app.state.settings
    return await user_service.login(
        db=db,
        username=credentials.username,
        password=credentials.password,
        secret=cfg.jwt_secret,
        algorithm=cfg.jwt_algorithm,
    )
