"""
Covid Portal Backend - Login Schemas
======================================
"""

from pydantic import BaseModel, Field

from covid_portal.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """Credentials posted to POST /login/."""
    username: str = Field(description="Login name as stored in the user table")
    password: str = Field(description="Plaintext password, compared against the stored hash")


class LoginResponse(CamelModel):
    """
    What:  Successful login result, serialized as {"jwtToken": "<token>"}.
    Who:   Clients send the token back as `Authorization: Bearer <token>`.
    """
    jwt_token: str = Field(description="Signed bearer token (no expiry)")
