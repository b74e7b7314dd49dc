"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """Body of POST /auth/signup. Lengths and email syntax are checked by the identity service."""

    name: str = Field(..., description="Display name (at least 2 characters)")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password (6-128 characters)")


class SigninRequest(BaseModel):
    """Credentials for signin."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class UserOut(BaseModel):
    """Public user profile (no password hash)."""

    id: int
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class TokenMeta(BaseModel):
    """Meta returned with signup/signin."""

    access_token: str = Field(..., description="JWT bearer token")


class CurrentUser(BaseModel):
    """Authenticated user for dependency injection."""

    id: int
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}


class AuthContent(BaseModel):
    data: UserOut
    meta: TokenMeta


class AuthResponse(BaseModel):
    """Envelope for signup/signin: user in ``data``, token in ``meta``."""

    status: Literal[True] = True
    content: AuthContent
