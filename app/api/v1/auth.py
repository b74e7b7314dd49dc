"""Signup/signin routes and the bearer-token dependency (get_current_user)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotSignedIn
from app.core.security import InvalidTokenError, create_access_token, verify_access_token
from app.models import User
from app.schemas.auth import (
    AuthContent,
    AuthResponse,
    CurrentUser,
    SigninRequest,
    SignupRequest,
    TokenMeta,
    UserOut,
)
from app.schemas.common import Content, Envelope
from app.services import identity

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _auth_response(user: User) -> AuthResponse:
    token = create_access_token(user.id)
    return AuthResponse(
        content=AuthContent(
            data=UserOut.model_validate(user),
            meta=TokenMeta(access_token=token),
        )
    )


@router.post("/signup", response_model=AuthResponse)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Create a user and return it with a bearer token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    user = identity.signup(db, body.name, body.email, body.password)
    return _auth_response(user)


@router.post("/signin", response_model=AuthResponse)
def signin(
    body: SigninRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Authenticate with email and password; returns the user and a bearer token."""
    user = identity.signin(db, body.email, body.password)
    return _auth_response(user)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the current user. Raises NotSignedIn otherwise."""
    if credentials is None:
        raise NotSignedIn()
    try:
        user_id = verify_access_token(credentials.credentials)
    except InvalidTokenError:
        raise NotSignedIn()
    user = identity.get_user(db, user_id)
    if user is None:
        raise NotSignedIn()
    return CurrentUser.model_validate(user)


@router.get("/me", response_model=Envelope[UserOut])
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> Envelope[UserOut]:
    """Return the caller's profile as loaded by get_current_user."""
    return Envelope[UserOut](
        content=Content[UserOut](data=UserOut(**current_user.model_dump()))
    )
