"""Identity store: signup, signin and user lookup."""

import logging
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentials, InvalidInput, ResourceExists
from app.core.security import (
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    hash_password,
    verify_password,
)
from app.models import User

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_RE.match(email) is not None


def _validate_email(email: str) -> str:
    email = (email or "").strip()
    if not is_valid_email(email):
        raise InvalidInput(
            "This email is not valid.", param="email", code="INVALID_EMAIL"
        )
    return email


def signup(session: Session, name: str, email: str, password: str) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Raises InvalidInput for a short name, bad email syntax or bad password
    length, and ResourceExists when the email is already registered.
    """
    name = (name or "").strip()
    if not (NAME_MIN_LEN <= len(name) <= NAME_MAX_LEN):
        raise InvalidInput("Name should be at least 2 characters.", param="name")
    email = _validate_email(email)
    if not (PASSWORD_MIN_LEN <= len(password or "") <= PASSWORD_MAX_LEN):
        raise InvalidInput(
            "Password should be between 6 and 128 characters.", param="password"
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise InvalidInput(
            "Password must not exceed 72 bytes when UTF-8 encoded.", param="password"
        )

    if get_user_by_email(session, email) is not None:
        raise ResourceExists(
            "User with this email address already exists.", param="email"
        )

    user = User(name=name, email=email, password_hash=hash_password(password))
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ResourceExists(
            "User with this email address already exists.", param="email"
        ) from e
    session.refresh(user)
    logger.info("User signed up: user_id=%s", user.id)
    return user


def signin(session: Session, email: str, password: str) -> User:
    """Return the user for a matching email/password pair; raise InvalidCredentials otherwise."""
    email = _validate_email(email)
    user = get_user_by_email(session, email)
    if user is None or not verify_password(password or "", user.password_hash):
        logger.info("Signin rejected for email with invalid credentials")
        raise InvalidCredentials(param="password")
    return user


def get_user(session: Session, user_id: int) -> User | None:
    return session.get(User, user_id)


def get_user_by_email(session: Session, email: str) -> User | None:
    return session.query(User).filter(User.email == email).first()
