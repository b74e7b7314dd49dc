"""Role catalog: the closed set of membership roles."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import InvalidInput, ResourceExists
from app.models import Role
from app.models.role import ALLOWED_ROLE_NAMES
from app.schemas.role import RoleOut
from app.services.pagination import Page, paginate

logger = logging.getLogger(__name__)


def create_role(session: Session, name: str) -> Role:
    """
    Create a catalog role.

    Only 'Community Admin' and 'Community Member' are accepted; each may
    exist once.
    """
    name = (name or "").strip()
    if len(name) < 2:
        raise InvalidInput("Name should be at least 2 characters.", param="name")
    if name not in ALLOWED_ROLE_NAMES:
        raise InvalidInput(
            f"Role name must be one of: {', '.join(ALLOWED_ROLE_NAMES)}.",
            param="name",
        )
    if get_role_by_name(session, name) is not None:
        raise ResourceExists(f"Role '{name}' already exists.", param="name")

    role = Role(name=name)
    session.add(role)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ResourceExists(f"Role '{name}' already exists.", param="name") from e
    session.refresh(role)
    logger.info("Role created: role_id=%s name=%s", role.id, role.name)
    return role


def list_roles(session: Session, page: int, per_page: int) -> Page:
    """Catalog roles in insertion order."""
    result = paginate(session.query(Role).order_by(Role.id), page, per_page)
    items = [RoleOut.model_validate(r) for r in result.items]
    return Page(items=items, total=result.total, page=page, per_page=per_page)


def get_role_by_name(session: Session, name: str) -> Role | None:
    return session.query(Role).filter(Role.name == name).first()


def get_or_create_role(session: Session, name: str) -> Role:
    """
    Return the named role, adding it to the session if missing.

    Does not commit; the caller owns the transaction.
    """
    role = get_role_by_name(session, name)
    if role is None:
        role = Role(name=name)
        session.add(role)
        session.flush()
        logger.info("Role added to catalog: name=%s", name)
    return role
