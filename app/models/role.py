"""ORM model for the role catalog."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base

ROLE_COMMUNITY_ADMIN = "Community Admin"
ROLE_COMMUNITY_MEMBER = "Community Member"
ALLOWED_ROLE_NAMES = (ROLE_COMMUNITY_ADMIN, ROLE_COMMUNITY_MEMBER)


class Role(Base):
    """Named role assigned to a membership. Immutable once created."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
