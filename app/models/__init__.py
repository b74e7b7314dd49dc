"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.community import Community
from app.models.member import Member
from app.models.role import Role
from app.models.user import User

__all__ = ["Base", "Community", "Member", "Role", "User"]
