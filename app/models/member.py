"""ORM model for the membership ledger."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func

from app.models.base import Base


class Member(Base):
    """
    One (community, user, role) membership record.

    A user holds at most one membership per community.
    """

    __tablename__ = "members"
    __table_args__ = (
        UniqueConstraint("community_id", "user_id", name="uq_members_community_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    community_id = Column(Integer, ForeignKey("communities.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
