"""Request/response schemas for communities."""

from datetime import datetime

from pydantic import BaseModel, Field


class CommunityCreate(BaseModel):
    """Body of POST /community."""

    name: str = Field(..., description="Community name (at least 2 characters)")


class UserSummary(BaseModel):
    """Lightweight user expansion used in listings."""

    id: int
    name: str


class RoleSummary(BaseModel):
    id: int
    name: str


class CommunityOut(BaseModel):
    """Community with the owner as a bare id."""

    id: int
    name: str
    slug: str
    owner: int
    created_at: datetime
    updated_at: datetime


class CommunityWithOwner(BaseModel):
    """Community with the owner expanded to ``{id, name}``."""

    id: int
    name: str
    slug: str
    owner: UserSummary
    created_at: datetime
    updated_at: datetime


class CommunityMemberOut(BaseModel):
    """Member row of a community with user and role expanded."""

    id: int
    community: int
    user: UserSummary
    role: RoleSummary
    created_at: datetime
