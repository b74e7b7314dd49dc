"""Request/response schemas for the membership ledger."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MemberCreate(BaseModel):
    """Body of POST /member. Accepts camelCase (communityId) or snake_case keys."""

    model_config = ConfigDict(populate_by_name=True)

    community_id: int = Field(..., alias="communityId", description="Community id")
    user_id: int = Field(..., alias="userId", description="User id to enrol")
    role_id: int = Field(..., alias="roleId", description="Role id to assign")


class MemberOut(BaseModel):
    id: int
    community: int
    user: int
    role: int
    created_at: datetime
