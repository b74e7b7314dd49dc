"""Request/response schemas for the role catalog."""

from datetime import datetime

from pydantic import BaseModel, Field


class RoleCreate(BaseModel):
    """Body of POST /role."""

    name: str = Field(..., description="'Community Admin' or 'Community Member'")


class RoleOut(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
