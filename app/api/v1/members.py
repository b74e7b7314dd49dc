"""Membership endpoints: owner-only add and remove."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.api.v1.responses import data_response
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.common import Envelope
from app.schemas.member import MemberCreate, MemberOut
from app.services import members

router = APIRouter()


@router.post("", response_model=Envelope[MemberOut])
def add_member(
    body: MemberCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict:
    """Add a user to a community with a role. Only the community owner may do this."""
    member = members.add_member(
        db,
        community_id=body.community_id,
        user_id=body.user_id,
        role_id=body.role_id,
        requester_id=current_user.id,
    )
    return data_response(
        MemberOut(
            id=member.id,
            community=member.community_id,
            user=member.user_id,
            role=member.role_id,
            created_at=member.created_at,
        )
    )


@router.delete("/{member_id}", response_model=Envelope[None])
def remove_member(
    member_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict:
    """Remove a membership. Only the owner of the member's community may do this."""
    members.remove_member(db, member_id, requester_id=current_user.id)
    return data_response(None)
