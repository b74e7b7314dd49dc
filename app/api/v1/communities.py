"""Community endpoints: create, list, members, and the caller's communities."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.api.v1.responses import data_response, page_response
from app.core.config import get_settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.common import Envelope, PagedEnvelope
from app.schemas.community import (
    CommunityCreate,
    CommunityMemberOut,
    CommunityOut,
    CommunityWithOwner,
)
from app.services import communities

router = APIRouter()

PageQuery = Annotated[int, Query(ge=1, description="Page number, starting at 1")]


@router.post("", response_model=Envelope[CommunityOut])
def create_community(
    body: CommunityCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict:
    """
    Create a community owned by the caller.

    The caller is enrolled as a member with the 'Community Admin' role in the
    same transaction.
    """
    community = communities.create_community(db, body.name, current_user.id)
    return data_response(communities.to_community_out(community))


@router.get("", response_model=PagedEnvelope[CommunityWithOwner])
def list_communities(
    db: Annotated[Session, Depends(get_db)],
    page: PageQuery = 1,
) -> dict:
    """Paginated list of all communities with an owner summary."""
    result = communities.list_communities(db, page, get_settings().PAGE_SIZE)
    return page_response(result)


@router.get("/me/owner", response_model=PagedEnvelope[CommunityOut])
def list_owned(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    page: PageQuery = 1,
) -> dict:
    """Communities owned by the caller."""
    result = communities.list_owned_by(db, current_user.id, page, get_settings().PAGE_SIZE)
    return page_response(result)


@router.get("/me/member", response_model=PagedEnvelope[CommunityWithOwner])
def list_joined(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    page: PageQuery = 1,
) -> dict:
    """Communities in which the caller holds a membership."""
    result = communities.list_joined_by(db, current_user.id, page, get_settings().PAGE_SIZE)
    return page_response(result)


@router.get("/{community_id}/members", response_model=PagedEnvelope[CommunityMemberOut])
def list_members(
    community_id: int,
    db: Annotated[Session, Depends(get_db)],
    page: PageQuery = 1,
) -> dict:
    """Paginated members of a community with user and role summaries."""
    result = communities.list_members(db, community_id, page, get_settings().PAGE_SIZE)
    return page_response(result)
