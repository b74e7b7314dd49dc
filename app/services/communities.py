"""Community registry: creation with owner enrolment, and paginated listings."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidInput, NotSignedIn, ResourceNotFound
from app.models import Community, Member, Role, User
from app.models.role import ROLE_COMMUNITY_ADMIN
from app.schemas.community import (
    CommunityMemberOut,
    CommunityOut,
    CommunityWithOwner,
    RoleSummary,
    UserSummary,
)
from app.services.pagination import Page, paginate
from app.services.roles import get_or_create_role

logger = logging.getLogger(__name__)

COMMUNITY_NAME_MIN_LEN = 2


def slugify(name: str) -> str:
    """Lowercase the name and replace each space with a hyphen."""
    return name.lower().replace(" ", "-")


def _with_owner(community: Community, owner: User) -> CommunityWithOwner:
    return CommunityWithOwner(
        id=community.id,
        name=community.name,
        slug=community.slug,
        owner=UserSummary(id=owner.id, name=owner.name),
        created_at=community.created_at,
        updated_at=community.updated_at,
    )


def to_community_out(community: Community) -> CommunityOut:
    return CommunityOut(
        id=community.id,
        name=community.name,
        slug=community.slug,
        owner=community.owner_id,
        created_at=community.created_at,
        updated_at=community.updated_at,
    )


def enroll_owner(session: Session, community: Community) -> Member:
    """Add the owner's 'Community Admin' membership. Flushes, does not commit."""
    admin_role = get_or_create_role(session, ROLE_COMMUNITY_ADMIN)
    member = Member(
        community_id=community.id,
        user_id=community.owner_id,
        role_id=admin_role.id,
    )
    session.add(member)
    session.flush()
    return member


def create_community(session: Session, name: str, owner_id: int) -> Community:
    """
    Create a community owned by owner_id and enrol the owner as admin.

    The community row and the owner's membership are written in one
    transaction: on any failure both are rolled back.
    """
    if name is None or len(name) < COMMUNITY_NAME_MIN_LEN:
        raise InvalidInput("Name should be at least 2 characters.", param="name")
    if session.get(User, owner_id) is None:
        raise NotSignedIn("You should be signed in first.", param="signin")

    try:
        community = Community(name=name, slug=slugify(name), owner_id=owner_id)
        session.add(community)
        session.flush()
        enroll_owner(session, community)
        session.commit()
    except Exception:
        session.rollback()
        raise
    session.refresh(community)
    logger.info(
        "Community created: community_id=%s slug=%s owner_id=%s",
        community.id,
        community.slug,
        owner_id,
    )
    return community


def get_community(session: Session, community_id: int) -> Community | None:
    return session.get(Community, community_id)


def list_communities(session: Session, page: int, per_page: int) -> Page:
    """All communities in insertion order, each with an owner summary."""
    query = (
        session.query(Community, User)
        .join(User, Community.owner_id == User.id)
        .order_by(Community.id)
    )
    result = paginate(query, page, per_page)
    items = [_with_owner(c, u) for c, u in result.items]
    return Page(items=items, total=result.total, page=page, per_page=per_page)


def list_members(session: Session, community_id: int, page: int, per_page: int) -> Page:
    """Members of one community with user and role summaries."""
    if get_community(session, community_id) is None:
        raise ResourceNotFound("Community not found.", param="community")
    query = (
        session.query(Member, User, Role)
        .join(User, Member.user_id == User.id)
        .join(Role, Member.role_id == Role.id)
        .filter(Member.community_id == community_id)
        .order_by(Member.id)
    )
    result = paginate(query, page, per_page)
    items = [
        CommunityMemberOut(
            id=m.id,
            community=m.community_id,
            user=UserSummary(id=u.id, name=u.name),
            role=RoleSummary(id=r.id, name=r.name),
            created_at=m.created_at,
        )
        for m, u, r in result.items
    ]
    return Page(items=items, total=result.total, page=page, per_page=per_page)


def list_owned_by(session: Session, user_id: int, page: int, per_page: int) -> Page:
    """Communities whose owner is user_id."""
    query = (
        session.query(Community)
        .filter(Community.owner_id == user_id)
        .order_by(Community.id)
    )
    result = paginate(query, page, per_page)
    items = [to_community_out(c) for c in result.items]
    return Page(items=items, total=result.total, page=page, per_page=per_page)


def list_joined_by(session: Session, user_id: int, page: int, per_page: int) -> Page:
    """Communities in which user_id holds a membership, with owner summaries."""
    query = (
        session.query(Community, User)
        .join(Member, Member.community_id == Community.id)
        .join(User, Community.owner_id == User.id)
        .filter(Member.user_id == user_id)
        .order_by(Community.id)
    )
    result = paginate(query, page, per_page)
    items = [_with_owner(c, u) for c, u in result.items]
    return Page(items=items, total=result.total, page=page, per_page=per_page)
