"""Membership ledger: owner-gated add and remove."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import NotAllowed, ResourceExists, ResourceNotFound
from app.models import Community, Member, Role, User

logger = logging.getLogger(__name__)


def get_membership(session: Session, community_id: int, user_id: int) -> Member | None:
    return (
        session.query(Member)
        .filter(Member.community_id == community_id, Member.user_id == user_id)
        .first()
    )


def _require_owner(community: Community, requester_id: int, action: str) -> None:
    if community.owner_id != requester_id:
        logger.warning(
            "Membership %s denied: community_id=%s requester_id=%s",
            action,
            community.id,
            requester_id,
        )
        raise NotAllowed()


def add_member(
    session: Session,
    community_id: int,
    user_id: int,
    role_id: int,
    requester_id: int,
) -> Member:
    """
    Enrol user_id in community_id with role_id.

    Only the community owner may add members. A user holds at most one
    membership per community.
    """
    community = session.get(Community, community_id)
    if community is None:
        raise ResourceNotFound("Community not found.", param="community")
    if session.get(User, user_id) is None:
        raise ResourceNotFound("User not found.", param="user")
    if session.get(Role, role_id) is None:
        raise ResourceNotFound("Role not found.", param="role")

    _require_owner(community, requester_id, "add")

    if get_membership(session, community_id, user_id) is not None:
        raise ResourceExists("User is already added in the community.")

    member = Member(community_id=community_id, user_id=user_id, role_id=role_id)
    session.add(member)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ResourceExists("User is already added in the community.") from e
    session.refresh(member)
    logger.info(
        "Member added: member_id=%s community_id=%s user_id=%s role_id=%s",
        member.id,
        community_id,
        user_id,
        role_id,
    )
    return member


def remove_member(session: Session, member_id: int, requester_id: int) -> None:
    """
    Delete a membership. Only the owner of the member's community may do so.

    A missing member id raises ResourceNotFound and deletes nothing.
    """
    member = session.get(Member, member_id)
    if member is None:
        raise ResourceNotFound("Member not found.", param="member")
    community = session.get(Community, member.community_id)
    if community is None:
        raise ResourceNotFound("Community not found.", param="community")

    _require_owner(community, requester_id, "remove")

    session.delete(member)
    session.commit()
    logger.info(
        "Member removed: member_id=%s community_id=%s", member_id, community.id
    )
