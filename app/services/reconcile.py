"""Repair communities whose owner lacks the 'Community Admin' membership."""

import logging

from sqlalchemy.orm import Session

from app.models import Community, Member
from app.models.role import ROLE_COMMUNITY_ADMIN
from app.services.communities import enroll_owner
from app.services.roles import get_or_create_role

logger = logging.getLogger(__name__)


def repair_owner_memberships(session: Session) -> tuple[int, int]:
    """
    Ensure every community has exactly one admin membership for its owner.

    Inserts the membership where it is missing and promotes the owner's
    existing membership to admin where it carries another role.
    Returns (inserted, promoted). Idempotent: safe to run repeatedly.
    """
    inserted = 0
    promoted = 0
    try:
        admin_role = get_or_create_role(session, ROLE_COMMUNITY_ADMIN)
        for community in session.query(Community).order_by(Community.id).all():
            member = (
                session.query(Member)
                .filter(
                    Member.community_id == community.id,
                    Member.user_id == community.owner_id,
                )
                .first()
            )
            if member is None:
                enroll_owner(session, community)
                inserted += 1
            elif member.role_id != admin_role.id:
                member.role_id = admin_role.id
                promoted += 1
        session.commit()
    except Exception:
        session.rollback()
        raise

    if inserted or promoted:
        logger.info(
            "Owner memberships repaired: inserted=%s promoted=%s", inserted, promoted
        )
    return (inserted, promoted)
