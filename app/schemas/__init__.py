"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    SigninRequest,
    SignupRequest,
    TokenMeta,
    UserOut,
)
from app.schemas.common import (
    Content,
    Envelope,
    ErrorItem,
    ErrorResponse,
    PageMeta,
    PagedContent,
    PagedEnvelope,
)
from app.schemas.community import (
    CommunityCreate,
    CommunityMemberOut,
    CommunityOut,
    CommunityWithOwner,
    RoleSummary,
    UserSummary,
)
from app.schemas.health import HealthResponse
from app.schemas.member import MemberCreate, MemberOut
from app.schemas.role import RoleCreate, RoleOut

__all__ = [
    "AuthResponse",
    "CommunityCreate",
    "CommunityMemberOut",
    "CommunityOut",
    "CommunityWithOwner",
    "Content",
    "CurrentUser",
    "Envelope",
    "ErrorItem",
    "ErrorResponse",
    "HealthResponse",
    "MemberCreate",
    "MemberOut",
    "PageMeta",
    "PagedContent",
    "PagedEnvelope",
    "RoleCreate",
    "RoleOut",
    "RoleSummary",
    "SigninRequest",
    "SignupRequest",
    "TokenMeta",
    "UserOut",
    "UserSummary",
]
