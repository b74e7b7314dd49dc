"""Role catalog endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.v1.responses import data_response, page_response
from app.core.config import get_settings
from app.core.database import get_db
from app.schemas.common import Envelope, PagedEnvelope
from app.schemas.role import RoleCreate, RoleOut
from app.services import roles

router = APIRouter()


@router.post("", response_model=Envelope[RoleOut])
def create_role(
    body: RoleCreate,
    db: Annotated[Session, Depends(get_db)],
) -> dict:
    """Create a role. Name must be 'Community Admin' or 'Community Member'."""
    role = roles.create_role(db, body.name)
    return data_response(RoleOut.model_validate(role))


@router.get("", response_model=PagedEnvelope[RoleOut])
def list_roles(
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
) -> dict:
    """Paginated role listing."""
    result = roles.list_roles(db, page, get_settings().PAGE_SIZE)
    return page_response(result)
