"""Response envelope shared by every endpoint."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata for listing responses."""

    total: int = Field(..., description="Total number of rows")
    pages: int = Field(..., description="Total number of pages")
    page: int = Field(..., description="Current page (1-indexed)")


class Content(BaseModel, Generic[T]):
    """The ``content`` object of a success envelope."""

    data: T


class PagedContent(BaseModel, Generic[T]):
    data: list[T]
    meta: PageMeta


class Envelope(BaseModel, Generic[T]):
    """Success envelope: ``{status: true, content: {data}}``."""

    status: Literal[True] = True
    content: Content[T]


class PagedEnvelope(BaseModel, Generic[T]):
    """Success envelope for listings: ``{status: true, content: {data, meta}}``."""

    status: Literal[True] = True
    content: PagedContent[T]


class ErrorItem(BaseModel):
    """One error entry."""

    param: str | None = None
    message: str
    code: str


class ErrorResponse(BaseModel):
    """Failure envelope: ``{status: false, errors: [...]}``."""

    status: Literal[False] = False
    errors: list[ErrorItem]
