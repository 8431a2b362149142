"""
Pagination Domain Model

Defines the pagination request and the paginated result returned by repositories.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from sqlrepo.domain.entity import Entity

E = TypeVar("E", bound=Entity)


class Pagination(BaseModel):
    """Pagination Request"""

    # Number of rows to return
    limit: int = Field(..., ge=0, description="Limit")
    # Number of rows to skip
    offset: int = Field(0, ge=0, description="Offset")


class PaginatedResult(BaseModel, Generic[E]):
    """
    Paginated Result

    total_count ignores limit/offset. It is read by a separate query and may
    disagree with results under concurrent writes unless the page was
    fetched with consistent=True.
    """

    pagination: Pagination = Field(..., description="Requested Pagination")
    total_count: int = Field(..., description="Total Row Count")
    results: tuple[E, ...] = Field(default_factory=tuple, description="Page Entities")

    model_config = ConfigDict(frozen=True)
