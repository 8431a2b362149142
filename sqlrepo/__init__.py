"""
sqlrepo

Generic SQL repository: CRUD over one table per entity type.
"""

from sqlrepo.common.errors import (
    AppError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from sqlrepo.domain import Entity, PaginatedResult, Pagination
from sqlrepo.repositories import (
    AsyncBaseRepository,
    AsyncSQLAlchemyEntityRepository,
    BaseRepository,
    SQLAlchemyEntityRepository,
)

__all__ = [
    "AppError",
    "NotFoundError",
    "RepositoryError",
    "ValidationError",
    "Entity",
    "Pagination",
    "PaginatedResult",
    "BaseRepository",
    "AsyncBaseRepository",
    "SQLAlchemyEntityRepository",
    "AsyncSQLAlchemyEntityRepository",
]
