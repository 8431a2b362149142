"""
Data Access Layer Module Initialization
"""

from sqlrepo.repositories.base import AsyncBaseRepository, BaseRepository
from sqlrepo.repositories.sqlalchemy import (
    AsyncSQLAlchemyEntityRepository,
    SQLAlchemyEntityRepository,
)

__all__ = [
    "BaseRepository",
    "AsyncBaseRepository",
    "SQLAlchemyEntityRepository",
    "AsyncSQLAlchemyEntityRepository",
]
