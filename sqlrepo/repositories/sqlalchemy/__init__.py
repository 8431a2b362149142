"""
SQLAlchemy Repository Implementation Module Initialization
"""

from sqlrepo.repositories.sqlalchemy.entity_repo import SQLAlchemyEntityRepository
from sqlrepo.repositories.sqlalchemy.async_entity_repo import AsyncSQLAlchemyEntityRepository

__all__ = [
    "SQLAlchemyEntityRepository",
    "AsyncSQLAlchemyEntityRepository",
]
