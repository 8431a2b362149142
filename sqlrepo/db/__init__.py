"""
Database Module Initialization
"""

from sqlrepo.db.session import create_async_db_engine, create_db_engine

__all__ = [
    "create_db_engine",
    "create_async_db_engine",
]
