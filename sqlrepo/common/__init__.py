"""
Common Utilities Module
"""

from sqlrepo.common.errors import (
    AppError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)

__all__ = [
    "AppError",
    "NotFoundError",
    "RepositoryError",
    "ValidationError",
]
