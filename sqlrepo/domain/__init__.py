"""
Domain Model Module Initialization
"""

from sqlrepo.domain.entity import (
    Entity,
    EntityDescriptor,
    FieldDescriptor,
    describe_entity,
)
from sqlrepo.domain.pagination import PaginatedResult, Pagination

__all__ = [
    # Entity
    "Entity",
    "EntityDescriptor",
    "FieldDescriptor",
    "describe_entity",
    # Pagination
    "Pagination",
    "PaginatedResult",
]
