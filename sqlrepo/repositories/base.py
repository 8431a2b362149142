"""
Base Repository Interface Module

Defines the generic interface for entity data access, decoupling callers from
specific database implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

from sqlrepo.domain.entity import Entity
from sqlrepo.domain.pagination import PaginatedResult, Pagination

# Define generic type variables
E = TypeVar("E", bound=Entity)
ID = TypeVar("ID")


class BaseRepository(ABC, Generic[E, ID]):
    """
    Base Repository Interface

    Defines standard CRUD operations over the single table of entity type E.
    """

    @abstractmethod
    def find_all(self) -> list[E]:
        """
        Get all entities

        Returns:
            list: Entities in backend order
        """
        pass

    @abstractmethod
    def find_all_by_id(self, ids: Sequence[ID]) -> list[E]:
        """
        Get entities by IDs

        Missing IDs are skipped, so fewer entities than IDs may be returned.
        An empty ID list returns an empty list without querying.

        Args:
            ids: IDs to look up

        Returns:
            list: Matching entities in backend order
        """
        pass

    @abstractmethod
    def find_by_id(self, id: ID) -> E:
        """
        Get entity by ID

        Raises:
            NotFoundError: No entity with this ID
        """
        pass

    @abstractmethod
    def save(self, entity: E) -> None:
        """Insert one entity, back-filling a generated ID"""
        pass

    @abstractmethod
    def save_all(self, entities: Sequence[E]) -> None:
        """
        Insert entities with a single multi-row INSERT

        When the key is auto-generated, each entity's ID is back-filled in
        place after the insert.

        Args:
            entities: Entities to insert (no-op when empty)

        Raises:
            ValidationError: An entity is not of the repository's entity type
            RepositoryError: Generated IDs cannot be read back on this dialect
        """
        pass

    @abstractmethod
    def delete_by_id(self, id: ID) -> int:
        """Delete entity by ID"""
        pass

    @abstractmethod
    def delete_by_ids(self, ids: Sequence[ID]) -> int:
        """
        Delete entities by IDs

        Args:
            ids: IDs to delete (no-op when empty)

        Returns:
            Number of deleted rows
        """
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every row of the table"""
        pass

    @abstractmethod
    def delete_entities(self, entities: Sequence[E]) -> int:
        """Delete the rows matching the entities' IDs"""
        pass

    @abstractmethod
    def delete_entity(self, entity: E) -> int:
        """Delete the row matching the entity's ID"""
        pass

    @abstractmethod
    def exists_by_id(self, id: ID) -> None:
        """
        Check that an entity exists

        Existence is reported through the error channel; see has_id for the
        boolean form.

        Raises:
            NotFoundError: No entity with this ID
        """
        pass

    @abstractmethod
    def has_id(self, id: ID) -> bool:
        """Check whether an entity exists"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count all rows of the table"""
        pass

    @abstractmethod
    def find_all_paginated(
        self, pagination: Pagination, consistent: bool = False
    ) -> PaginatedResult[E]:
        """
        Get one page of entities together with the total row count

        Args:
            pagination: Limit and offset
            consistent: Read page and count inside one transaction

        Returns:
            PaginatedResult: Page, total count and the echoed pagination
        """
        pass


class AsyncBaseRepository(ABC, Generic[E, ID]):
    """
    Async Base Repository Interface

    Same contract as BaseRepository with coroutine methods.
    """

    @abstractmethod
    async def find_all(self) -> list[E]:
        pass

    @abstractmethod
    async def find_all_by_id(self, ids: Sequence[ID]) -> list[E]:
        pass

    @abstractmethod
    async def find_by_id(self, id: ID) -> E:
        pass

    @abstractmethod
    async def save(self, entity: E) -> None:
        pass

    @abstractmethod
    async def save_all(self, entities: Sequence[E]) -> None:
        pass

    @abstractmethod
    async def delete_by_id(self, id: ID) -> int:
        pass

    @abstractmethod
    async def delete_by_ids(self, ids: Sequence[ID]) -> int:
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        pass

    @abstractmethod
    async def delete_entities(self, entities: Sequence[E]) -> int:
        pass

    @abstractmethod
    async def delete_entity(self, entity: E) -> int:
        pass

    @abstractmethod
    async def exists_by_id(self, id: ID) -> None:
        pass

    @abstractmethod
    async def has_id(self, id: ID) -> bool:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def find_all_paginated(
        self, pagination: Pagination, consistent: bool = False
    ) -> PaginatedResult[E]:
        pass
