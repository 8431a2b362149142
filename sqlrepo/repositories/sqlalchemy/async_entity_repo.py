"""
Entity Repository SQLAlchemy Async Implementation

Provides the generic CRUD implementation over an asynchronous SQLAlchemy
engine or connection. Statements are shared with SQLAlchemyEntityRepository.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence, Union

from sqlalchemy import Executable, Result
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from sqlrepo.common.errors import NotFoundError, ValidationError
from sqlrepo.domain.pagination import PaginatedResult, Pagination
from sqlrepo.repositories.base import AsyncBaseRepository, E, ID
from sqlrepo.repositories.sqlalchemy import statements

logger = logging.getLogger(__name__)


class AsyncSQLAlchemyEntityRepository(AsyncBaseRepository[E, ID]):
    """
    Entity Repository SQLAlchemy Async Implementation

    Given an AsyncEngine, every operation runs in its own transaction.
    Given an AsyncConnection, the caller owns the transaction.
    """

    def __init__(self, entity_cls: type[E], bind: Union[AsyncEngine, AsyncConnection]):
        """
        Initialize Repository

        Args:
            entity_cls: Entity class stored by this repository
            bind: Async database engine or connection
        """
        self.entity_cls = entity_cls
        self.bind = bind
        self.descriptor = entity_cls.describe()

    @property
    def dialect(self):
        return self.bind.dialect

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[AsyncConnection]:
        if isinstance(self.bind, AsyncConnection):
            yield self.bind
        else:
            async with self.bind.begin() as conn:
                yield conn

    async def _execute(self, conn: AsyncConnection, statement: Executable) -> Result:
        logger.debug("Executing on %s: %s", self.descriptor.table, statement)
        return await conn.execute(statement)

    def _to_entities(self, result: Result) -> list[E]:
        return [self.entity_cls.from_row(row) for row in result.mappings()]

    def _check_entities(self, entities: Sequence[E]) -> None:
        for entity in entities:
            if not isinstance(entity, self.entity_cls):
                raise ValidationError(
                    message=f"Expected {self.entity_cls.__name__}, got {type(entity).__name__}",
                    code="invalid_entity",
                )

    def _not_found(self, id: ID) -> NotFoundError:
        return NotFoundError(
            message=f"{self.entity_cls.__name__} with id {id!r} not found",
            details={"table": self.descriptor.table, "id": id},
        )

    async def find_all(self) -> list[E]:
        async with self._connect() as conn:
            result = await self._execute(
                conn, statements.select_all(self.descriptor, self.dialect)
            )
            return self._to_entities(result)

    async def find_all_by_id(self, ids: Sequence[ID]) -> list[E]:
        if not ids:
            return []
        async with self._connect() as conn:
            result = await self._execute(
                conn, statements.select_by_ids(self.descriptor, self.dialect, ids)
            )
            return self._to_entities(result)

    async def find_by_id(self, id: ID) -> E:
        entities = await self.find_all_by_id([id])
        if not entities:
            raise self._not_found(id)
        return entities[0]

    async def save(self, entity: E) -> None:
        await self.save_all([entity])

    async def save_all(self, entities: Sequence[E]) -> None:
        if not entities:
            return
        self._check_entities(entities)

        autoincrement = self.descriptor.key.autoincrement
        returning = autoincrement and statements.uses_returning(self.dialect)
        statement = statements.insert_many(
            self.descriptor, self.dialect, entities, returning=returning
        )

        async with self._connect() as conn:
            result = await self._execute(conn, statement)
            if not autoincrement:
                return
            if returning:
                statements.assign_returned_ids(
                    entities, self.descriptor, result.scalars().all()
                )
            else:
                first_id = statements.first_id_from_lastrowid(
                    self.dialect, result.lastrowid, len(entities)
                )
                statements.assign_ids(entities, self.descriptor, first_id)

        logger.debug(
            "Assigned ids %s to %d %s rows",
            [entity.get_id() for entity in entities],
            len(entities),
            self.descriptor.table,
        )

    async def delete_by_id(self, id: ID) -> int:
        return await self.delete_by_ids([id])

    async def delete_by_ids(self, ids: Sequence[ID]) -> int:
        if not ids:
            return 0
        async with self._connect() as conn:
            result = await self._execute(
                conn, statements.delete_by_ids(self.descriptor, self.dialect, ids)
            )
            return result.rowcount

    async def delete_all(self) -> int:
        async with self._connect() as conn:
            result = await self._execute(
                conn, statements.delete_all(self.descriptor, self.dialect)
            )
            return result.rowcount

    async def delete_entities(self, entities: Sequence[E]) -> int:
        self._check_entities(entities)
        return await self.delete_by_ids([entity.get_id() for entity in entities])

    async def delete_entity(self, entity: E) -> int:
        return await self.delete_entities([entity])

    async def exists_by_id(self, id: ID) -> None:
        if not await self.has_id(id):
            raise self._not_found(id)

    async def has_id(self, id: ID) -> bool:
        return len(await self.find_all_by_id([id])) > 0

    async def count(self) -> int:
        async with self._connect() as conn:
            return await self._count(conn)

    async def _count(self, conn: AsyncConnection) -> int:
        result = await self._execute(
            conn, statements.count_all(self.descriptor, self.dialect)
        )
        return result.scalar() or 0

    async def _page(self, conn: AsyncConnection, pagination: Pagination) -> list[E]:
        result = await self._execute(
            conn,
            statements.select_page(
                self.descriptor, self.dialect, pagination.limit, pagination.offset
            ),
        )
        return self._to_entities(result)

    async def find_all_paginated(
        self, pagination: Pagination, consistent: bool = False
    ) -> PaginatedResult[E]:
        if consistent:
            async with self._connect() as conn:
                entities = await self._page(conn, pagination)
                total = await self._count(conn)
        else:
            async with self._connect() as conn:
                entities = await self._page(conn, pagination)
            async with self._connect() as conn:
                total = await self._count(conn)

        return PaginatedResult[self.entity_cls](
            pagination=pagination,
            total_count=total,
            results=tuple(entities),
        )
