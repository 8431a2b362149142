"""
Entity Repository SQLAlchemy Implementation

Provides the generic CRUD implementation over a synchronous SQLAlchemy engine
or connection.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Sequence, Union

from sqlalchemy import Connection, Engine, Executable, Result

from sqlrepo.common.errors import NotFoundError, ValidationError
from sqlrepo.domain.pagination import PaginatedResult, Pagination
from sqlrepo.repositories.base import BaseRepository, E, ID
from sqlrepo.repositories.sqlalchemy import statements

logger = logging.getLogger(__name__)


class SQLAlchemyEntityRepository(BaseRepository[E, ID]):
    """
    Entity Repository SQLAlchemy Implementation

    Builds statements from the entity descriptor and runs them with
    SQLAlchemy Core. Given an Engine, every operation runs in its own
    transaction and commits on success. Given a Connection, statements run on
    it and the caller owns the transaction. The bind is never closed here.
    """

    def __init__(self, entity_cls: type[E], bind: Union[Engine, Connection]):
        """
        Initialize Repository

        Args:
            entity_cls: Entity class stored by this repository
            bind: Database engine or connection
        """
        self.entity_cls = entity_cls
        self.bind = bind
        self.descriptor = entity_cls.describe()

    @property
    def dialect(self):
        return self.bind.dialect

    @contextmanager
    def _connect(self) -> Iterator[Connection]:
        if isinstance(self.bind, Connection):
            yield self.bind
        else:
            with self.bind.begin() as conn:
                yield conn

    def _execute(self, conn: Connection, statement: Executable) -> Result:
        logger.debug("Executing on %s: %s", self.descriptor.table, statement)
        return conn.execute(statement)

    def _to_entities(self, result: Result) -> list[E]:
        return [self.entity_cls.from_row(row) for row in result.mappings()]

    def _check_entities(self, entities: Sequence[E]) -> None:
        for entity in entities:
            if not isinstance(entity, self.entity_cls):
                raise ValidationError(
                    message=f"Expected {self.entity_cls.__name__}, got {type(entity).__name__}",
                    code="invalid_entity",
                )

    def find_all(self) -> list[E]:
        """Get all entities"""
        with self._connect() as conn:
            result = self._execute(conn, statements.select_all(self.descriptor, self.dialect))
            return self._to_entities(result)

    def find_all_by_id(self, ids: Sequence[ID]) -> list[E]:
        """Get entities by IDs"""
        if not ids:
            return []
        with self._connect() as conn:
            result = self._execute(
                conn, statements.select_by_ids(self.descriptor, self.dialect, ids)
            )
            return self._to_entities(result)

    def find_by_id(self, id: ID) -> E:
        """Get entity by ID"""
        entities = self.find_all_by_id([id])
        if not entities:
            raise NotFoundError(
                message=f"{self.entity_cls.__name__} with id {id!r} not found",
                details={"table": self.descriptor.table, "id": id},
            )
        return entities[0]

    def save(self, entity: E) -> None:
        """Insert entity"""
        self.save_all([entity])

    def save_all(self, entities: Sequence[E]) -> None:
        """Insert entities, back-filling generated IDs"""
        if not entities:
            return
        self._check_entities(entities)

        autoincrement = self.descriptor.key.autoincrement
        returning = autoincrement and statements.uses_returning(self.dialect)
        statement = statements.insert_many(
            self.descriptor, self.dialect, entities, returning=returning
        )

        with self._connect() as conn:
            result = self._execute(conn, statement)
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

    def delete_by_id(self, id: ID) -> int:
        """Delete entity by ID"""
        return self.delete_by_ids([id])

    def delete_by_ids(self, ids: Sequence[ID]) -> int:
        """Delete entities by IDs"""
        if not ids:
            return 0
        with self._connect() as conn:
            result = self._execute(
                conn, statements.delete_by_ids(self.descriptor, self.dialect, ids)
            )
            return result.rowcount

    def delete_all(self) -> int:
        """Delete all entities"""
        with self._connect() as conn:
            result = self._execute(conn, statements.delete_all(self.descriptor, self.dialect))
            return result.rowcount

    def delete_entities(self, entities: Sequence[E]) -> int:
        """Delete entities by their IDs"""
        self._check_entities(entities)
        return self.delete_by_ids([entity.get_id() for entity in entities])

    def delete_entity(self, entity: E) -> int:
        """Delete entity by its ID"""
        return self.delete_entities([entity])

    def exists_by_id(self, id: ID) -> None:
        """Raise NotFoundError unless the entity exists"""
        if not self.has_id(id):
            raise NotFoundError(
                message=f"{self.entity_cls.__name__} with id {id!r} not found",
                details={"table": self.descriptor.table, "id": id},
            )

    def has_id(self, id: ID) -> bool:
        """Check whether the entity exists"""
        return len(self.find_all_by_id([id])) > 0

    def count(self) -> int:
        """Count all entities"""
        with self._connect() as conn:
            return self._count(conn)

    def _count(self, conn: Connection) -> int:
        result = self._execute(conn, statements.count_all(self.descriptor, self.dialect))
        return result.scalar() or 0

    def _page(self, conn: Connection, pagination: Pagination) -> list[E]:
        result = self._execute(
            conn,
            statements.select_page(
                self.descriptor, self.dialect, pagination.limit, pagination.offset
            ),
        )
        return self._to_entities(result)

    def find_all_paginated(
        self, pagination: Pagination, consistent: bool = False
    ) -> PaginatedResult[E]:
        """Get one page of entities and the total count"""
        if consistent:
            with self._connect() as conn:
                entities = self._page(conn, pagination)
                total = self._count(conn)
        else:
            with self._connect() as conn:
                entities = self._page(conn, pagination)
            with self._connect() as conn:
                total = self._count(conn)

        return PaginatedResult[self.entity_cls](
            pagination=pagination,
            total_count=total,
            results=tuple(entities),
        )
