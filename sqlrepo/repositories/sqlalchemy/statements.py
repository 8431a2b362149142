"""
Statement Builders

Builds the SQL statements used by the SQLAlchemy entity repositories.

Values are always bound parameters. Table and column names come from entity
class declarations and are quoted with the dialect's identifier preparer.
"""

from typing import Any, Sequence

from sqlalchemy import TextClause, bindparam, text
from sqlalchemy.engine import Dialect

from sqlrepo.common.errors import RepositoryError, ValidationError
from sqlrepo.domain.entity import Entity, EntityDescriptor

# lastrowid after a multi-row INSERT points at the first inserted row
FIRST_ROW_DIALECTS = frozenset({"mysql", "mariadb"})
# lastrowid after a multi-row INSERT points at the last inserted row
LAST_ROW_DIALECTS = frozenset({"sqlite"})


def _quote(dialect: Dialect, name: str) -> str:
    return dialect.identifier_preparer.quote(name)


def _table(descriptor: EntityDescriptor, dialect: Dialect) -> str:
    # "schema.table" is quoted part by part
    return ".".join(_quote(dialect, part) for part in descriptor.table.split("."))


def select_all(descriptor: EntityDescriptor, dialect: Dialect) -> TextClause:
    return text(f"SELECT * FROM {_table(descriptor, dialect)}")


def select_by_ids(
    descriptor: EntityDescriptor, dialect: Dialect, ids: Sequence[Any]
) -> TextClause:
    """SELECT rows whose key is in ids; one placeholder is rendered per ID"""
    key = _quote(dialect, descriptor.key.column)
    return text(
        f"SELECT * FROM {_table(descriptor, dialect)} WHERE {key} IN :ids"
    ).bindparams(bindparam("ids", value=list(ids), expanding=True))


def select_page(
    descriptor: EntityDescriptor, dialect: Dialect, limit: int, offset: int
) -> TextClause:
    return text(
        f"SELECT * FROM {_table(descriptor, dialect)} LIMIT :limit OFFSET :offset"
    ).bindparams(limit=limit, offset=offset)


def count_all(descriptor: EntityDescriptor, dialect: Dialect) -> TextClause:
    return text(f"SELECT COUNT(*) FROM {_table(descriptor, dialect)}")


def delete_by_ids(
    descriptor: EntityDescriptor, dialect: Dialect, ids: Sequence[Any]
) -> TextClause:
    key = _quote(dialect, descriptor.key.column)
    return text(
        f"DELETE FROM {_table(descriptor, dialect)} WHERE {key} IN :ids"
    ).bindparams(bindparam("ids", value=list(ids), expanding=True))


def delete_all(descriptor: EntityDescriptor, dialect: Dialect) -> TextClause:
    return text(f"DELETE FROM {_table(descriptor, dialect)}")


def insert_many(
    descriptor: EntityDescriptor,
    dialect: Dialect,
    entities: Sequence[Entity],
    returning: bool = False,
) -> TextClause:
    """
    Build one multi-row INSERT

    The column list comes from the descriptor; an auto-generated key is left
    out of both the columns and every value group. Parameters are named
    p<row>_<column> so their order follows the column order.

    Args:
        descriptor: Entity descriptor
        dialect: Target dialect
        entities: Entities to insert, one value group each
        returning: Append RETURNING <key>

    Returns:
        TextClause: INSERT statement with all values bound

    Raises:
        ValidationError: No insertable columns
    """
    fields = descriptor.insert_fields
    if not fields:
        raise ValidationError(
            message=f"Entity table '{descriptor.table}' has no insertable columns",
            code="no_insert_columns",
        )

    columns = ", ".join(_quote(dialect, f.column) for f in fields)
    groups = []
    params = {}
    for row, entity in enumerate(entities):
        placeholders = []
        for col, field in enumerate(fields):
            name = f"p{row}_{col}"
            params[name] = getattr(entity, field.name)
            placeholders.append(f":{name}")
        groups.append(f"({', '.join(placeholders)})")

    sql = (
        f"INSERT INTO {_table(descriptor, dialect)} ({columns}) "
        f"VALUES {', '.join(groups)}"
    )
    if returning:
        sql += f" RETURNING {_quote(dialect, descriptor.key.column)}"
    return text(sql).bindparams(**params)


def uses_returning(dialect: Dialect) -> bool:
    """
    Decide how generated IDs are read back after a multi-row INSERT

    Returns:
        True for RETURNING, False for the cursor's lastrowid

    Raises:
        RepositoryError: The dialect supports neither
    """
    if dialect.name in FIRST_ROW_DIALECTS or dialect.name in LAST_ROW_DIALECTS:
        return False
    if getattr(dialect, "insert_returning", False):
        return True
    raise RepositoryError(
        message=f"Cannot read back generated IDs on dialect '{dialect.name}'",
        code="unsupported_backfill",
        details={"dialect": dialect.name},
    )


def first_id_from_lastrowid(dialect: Dialect, lastrowid: Any, count: int) -> int:
    """
    Get the ID assigned to the first row of a multi-row INSERT

    Assumes the backend assigned the IDs contiguously within the statement.
    """
    if lastrowid is None:
        raise RepositoryError(
            message="Driver did not report a generated ID",
            code="missing_lastrowid",
            details={"dialect": dialect.name},
        )
    if dialect.name in LAST_ROW_DIALECTS:
        return int(lastrowid) - (count - 1)
    return int(lastrowid)


def assign_ids(entities: Sequence[Entity], descriptor: EntityDescriptor, first_id: int) -> None:
    """Back-fill consecutive IDs starting at first_id"""
    for offset, entity in enumerate(entities):
        setattr(entity, descriptor.key.name, first_id + offset)


def assign_returned_ids(
    entities: Sequence[Entity], descriptor: EntityDescriptor, ids: Sequence[Any]
) -> None:
    """
    Back-fill the IDs read back with RETURNING, one per entity by position

    Raises:
        RepositoryError: Row count differs from the number of entities
    """
    if len(ids) != len(entities):
        raise RepositoryError(
            message=f"Expected {len(entities)} returned IDs, got {len(ids)}",
            code="returned_id_mismatch",
            details={"table": descriptor.table},
        )
    for entity, id in zip(entities, ids):
        setattr(entity, descriptor.key.name, id)
