"""
Test Fixtures

Sample entities and direct-SQL helpers used to check repository behavior
without going through the repository itself.
"""

from typing import Optional

from pydantic import Field
from sqlalchemy import Connection, Engine, text

from sqlrepo.domain import Entity

SCHEMA = [
    """
    CREATE TABLE sample_entities (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(255) NOT NULL
    )
    """,
    """
    CREATE TABLE labels (
        id VARCHAR(36) PRIMARY KEY,
        title VARCHAR(255) NOT NULL,
        color VARCHAR(16)
    )
    """,
]

# Every repository insert into sample_entities is followed by a 'gap' row, so
# the IDs handed out within one multi-row INSERT are not consecutive
GAP_TRIGGER = """
CREATE TRIGGER add_gap AFTER INSERT ON sample_entities
WHEN NEW.name != 'gap'
BEGIN
    INSERT INTO sample_entities (name) VALUES ('gap');
END
"""


class SampleEntity(Entity[int]):
    """Entity with an auto-generated integer key"""

    __tablename__ = "sample_entities"
    __autoincrement__ = True

    id: Optional[int] = Field(None, description="ID")
    name: str = Field(..., description="Name")


class Label(Entity[str]):
    """Entity with a caller-supplied string key and an aliased column"""

    __tablename__ = "labels"

    id: str = Field(..., description="Label ID")
    display_name: str = Field(..., alias="title", description="Display Name")
    color: Optional[str] = Field(None, description="Color")


class SchemaSample(Entity[int]):
    """SampleEntity addressed through a schema-qualified table name"""

    __tablename__ = "main.sample_entities"
    __autoincrement__ = True

    id: Optional[int] = Field(None, description="ID")
    name: str = Field(..., description="Name")


def insert_sample(conn: Connection, name: str) -> int:
    """Insert a sample row directly, bypassing the repository"""
    result = conn.execute(
        text("INSERT INTO sample_entities (name) VALUES (:name)"), {"name": name}
    )
    return result.lastrowid


def insert_samples(engine: Engine, names: list[str]) -> list[int]:
    with engine.begin() as conn:
        return [insert_sample(conn, name) for name in names]


def select_sample(engine: Engine, id: int) -> Optional[dict]:
    with engine.connect() as conn:
        row = conn.execute(
            text("SELECT * FROM sample_entities WHERE id = :id"), {"id": id}
        ).mappings().first()
    return dict(row) if row else None
