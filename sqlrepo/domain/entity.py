"""
Entity Domain Model

Defines the Entity base model and the static descriptors the repository
uses to build statements.

An entity declares its table and key at class level:

    class SampleEntity(Entity[int]):
        __tablename__ = "sample_entities"
        __autoincrement__ = True

        id: Optional[int] = Field(None, description="ID")
        name: str = Field(..., description="Name")

Persisted fields are the model fields in declaration order. A field alias,
when declared, is used as the column name.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict

from sqlrepo.common.errors import ValidationError

ID = TypeVar("ID")


@dataclass(frozen=True)
class FieldDescriptor:
    """Persisted field: attribute name, column name and key flags"""

    name: str
    column: str
    is_key: bool = False
    autoincrement: bool = False


@dataclass(frozen=True)
class EntityDescriptor:
    """Table-level description of an entity class"""

    table: str
    key: FieldDescriptor
    fields: tuple[FieldDescriptor, ...]

    @property
    def insert_fields(self) -> tuple[FieldDescriptor, ...]:
        """Fields supplied by the caller on insert (generated key omitted)"""
        return tuple(f for f in self.fields if not (f.is_key and f.autoincrement))

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(f.column for f in self.fields)


class Entity(BaseModel, Generic[ID]):
    """
    Entity Base Model

    Base class for all persisted entities. Subclasses must set
    `__tablename__`; `__key_field__` and `__autoincrement__` describe the
    identifier.
    """

    __tablename__: ClassVar[str] = ""
    __key_field__: ClassVar[str] = "id"
    __autoincrement__: ClassVar[bool] = False

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @classmethod
    def describe(cls) -> EntityDescriptor:
        """Get the cached descriptor of this entity class"""
        return describe_entity(cls)

    @classmethod
    def get_table_name(cls) -> str:
        return cls.describe().table

    def get_id(self) -> ID:
        return getattr(self, self.describe().key.name)

    def to_map(self) -> dict[str, Any]:
        """
        Map column names to the current field values

        Returns:
            dict: Column name to value, in field declaration order
        """
        return {f.column: getattr(self, f.name) for f in self.describe().fields}

    @classmethod
    def from_row(cls, row: Mapping[str, Any]):
        """Build an entity from a result row keyed by column name"""
        return cls.model_validate(dict(row))


@lru_cache(maxsize=None)
def describe_entity(entity_cls: type[Entity]) -> EntityDescriptor:
    """
    Build the descriptor for an entity class

    Computed once per class from its declared metadata.

    Args:
        entity_cls: Entity subclass

    Returns:
        EntityDescriptor: Table, key and persisted fields

    Raises:
        ValidationError: Table name missing or key is not a declared field
    """
    table = getattr(entity_cls, "__tablename__", "")
    if not table:
        raise ValidationError(
            message=f"Entity '{entity_cls.__name__}' does not declare __tablename__",
            code="missing_table_name",
        )

    key_name = entity_cls.__key_field__
    if key_name not in entity_cls.model_fields:
        raise ValidationError(
            message=f"Entity '{entity_cls.__name__}' has no key field '{key_name}'",
            code="missing_key_field",
            details={"fields": list(entity_cls.model_fields)},
        )

    fields = []
    key = None
    for name, info in entity_cls.model_fields.items():
        is_key = name == key_name
        descriptor = FieldDescriptor(
            name=name,
            column=info.alias or name,
            is_key=is_key,
            autoincrement=is_key and entity_cls.__autoincrement__,
        )
        if is_key:
            key = descriptor
        fields.append(descriptor)

    return EntityDescriptor(table=table, key=key, fields=tuple(fields))
