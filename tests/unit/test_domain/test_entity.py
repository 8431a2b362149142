"""
Test entity descriptors and pagination models
"""

from typing import Optional

import pytest
from pydantic import ValidationError as PydanticValidationError

from sqlrepo.common.errors import ValidationError
from sqlrepo.domain import Entity, FieldDescriptor, PaginatedResult, Pagination
from tests.fixtures import Label, SampleEntity


class TestDescribe:
    def test_autoincrement_key(self):
        descriptor = SampleEntity.describe()

        assert descriptor.table == "sample_entities"
        assert descriptor.key == FieldDescriptor(
            name="id", column="id", is_key=True, autoincrement=True
        )
        assert descriptor.columns == ("id", "name")
        assert [f.column for f in descriptor.insert_fields] == ["name"]

    def test_supplied_key_keeps_key_in_insert(self):
        descriptor = Label.describe()

        assert descriptor.key.autoincrement is False
        assert [f.column for f in descriptor.insert_fields] == ["id", "title", "color"]

    def test_alias_is_column_name(self):
        fields = {f.name: f.column for f in Label.describe().fields}

        assert fields["display_name"] == "title"

    def test_descriptor_is_cached(self):
        assert SampleEntity.describe() is SampleEntity.describe()

    def test_custom_key_field(self):
        class Account(Entity[str]):
            __tablename__ = "accounts"
            __key_field__ = "code"

            code: str
            owner: str

        descriptor = Account.describe()

        assert descriptor.key.column == "code"
        assert Account(code="A1", owner="x").get_id() == "A1"

    def test_missing_table_name(self):
        class NoTable(Entity[int]):
            id: int

        with pytest.raises(ValidationError) as exc_info:
            NoTable.describe()

        assert exc_info.value.code == "missing_table_name"

    def test_missing_key_field(self):
        class NoKey(Entity[int]):
            __tablename__ = "no_key"

            name: str

        with pytest.raises(ValidationError) as exc_info:
            NoKey.describe()

        assert exc_info.value.code == "missing_key_field"
        assert exc_info.value.details["fields"] == ["name"]


class TestEntityCapabilities:
    def test_get_id_and_table_name(self):
        entity = SampleEntity(id=5, name="x")

        assert entity.get_id() == 5
        assert entity.get_table_name() == "sample_entities"
        assert SampleEntity.get_table_name() == "sample_entities"

    def test_to_map_uses_column_names(self):
        label = Label(id="l-1", display_name="Bug")

        assert label.to_map() == {"id": "l-1", "title": "Bug", "color": None}

    def test_from_row(self):
        label = Label.from_row({"id": "l-1", "title": "Bug", "color": "red"})

        assert label.display_name == "Bug"
        assert label.color == "red"

    def test_unsaved_entity_has_no_id(self):
        assert SampleEntity(name="x").get_id() is None


class TestPagination:
    def test_defaults(self):
        assert Pagination(limit=10).offset == 0

    @pytest.mark.parametrize("kwargs", [{"limit": -1}, {"limit": 1, "offset": -5}])
    def test_negative_values_rejected(self, kwargs):
        with pytest.raises(PydanticValidationError):
            Pagination(**kwargs)

    def test_result_is_frozen(self):
        result = PaginatedResult[SampleEntity](
            pagination=Pagination(limit=1), total_count=0, results=[]
        )

        with pytest.raises(PydanticValidationError):
            result.total_count = 3

    def test_result_keeps_entity_instances(self):
        entity = SampleEntity(id=1, name="x")

        result = PaginatedResult[SampleEntity](
            pagination=Pagination(limit=1), total_count=1, results=[entity]
        )

        assert result.results[0] is entity

    def test_result_entities_are_immutable(self):
        result = PaginatedResult[SampleEntity](
            pagination=Pagination(limit=2),
            total_count=1,
            results=[SampleEntity(id=1, name="x")],
        )

        assert isinstance(result.results, tuple)
        with pytest.raises(AttributeError):
            result.results.append(SampleEntity(id=2, name="y"))
