"""Unit tests for introspection records and parsing."""

import json

import pytest

from conftest import enum_type, list_of, named, object_type
from graphqlviz.models import (
    SchemaError,
    SchemaType,
    TypeKind,
    TypeRef,
    load_schema,
    parse_introspection,
)


class TestParseIntrospection:
    """Test document shape handling."""

    def test_response_document(self, library_document):
        """Test the standard {"data": {"__schema": ...}} shape."""
        schema = parse_introspection(library_document)
        names = [t.name for t in schema.types]
        assert names[:4] == ["Query", "Book", "Author", "Genre"]

    def test_bare_schema_document(self, library_document):
        """Test a document without the data envelope."""
        schema = parse_introspection(library_document["data"])
        assert len(schema.types) == len(library_document["data"]["__schema"]["types"])

    def test_missing_schema(self):
        """Test that a document without __schema is rejected."""
        with pytest.raises(SchemaError, match="__schema"):
            parse_introspection({"data": {"types": []}})

    def test_missing_types(self):
        """Test that __schema without types is rejected."""
        with pytest.raises(SchemaError, match="types"):
            parse_introspection({"data": {"__schema": {"queryType": {"name": "Query"}}}})

    def test_non_object_document(self):
        """Test that non-object JSON is rejected."""
        with pytest.raises(SchemaError):
            parse_introspection([1, 2, 3])

    def test_unknown_kind(self):
        """Test that an unknown type kind fails fast."""
        with pytest.raises(SchemaError):
            parse_introspection({"__schema": {"types": [{"name": "X", "kind": "WIDGET"}]}})

    def test_field_without_type(self):
        """Test that a field record missing its type fails fast."""
        broken = object_type("Book", [{"name": "title", "args": []}])
        with pytest.raises(SchemaError):
            parse_introspection({"__schema": {"types": [broken]}})


class TestRecords:
    """Test record normalisation."""

    def test_null_lists_become_empty(self):
        """Test that JSON null fields and enumValues read as empty."""
        t = SchemaType.model_validate(enum_type("Genre", []) | {"fields": None, "enumValues": None})
        assert t.fields == []
        assert t.enum_values == []

    def test_enum_values_alias(self):
        """Test enumValues population."""
        t = SchemaType.model_validate(enum_type("Genre", ["FICTION"]))
        assert t.kind == TypeKind.ENUM
        assert t.enum_values[0].name == "FICTION"

    def test_wrapper_requires_of_type(self):
        """Test that LIST/NON_NULL without ofType is malformed."""
        with pytest.raises(ValueError):
            TypeRef.model_validate({"kind": "LIST", "name": None, "ofType": None})

    def test_named_requires_name(self):
        """Test that a non-wrapper reference needs a name."""
        with pytest.raises(ValueError):
            TypeRef.model_validate({"kind": "OBJECT", "name": None})

    def test_nested_reference(self):
        """Test nested ofType parsing."""
        r = TypeRef.model_validate(list_of(named("Book")))
        assert r.kind == TypeKind.LIST
        assert r.of_type.name == "Book"

    def test_records_are_frozen(self):
        """Test that parsed records are read-only."""
        t = SchemaType(name="Book", kind="OBJECT")
        with pytest.raises(ValueError):
            t.name = "Author"


class TestLoadSchema:
    """Test reading introspection files."""

    def test_load_file(self, library_file):
        """Test loading a saved introspection result."""
        schema = load_schema(library_file)
        assert any(t.name == "Genre" for t in schema.types)

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaError, match="Invalid JSON"):
            load_schema(path)

    def test_missing_file(self, tmp_path):
        """Test a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            load_schema(tmp_path / "missing.json")

    def test_not_utf8(self, tmp_path):
        """Test that undecodable bytes are a schema error."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"data": "caf\xe9"}')
        with pytest.raises(SchemaError, match="not UTF-8"):
            load_schema(path)

    def test_round_trip_through_json(self, tmp_path, library_document):
        """Test that a bare __schema file loads the same types."""
        path = tmp_path / "bare.json"
        path.write_text(json.dumps(library_document["data"]), encoding="utf-8")
        assert len(load_schema(path).types) == len(library_document["data"]["__schema"]["types"])
