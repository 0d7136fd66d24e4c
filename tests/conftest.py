"""Pytest configuration and fixtures for graphqlviz tests."""

import json

import pytest

from graphqlviz.config import GraphqlvizConfig, LabelConfig
from graphqlviz.models import parse_introspection


def named(name, kind="OBJECT"):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(inner):
    return {"kind": "NON_NULL", "name": None, "ofType": inner}


def list_of(inner):
    return {"kind": "LIST", "name": None, "ofType": inner}


def scalar(name):
    return named(name, "SCALAR")


def field(name, type_ref, args=None, description=None):
    return {
        "name": name,
        "description": description,
        "args": args or [],
        "type": type_ref,
        "isDeprecated": False,
        "deprecationReason": None,
    }


def arg(name, type_ref):
    return {"name": name, "description": None, "type": type_ref, "defaultValue": None}


def object_type(name, fields, kind="OBJECT"):
    return {
        "kind": kind,
        "name": name,
        "description": None,
        "fields": fields,
        "inputFields": None,
        "interfaces": [],
        "enumValues": None,
        "possibleTypes": None,
    }


def enum_type(name, values):
    return {
        "kind": "ENUM",
        "name": name,
        "description": None,
        "fields": None,
        "inputFields": None,
        "interfaces": None,
        "enumValues": [
            {"name": v, "description": None, "isDeprecated": False, "deprecationReason": None}
            for v in values
        ],
        "possibleTypes": None,
    }


def scalar_type(name):
    return {
        "kind": "SCALAR",
        "name": name,
        "description": None,
        "fields": None,
        "inputFields": None,
        "interfaces": None,
        "enumValues": None,
        "possibleTypes": None,
    }


@pytest.fixture
def library_document():
    """Introspection response for a small book catalogue."""
    types = [
        object_type("Query", [
            field("books", non_null(list_of(non_null(named("Book")))),
                  args=[arg("first", scalar("Int")), arg("genre", named("Genre", "ENUM"))],
                  description="All books"),
            field("version", scalar("String")),
        ]),
        object_type("Book", [
            field("title", scalar("String")),
            field("author", named("Author"), description="Who wrote it"),
            field("genre", named("Genre", "ENUM")),
            field("coAuthor", named("Author")),
        ]),
        object_type("Author", [
            field("name", non_null(scalar("String"))),
        ]),
        enum_type("Genre", ["FICTION", "NONFICTION"]),
        scalar_type("String"),
        scalar_type("Int"),
        object_type("__Type", [
            field("fields", list_of(non_null(named("__Field")))),
        ]),
        object_type("__Field", [
            field("name", non_null(scalar("String"))),
        ]),
    ]
    return {"data": {"__schema": {"queryType": {"name": "Query"}, "types": types}}}


@pytest.fixture
def library_schema(library_document):
    return parse_introspection(library_document)


@pytest.fixture
def library_file(tmp_path, library_document):
    """Introspection response saved as a local JSON file."""
    path = tmp_path / "library.introspection.json"
    path.write_text(json.dumps(library_document, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def default_labels():
    return LabelConfig()


@pytest.fixture
def expanded_labels():
    return LabelConfig(expand_args=True, expand_arg_types=True)


@pytest.fixture
def default_config():
    return GraphqlvizConfig()
