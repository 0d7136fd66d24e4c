"""Pydantic data models for GraphQL introspection results."""

from graphqlviz.models.introspection import (
    Argument,
    EnumValue,
    IntrospectionSchema,
    SchemaError,
    SchemaType,
    TypeField,
    TypeKind,
    TypeRef,
    load_schema,
    parse_introspection,
)

__all__ = [
    "Argument",
    "EnumValue",
    "IntrospectionSchema",
    "SchemaError",
    "SchemaType",
    "TypeField",
    "TypeKind",
    "TypeRef",
    "load_schema",
    "parse_introspection",
]
