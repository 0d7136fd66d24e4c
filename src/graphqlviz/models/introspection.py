"""Typed records for the GraphQL introspection result."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


class SchemaError(Exception):
    """Raised when an introspection document cannot be interpreted."""
    pass


class TypeKind(str, Enum):
    """Introspection type kinds."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"


WRAPPER_KINDS = frozenset({TypeKind.LIST, TypeKind.NON_NULL})


class TypeRef(BaseModel):
    """Possibly wrapped reference to a named type.

    A LIST or NON_NULL reference wraps another reference through ``of_type``;
    any other kind names the referenced type directly.
    """
    kind: TypeKind
    name: str | None = None
    of_type: "TypeRef | None" = Field(alias="ofType", default=None)

    @model_validator(mode="after")
    def check_shape(self):
        if self.kind in WRAPPER_KINDS and self.of_type is None:
            raise ValueError(f"{self.kind.value} reference without ofType")
        if self.kind not in WRAPPER_KINDS and not self.name:
            raise ValueError(f"{self.kind.value} reference without name")
        return self

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Argument(BaseModel):
    """Field argument (``__InputValue``)."""
    name: str
    description: str | None = None
    type: TypeRef
    default_value: str | None = Field(alias="defaultValue", default=None)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TypeField(BaseModel):
    """Field declared on an OBJECT or INTERFACE type."""
    name: str
    description: str | None = None
    args: list[Argument] = Field(default_factory=list)
    type: TypeRef
    is_deprecated: bool = Field(alias="isDeprecated", default=False)
    deprecation_reason: str | None = Field(alias="deprecationReason", default=None)

    @field_validator("args", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return [] if v is None else v

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class EnumValue(BaseModel):
    """Single value of an ENUM type."""
    name: str
    description: str | None = None

    model_config = ConfigDict(frozen=True)


class SchemaType(BaseModel):
    """Named type listed in ``__schema.types``."""
    name: str
    kind: TypeKind
    description: str | None = None
    fields: list[TypeField] = Field(default_factory=list)
    enum_values: list[EnumValue] = Field(alias="enumValues", default_factory=list)

    @field_validator("fields", "enum_values", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return [] if v is None else v

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class IntrospectionSchema(BaseModel):
    """The ``__schema`` object of an introspection result."""
    types: list[SchemaType]

    model_config = ConfigDict(frozen=True)


def parse_introspection(document: Any) -> IntrospectionSchema:
    """Build typed records from a decoded introspection document.

    Accepts the usual response shape ``{"data": {"__schema": ...}}`` as well
    as a bare ``{"__schema": ...}`` object.

    Raises:
        SchemaError: If ``__schema`` or ``types`` is missing or a record does
            not match the introspection shape
    """
    if not isinstance(document, dict):
        raise SchemaError("Introspection document must be a JSON object")

    root = document.get("data", document)
    if not isinstance(root, dict) or "__schema" not in root:
        raise SchemaError("Introspection document has no __schema")

    schema = root["__schema"]
    if not isinstance(schema, dict) or "types" not in schema:
        raise SchemaError("Introspection __schema has no types")

    try:
        return IntrospectionSchema(types=schema["types"])
    except ValidationError as e:
        raise SchemaError(f"Malformed introspection types: {e}") from e


def load_schema(path: str | Path) -> IntrospectionSchema:
    """Read and parse an introspection JSON file."""
    path = Path(path)
    logger.debug(f"Reading introspection result from {path}")
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SchemaError(f"{path} is not UTF-8 encoded JSON: {e}") from e

    schema = parse_introspection(document)
    logger.debug(f"Parsed {len(schema.types)} types from {path}")
    return schema
