"""Classification and wrapper resolution for introspection types."""

from ..models.introspection import SchemaError, SchemaType, TypeField, TypeKind, TypeRef

INTERNAL_PREFIX = "__"
MAX_WRAPPER_DEPTH = 64


class WrapperDepthError(SchemaError):
    """Raised when a LIST/NON_NULL chain does not reach a named type."""
    pass


def is_internal(t: SchemaType | TypeRef) -> bool:
    """Introspection-only types such as ``__Schema`` and ``__Type``."""
    return bool(t.name) and t.name.startswith(INTERNAL_PREFIX)


def is_scalar(t: SchemaType | TypeRef) -> bool:
    return t.kind == TypeKind.SCALAR


def is_enum(t: SchemaType | TypeRef) -> bool:
    return t.kind == TypeKind.ENUM


def _unwrap(ref: TypeRef) -> tuple[list[TypeKind], TypeRef]:
    """Split a reference into its wrapper kinds (outermost first) and terminal."""
    wrappers = []
    while ref.of_type is not None:
        if len(wrappers) >= MAX_WRAPPER_DEPTH:
            raise WrapperDepthError(
                f"Type reference nested deeper than {MAX_WRAPPER_DEPTH} wrappers"
            )
        wrappers.append(ref.kind)
        ref = ref.of_type
    return wrappers, ref


def terminal_type(ref: TypeRef) -> TypeRef:
    """Innermost named type of a possibly wrapped reference."""
    return _unwrap(ref)[1]


def describe_type(ref: TypeRef) -> str:
    """Render a reference in SDL notation, e.g. ``[User!]!``."""
    wrappers, terminal = _unwrap(ref)
    text = terminal.name
    for kind in reversed(wrappers):
        if kind == TypeKind.NON_NULL:
            text = f"{text}!"
        elif kind == TypeKind.LIST:
            text = f"[{text}]"
    return text


def is_relational_field(field: TypeField) -> bool:
    """Whether a field points at a non-scalar type (ENUM included)."""
    return not is_scalar(terminal_type(field.type))
