"""Edge label formatting."""

from ..config import LabelConfig
from ..models.introspection import Argument, TypeField
from .types import describe_type

COLLAPSED_ARGS = "..."


def arg_to_str(arg: Argument, config: LabelConfig) -> str:
    if config.expand_arg_types:
        return f"{arg.name}: {describe_type(arg.type)}"
    return arg.name


def format_args(args: list[Argument], config: LabelConfig) -> str:
    """Argument list text; collapsed to ``...`` unless ``expand_args`` is set."""
    if not config.expand_args:
        return COLLAPSED_ARGS
    return ", ".join(arg_to_str(arg, config) for arg in args)


def field_label(field: TypeField, config: LabelConfig) -> str:
    """Label for the edge a relational field produces.

    ``friends(...): [User]`` by default, ``friends(first: Int): [User]`` with
    both label options enabled.
    """
    label = field.name
    if field.args:
        label += f"({format_args(field.args, config)})"
    return f"{label}: {describe_type(field.type)}"
