"""Schema-to-graph transformation and diagram rendering."""

from .descriptor import build_descriptor, descriptor_to_html
from .framework import GraphGenerator
from .graphviz import GraphvizRenderer, RenderError
from .labels import field_label, format_args
from .models import DescriptorRow, DescriptorTable, EdgeSpec, GraphSpec, NodeSpec, RowKind
from .types import WrapperDepthError, describe_type, terminal_type

__all__ = [
    "GraphGenerator",
    "GraphvizRenderer",
    "RenderError",
    "GraphSpec",
    "NodeSpec",
    "EdgeSpec",
    "DescriptorTable",
    "DescriptorRow",
    "RowKind",
    "build_descriptor",
    "descriptor_to_html",
    "field_label",
    "format_args",
    "describe_type",
    "terminal_type",
    "WrapperDepthError",
]
