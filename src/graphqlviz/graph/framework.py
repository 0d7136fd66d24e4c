"""Graph generation framework: schema types in, nodes and edges out."""

import logging
from collections.abc import Iterable

from ..config import GraphqlvizConfig
from ..models.introspection import IntrospectionSchema, SchemaType
from .descriptor import build_descriptor
from .labels import field_label
from .models import EdgeSpec, GraphSpec, NodeSpec
from .types import is_internal, is_relational_field, is_scalar, terminal_type

logger = logging.getLogger(__name__)


def type_to_id(t: SchemaType) -> str:
    return t.name


def is_node_type(t: SchemaType) -> bool:
    """Types drawn as nodes: everything but scalars and introspection types."""
    return not is_internal(t) and not is_scalar(t)


class GraphGenerator:
    """Builds graph specifications from introspection types."""

    def __init__(self, config: GraphqlvizConfig):
        self.config = config

    def generate_from_schema(self, schema: IntrospectionSchema, title: str) -> GraphSpec:
        """Generate graph specification from a parsed introspection schema."""
        return self.build(schema.types, title)

    def build(self, types: Iterable[SchemaType], title: str = "") -> GraphSpec:
        """Classify types into nodes and emit one edge per relational field.

        Args:
            types: Schema types in declaration order
            title: Graph title shown by the renderer

        Returns:
            GraphSpec ready for rendering
        """
        spec = GraphSpec(title=title)

        for t in types:
            if not is_node_type(t):
                logger.debug(f"Skipping {t.kind.value} type {t.name}")
                continue
            spec.add_node(self._create_node(t))
            for edge in self._create_edges(t):
                spec.add_edge(edge)

        for edge in spec.dangling_edges():
            logger.warning(
                f"Field {edge.from_node}.{edge.field_name} references unknown type {edge.to_node}"
            )

        logger.info(f"Generating graph from {len(spec.nodes)} nodes and {len(spec.edges)} edges")
        return spec

    def _create_node(self, t: SchemaType) -> NodeSpec:
        return NodeSpec(id=type_to_id(t), type=t, descriptor=build_descriptor(t))

    def _create_edges(self, t: SchemaType) -> list[EdgeSpec]:
        """One edge per relational field; parallel edges are kept."""
        edges = []
        for f in t.fields:
            if not is_relational_field(f):
                continue
            target = terminal_type(f.type)
            if is_internal(target):
                # Introspection types are never endpoints.
                continue
            edges.append(EdgeSpec(
                from_node=type_to_id(t),
                to_node=target.name,
                label=field_label(f, self.config.labels),
                tooltip=f.description or "",
                field_name=f.name,
            ))
        return edges
