"""Graph data models for schema diagrams."""

from dataclasses import dataclass, field
from enum import Enum

from ..models.introspection import SchemaType


class RowKind(str, Enum):
    """Kinds of descriptor body rows."""
    FIELD = "field"
    ENUM_VALUE = "enum_value"


@dataclass
class DescriptorRow:
    """One body row of a node table."""
    text: str
    kind: RowKind


@dataclass
class DescriptorTable:
    """Table shown inside a node: header plus scalar fields and enum values."""
    title: str
    stereotype: str = ""
    rows: list[DescriptorRow] = field(default_factory=list)


@dataclass
class NodeSpec:
    """Specification for a schema type node."""
    id: str  # Type name
    type: SchemaType
    descriptor: DescriptorTable


@dataclass
class EdgeSpec:
    """Specification for a relational field edge."""
    from_node: str  # Owning type name
    to_node: str    # Terminal type name
    label: str
    tooltip: str = ""
    field_name: str | None = None


@dataclass
class GraphSpec:
    """Complete graph specification for rendering."""
    title: str
    nodes: dict[str, NodeSpec] = field(default_factory=dict)
    edges: list[EdgeSpec] = field(default_factory=list)

    def add_node(self, node: NodeSpec) -> None:
        """Add a node to the graph."""
        self.nodes[node.id] = node

    def add_edge(self, edge: EdgeSpec) -> None:
        """Add an edge to the graph."""
        self.edges.append(edge)

    def edges_from(self, node_id: str) -> list[EdgeSpec]:
        """Edges leaving a node, in declaration order."""
        return [edge for edge in self.edges if edge.from_node == node_id]

    def dangling_edges(self) -> list[EdgeSpec]:
        """Edges whose target type is not a node of this graph."""
        return [edge for edge in self.edges if edge.to_node not in self.nodes]
