"""Graphviz diagram renderer producing DOT source and SVG output."""

import logging
from pathlib import Path

import graphviz

from ..config import RenderConfig
from .descriptor import descriptor_to_html
from .models import GraphSpec

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when Graphviz cannot render the diagram."""
    pass


class GraphvizRenderer:
    """Graphviz renderer for schema graphs: table-shaped nodes, labelled edges."""

    def __init__(self, style: RenderConfig | None = None):
        self.style = style or RenderConfig()

    def build_digraph(self, spec: GraphSpec) -> graphviz.Digraph:
        """Assemble the Digraph for a graph specification."""
        dot = graphviz.Digraph(
            name=spec.title or None,
            graph_attr={"label": graphviz.escape(spec.title), "rankdir": str(self.style.rankdir)},
            node_attr={"shape": "none", "margin": "0"},
        )

        for node in spec.nodes.values():
            dot.node(node.id, label=descriptor_to_html(node.descriptor, self.style))

        for edge in spec.edges:
            attrs = {}
            if edge.tooltip:
                attrs["labeltooltip"] = graphviz.escape(edge.tooltip)
            dot.edge(edge.from_node, edge.to_node, label=graphviz.escape(edge.label), **attrs)

        return dot

    def render(self, spec: GraphSpec) -> str:
        """Render graph specification as DOT source."""
        return self.build_digraph(spec).source

    def render_svg(self, source: str) -> str:
        """Lay out DOT source with the ``dot`` engine and return SVG text."""
        try:
            return graphviz.Source(source).pipe(format="svg", encoding="utf-8")
        except graphviz.ExecutableNotFound as e:
            raise RenderError(f"Graphviz executable not found: {e}") from e
        except graphviz.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", "replace") if isinstance(e.stderr, bytes) else e.stderr
            raise RenderError(f"Graphviz failed to render diagram: {stderr or e}") from e

    def write(self, spec: GraphSpec, output_base: str | Path) -> tuple[Path, Path]:
        """Write ``<output_base>.dot`` and ``<output_base>.svg``.

        Returns:
            Paths of the DOT and SVG files
        """
        dot_path = Path(f"{output_base}.dot")
        svg_path = Path(f"{output_base}.svg")

        source = self.render(spec)
        logger.info(f"Writing DOT {dot_path}")
        dot_path.write_text(source, encoding="utf-8")

        svg = self.render_svg(source)
        logger.info(f"Writing SVG {svg_path}")
        svg_path.write_text(svg, encoding="utf-8")

        return dot_path, svg_path
