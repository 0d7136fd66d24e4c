"""graphqlviz - Render GraphQL schemas as entity-relationship diagrams.

graphqlviz reads a schema by introspection (over HTTP or from a saved JSON
result) and draws its types as table-shaped nodes joined by one edge per
relational field.
"""

__version__ = "0.1.0"
__description__ = "Render GraphQL schemas as entity-relationship diagrams"

from graphqlviz.config import GraphqlvizConfig

__all__ = [
    "__version__",
    "__description__",
    "GraphqlvizConfig",
]
