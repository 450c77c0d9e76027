"""
Core module: data models, exceptions, and the graph container.

Models (models.py):
    - NodeHandle: Boxed node value shared by the index and incoming edges
    - NodeRecord: A node's handle plus its outgoing edge list
    - Edge: Handle to the destination plus a weight
    - EdgeView: The (source, destination, weight) triple cursors yield

Exceptions (exceptions.py):
    - GraphError: Base exception for all wdgraph errors
    - NodeNotFoundError: Requested node doesn't exist
    - EndpointNotFoundError: Source or destination of an edge operation doesn't exist
    - CursorError: Cursor dereferenced or moved outside the edge sequence

Graph (graph/):
    - Graph: The container, with copy/move, queries and mutations
"""

from wdgraph.core.exceptions import (
    CursorError,
    EndpointNotFoundError,
    GraphError,
    NodeNotFoundError,
)
from wdgraph.core.graph import EdgeCursor, Graph, ReverseEdgeCursor
from wdgraph.core.models import Edge, EdgeView, NodeHandle, NodeRecord

__all__ = [
    # Models
    "Edge",
    "EdgeView",
    "NodeHandle",
    "NodeRecord",
    # Exceptions
    "GraphError",
    "NodeNotFoundError",
    "EndpointNotFoundError",
    "CursorError",
    # Graph
    "Graph",
    "EdgeCursor",
    "ReverseEdgeCursor",
]
