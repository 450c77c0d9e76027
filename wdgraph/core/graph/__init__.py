"""
Weighted directed graph container and its cursors.

Data Structures:
    - Graph: Sorted node index with per-node edge lists, value semantics
    - NodeIndex: Sorted unique-key table of node records (binary search lookups)
    - EdgeCursor / ReverseEdgeCursor: Bidirectional positions over the
      flattened (source, destination, weight) sequence

Algorithms:
    - mutation: rename in place (replace), merge with redirect (merge_replace)
    - render: canonical text rendering and structural snapshots
"""

from wdgraph.core.graph.base import Graph
from wdgraph.core.graph.cursor import EdgeCursor, ReverseEdgeCursor
from wdgraph.core.graph.index import NodeIndex
from wdgraph.core.graph.render import render, snapshot

__all__ = [
    "Graph",
    "NodeIndex",
    "EdgeCursor",
    "ReverseEdgeCursor",
    "render",
    "snapshot",
]
