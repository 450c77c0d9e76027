"""
wdgraph: Weighted directed graph container for Python.

wdgraph holds uniquely valued, totally ordered nodes and weighted edges
between them, enabling you to:
- Insert, delete, rename and merge nodes
- Query connectivity, neighbours and edge weights
- Walk every edge forwards or backwards in (source, destination, weight) order

Usage:
    from wdgraph.core import Graph

    graph = Graph.from_edges([("A", "B", 1), ("B", "C", 2.5)])
    graph.merge_replace("B", "C")
    print(graph)
"""

__version__ = "0.1.0"
