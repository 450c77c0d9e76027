"""Canonical text rendering and structural snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wdgraph.core.graph.base import Graph

Snapshot = tuple[tuple[Any, tuple[tuple[Any, Any], ...]], ...]


def snapshot(graph: Graph) -> Snapshot:
    """Per node, in index order: (value, sorted live (destination, weight) pairs).

    Prunes stale edges as a side effect.
    """
    result = []
    for record in graph._index:
        record.sort_edges()
        result.append((record.value, tuple(edge.sort_key() for edge in record.edges)))
    return tuple(result)


def render(graph: Graph) -> str:
    """Render as ``<value> (`` / ``  <destination> | <weight>`` lines / ``)`` per node."""
    parts: list[str] = []
    for value, edges in snapshot(graph):
        parts.append(f"{value} (\n")
        for destination, weight in edges:
            parts.append(f"  {destination} | {weight}\n")
        parts.append(")\n")
    return "".join(parts)
