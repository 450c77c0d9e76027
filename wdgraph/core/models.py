"""Data models for wdgraph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple


@dataclass(eq=False)
class NodeHandle:
    """Boxed node value shared by the node index and every edge targeting it.

    Renaming assigns ``value`` in place, so holders of the handle observe the
    new value. Deleting the node clears ``alive``; edges still holding the
    handle are stale from then on.
    """

    value: Any
    alive: bool = True

    def release(self) -> None:
        self.alive = False


@dataclass(eq=False)
class Edge:
    """An outgoing edge: non-authoritative handle to the destination plus a weight."""

    target: NodeHandle
    weight: Any

    @property
    def is_stale(self) -> bool:
        return not self.target.alive

    @property
    def destination(self) -> Any:
        return self.target.value

    def sort_key(self) -> tuple[Any, Any]:
        return (self.target.value, self.weight)


@dataclass(eq=False)
class NodeRecord:
    """A node: its handle and its (lazily sorted) list of outgoing edges."""

    handle: NodeHandle
    edges: list[Edge] = field(default_factory=list)

    @property
    def value(self) -> Any:
        return self.handle.value

    def prune(self) -> int:
        """Drop stale edges in place. Returns the number removed."""
        before = len(self.edges)
        self.edges[:] = [e for e in self.edges if not e.is_stale]
        return before - len(self.edges)

    def add_edge(self, target: NodeHandle, weight: Any) -> bool:
        """Append an edge unless a live (target, weight) edge already exists."""
        for edge in self.edges:
            if not edge.is_stale and edge.target is target and edge.weight == weight:
                return False
        self.edges.append(Edge(target, weight))
        return True

    def sort_edges(self) -> int:
        """Prune, then sort by (destination, weight). Returns the number pruned."""
        pruned = self.prune()
        self.edges.sort(key=Edge.sort_key)
        return pruned


class EdgeView(NamedTuple):
    """Read-only (source, destination, weight) triple yielded by cursors."""

    source: Any
    destination: Any
    weight: Any

    def __str__(self) -> str:
        return f"<{self.source} {self.destination} {self.weight}>"
