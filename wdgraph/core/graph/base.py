"""Core Graph container: sorted node index with per-node edge lists."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from wdgraph.core.exceptions import CursorError, EndpointNotFoundError, NodeNotFoundError
from wdgraph.core.graph.cursor import EdgeCursor, ReverseEdgeCursor
from wdgraph.core.graph.index import NodeIndex
from wdgraph.core.graph.mutation import merge_nodes, rename_node
from wdgraph.core.graph.render import render
from wdgraph.core.models import Edge, EdgeView, NodeHandle, NodeRecord

logger = logging.getLogger(__name__)


class Graph:
    """Directed weighted multigraph over unique, totally ordered node values.

    Several edges may join the same pair of nodes as long as their weights
    differ. Deleting a node leaves edges that targeted it stale; stale edges
    are dropped lazily by whichever read walks their list next.

    Not safe for concurrent use; callers must serialize access.
    """

    __slots__ = ("_index",)

    def __init__(
        self,
        nodes: Iterable[Any] | None = None,
        edges: Iterable[tuple[Any, Any, Any]] | None = None,
    ) -> None:
        self._index = NodeIndex()
        for value in nodes or ():
            self.insert_node(value)
        for src, dst, weight in edges or ():
            self.insert_node(src)
            self.insert_node(dst)
            self.insert_edge(src, dst, weight)

    @classmethod
    def from_nodes(cls, nodes: Iterable[Any]) -> Graph:
        """Build a graph holding each value once. Duplicates are ignored."""
        return cls(nodes=nodes)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[Any, Any, Any]]) -> Graph:
        """Build a graph from (src, dst, weight) triples, adding missing endpoints."""
        return cls(edges=edges)

    # Copy and move

    def _clone(self, transform: Callable[[Any], Any]) -> Graph:
        clone = Graph()
        twins: dict[NodeHandle, NodeHandle] = {}
        records: list[NodeRecord] = []
        for record in self._index:
            twin = NodeRecord(NodeHandle(transform(record.value)))
            twins[record.handle] = twin.handle
            records.append(twin)
        for record, twin in zip(self._index, records):
            record.sort_edges()
            twin.edges = [Edge(twins[e.target], transform(e.weight)) for e in record.edges]
        clone._index.adopt(records)
        return clone

    def copy(self) -> Graph:
        """Independent copy with new records and edges. Values are shared."""
        return self._clone(lambda value: value)

    def __copy__(self) -> Graph:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Graph:
        return self._clone(lambda value: copy.deepcopy(value, memo))

    def move(self) -> Graph:
        """Transfer all content to a new graph, leaving this one empty."""
        moved = Graph()
        moved._index.adopt(self._index.detach())
        return moved

    def assign(self, other: Graph, move: bool = False) -> Graph:
        """Replace this graph's content with a copy of ``other`` (or take it, if ``move``)."""
        if other is self:
            return self
        records = other._index.detach() if move else other.copy()._index.detach()
        self._index.clear()
        self._index.adopt(records)
        return self

    # Nodes

    def insert_node(self, value: Any) -> bool:
        """Add a node. Returns False if ``value`` is already a node. O(log n) lookup."""
        return self._index.insert(value) is not None

    def delete_node(self, value: Any) -> bool:
        """Remove a node and its outgoing edges. Returns False if absent.

        Edges elsewhere that targeted the node go stale and stop being visible.
        """
        if self._index.remove(value) is None:
            return False
        logger.debug("Deleted node %r", value)
        return True

    def is_node(self, value: Any) -> bool:
        return value in self._index

    def replace(self, old: Any, new: Any) -> bool:
        """Rename node ``old`` to ``new``. Returns False if ``new`` is another existing node.

        Raises:
            NodeNotFoundError: ``old`` is not a node.
        """
        return rename_node(self, old, new)

    def merge_replace(self, old: Any, new: Any) -> None:
        """Redirect everything touching ``old`` onto ``new``, then delete ``old``.

        Raises:
            EndpointNotFoundError: either value is not a node.
        """
        merge_nodes(self, old, new)

    def clear(self) -> None:
        self._index.clear()
        logger.debug("Cleared graph")

    def get_nodes(self) -> list[Any]:
        """All node values in ascending order."""
        return [record.value for record in self._index]

    # Edges

    def _endpoints(self, operation: str, src: Any, dst: Any) -> tuple[NodeRecord, NodeRecord]:
        src_record = self._index.get(src)
        dst_record = self._index.get(dst)
        if src_record is None or dst_record is None:
            missing = [repr(v) for v, r in ((src, src_record), (dst, dst_record)) if r is None]
            raise EndpointNotFoundError(
                f"Cannot call {operation} when src or dst node does not exist: "
                f"{', '.join(missing)}"
            )
        return src_record, dst_record

    def _prune(self, record: NodeRecord) -> None:
        pruned = record.prune()
        if pruned:
            logger.debug("Pruned %d stale edges from %r", pruned, record.value)

    def insert_edge(self, src: Any, dst: Any, weight: Any) -> bool:
        """Add edge src -> dst with ``weight``. Returns False if it already exists.

        Raises:
            EndpointNotFoundError: ``src`` or ``dst`` is not a node.
        """
        src_record, dst_record = self._endpoints("insert_edge", src, dst)
        return src_record.add_edge(dst_record.handle, weight)

    def erase(self, src: Any, dst: Any, weight: Any) -> bool:
        """Remove edge src -> dst with ``weight``. Returns False if there is no such edge."""
        src_record = self._index.get(src)
        dst_record = self._index.get(dst)
        if src_record is None or dst_record is None:
            return False
        self._prune(src_record)
        for pos, edge in enumerate(src_record.edges):
            if edge.target is dst_record.handle and edge.weight == weight:
                del src_record.edges[pos]
                return True
        return False

    def erase_at(self, cursor: EdgeCursor) -> EdgeCursor:
        """Remove the edge under ``cursor``; return a cursor to the edge that followed it."""
        if cursor._index is not self._index:
            raise CursorError("Cursor does not belong to this graph")
        if cursor.at_end:
            return self.end()
        node, pos = cursor.position()
        del self._index[node].edges[pos]
        return EdgeCursor.settled(self._index, node, pos)

    def is_connected(self, src: Any, dst: Any) -> bool:
        """True if at least one edge src -> dst exists.

        Raises:
            EndpointNotFoundError: ``src`` or ``dst`` is not a node.
        """
        src_record, dst_record = self._endpoints("is_connected", src, dst)
        self._prune(src_record)
        return any(edge.target is dst_record.handle for edge in src_record.edges)

    def get_connected(self, src: Any) -> list[Any]:
        """Distinct destinations of edges leaving ``src``, ascending.

        Raises:
            NodeNotFoundError: ``src`` is not a node.
        """
        record = self._index.get(src)
        if record is None:
            raise NodeNotFoundError(
                f"Cannot call get_connected when src node does not exist: {src!r}"
            )
        self._prune(record)
        connected: list[Any] = []
        for value in sorted(edge.destination for edge in record.edges):
            if not connected or connected[-1] != value:
                connected.append(value)
        return connected

    def get_weights(self, src: Any, dst: Any) -> list[Any]:
        """Weights of every edge src -> dst, ascending.

        Raises:
            EndpointNotFoundError: ``src`` or ``dst`` is not a node.
        """
        src_record, dst_record = self._endpoints("get_weights", src, dst)
        self._prune(src_record)
        return sorted(e.weight for e in src_record.edges if e.target is dst_record.handle)

    def find(self, src: Any, dst: Any, weight: Any) -> EdgeCursor:
        """Cursor at edge src -> dst with ``weight``, or the end cursor. Linear scan."""
        if src not in self._index or dst not in self._index:
            return self.end()
        cursor = self.begin()
        while not cursor.at_end:
            if cursor.value == (src, dst, weight):
                return cursor
            cursor.advance()
        return cursor

    # Cursors

    def begin(self) -> EdgeCursor:
        return EdgeCursor.first(self._index)

    def end(self) -> EdgeCursor:
        return EdgeCursor(self._index)

    def rbegin(self) -> ReverseEdgeCursor:
        return ReverseEdgeCursor(self.end())

    def rend(self) -> ReverseEdgeCursor:
        return ReverseEdgeCursor(self.begin())

    def __iter__(self) -> Iterator[EdgeView]:
        """(source, destination, weight) triples ordered by source, destination, weight."""
        cursor = self.begin()
        while not cursor.at_end:
            yield cursor.value
            cursor.advance()

    def __reversed__(self) -> Iterator[EdgeView]:
        cursor, stop = self.rbegin(), self.rend()
        while cursor != stop:
            yield cursor.value
            cursor.advance()

    # Comparison and display

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return render(self) == render(other)

    __hash__ = None  # type: ignore[assignment]

    def render(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)

    def __contains__(self, value: Any) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self._index)

    @property
    def num_nodes(self) -> int:
        return len(self._index)

    @property
    def num_edges(self) -> int:
        """Live edges, counted without pruning."""
        return sum(not edge.is_stale for record in self._index for edge in record.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.num_nodes}, edges={self.num_edges})"
