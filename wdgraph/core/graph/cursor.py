"""Bidirectional cursors over the flattened (source, destination, weight) sequence.

A cursor holds the node record and the edge it points at, and finds their
list positions by identity whenever it moves or is read. Erasing other edges
or pruning stale ones therefore leaves it valid. Entering a node prunes and
sorts its edge list; stale edges met while stepping are dropped in place.

Cursors are tied to one graph. Inserting, deleting, renaming or merging nodes,
or clearing the graph, invalidates live cursors positioned at or after the
affected records; using them afterwards is undefined. A cursor whose own edge
has been removed raises ``CursorError`` when used.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wdgraph.core.exceptions import CursorError
from wdgraph.core.models import EdgeView

if TYPE_CHECKING:
    from wdgraph.core.graph.index import NodeIndex
    from wdgraph.core.models import Edge, NodeRecord

logger = logging.getLogger(__name__)


class EdgeCursor:
    """Forward/backward position in a graph's ordered edge sequence.

    ``record is None`` is the end position shared by every exhausted cursor.
    """

    __slots__ = ("_index", "_record", "_edge", "_hint")

    def __init__(
        self,
        index: NodeIndex,
        record: NodeRecord | None = None,
        edge: Edge | None = None,
        hint: int = 0,
    ) -> None:
        self._index = index
        self._record = record
        self._edge = edge
        self._hint = hint

    @classmethod
    def first(cls, index: NodeIndex) -> EdgeCursor:
        """Cursor at the first live edge of ``index``, or the end cursor."""
        if not len(index):
            return cls(index)
        index[0].sort_edges()
        return cls.settled(index, 0, 0)

    @classmethod
    def settled(cls, index: NodeIndex, node: int, pos: int) -> EdgeCursor:
        """Cursor at the first live edge at or after list position (node, pos)."""
        cursor = cls(index)
        cursor._settle_forward(node, pos)
        return cursor

    @property
    def at_end(self) -> bool:
        return self._record is None

    @property
    def value(self) -> EdgeView:
        """The (source, destination, weight) triple under the cursor."""
        if self._record is None or self._edge is None:
            raise CursorError("Cannot dereference the end cursor")
        self.position()
        if self._edge.is_stale:
            raise CursorError("Cursor's destination node no longer exists")
        return EdgeView(self._record.value, self._edge.destination, self._edge.weight)

    def position(self) -> tuple[int, int]:
        """Current (node, edge) list positions, located by identity."""
        record, edge = self._record, self._edge
        if record is None or edge is None:
            raise CursorError("The end cursor has no position")
        node = self._index.position(record.value)
        if node is None or self._index[node] is not record:
            raise CursorError("Cursor's node is no longer in the graph")

        edges = record.edges
        if self._hint < len(edges) and edges[self._hint] is edge:
            return node, self._hint
        for pos, candidate in enumerate(edges):
            if candidate is edge:
                self._hint = pos
                return node, pos
        raise CursorError("Cursor's edge is no longer in the graph")

    def copy(self) -> EdgeCursor:
        return EdgeCursor(self._index, self._record, self._edge, self._hint)

    __copy__ = copy

    def advance(self) -> EdgeCursor:
        """Step to the next edge. Returns self."""
        if self._record is None:
            raise CursorError("Cannot advance past the end cursor")
        node, pos = self.position()
        self._settle_forward(node, pos + 1)
        return self

    def retreat(self) -> EdgeCursor:
        """Step to the previous edge. From the end, lands on the last edge. Returns self."""
        if self._record is None:
            node, pos = len(self._index), -1
        else:
            node, pos = self.position()
            pos -= 1
        self._settle_backward(node, pos)
        return self

    def _point_at(self, node: int | None, pos: int = 0) -> None:
        if node is None:
            self._record, self._edge, self._hint = None, None, 0
            return
        record = self._index[node]
        self._record, self._edge, self._hint = record, record.edges[pos], pos

    def _settle_forward(self, node: int, pos: int) -> None:
        index = self._index
        while True:
            edges = index[node].edges
            while pos < len(edges):
                if not edges[pos].is_stale:
                    self._point_at(node, pos)
                    return
                logger.debug("Dropping stale edge from %r", index[node].value)
                del edges[pos]

            node += 1
            while node < len(index) and not index[node].edges:
                node += 1
            if node >= len(index):
                self._point_at(None)
                return
            index[node].sort_edges()
            pos = 0

    def _settle_backward(self, node: int, pos: int) -> None:
        index = self._index
        while True:
            if node < len(index):
                edges = index[node].edges
                while pos >= 0:
                    if not edges[pos].is_stale:
                        self._point_at(node, pos)
                        return
                    logger.debug("Dropping stale edge from %r", index[node].value)
                    del edges[pos]
                    pos -= 1

            node -= 1
            while node >= 0 and not index[node].edges:
                node -= 1
            if node < 0:
                raise CursorError("Cannot retreat before the first edge")
            index[node].sort_edges()
            pos = len(index[node].edges) - 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeCursor):
            return NotImplemented
        return (
            self._index is other._index
            and self._record is other._record
            and self._edge is other._edge
        )

    def __repr__(self) -> str:
        if self._record is None or self._edge is None:
            return "EdgeCursor(end)"
        return f"EdgeCursor(source={self._record.value!r}, edge={self._hint})"


class ReverseEdgeCursor:
    """Reverse adapter: dereferences the edge just before its base cursor."""

    __slots__ = ("_base",)

    def __init__(self, base: EdgeCursor) -> None:
        self._base = base.copy()

    @property
    def base(self) -> EdgeCursor:
        return self._base.copy()

    @property
    def value(self) -> EdgeView:
        return self._base.copy().retreat().value

    def copy(self) -> ReverseEdgeCursor:
        return ReverseEdgeCursor(self._base)

    __copy__ = copy

    def advance(self) -> ReverseEdgeCursor:
        self._base.retreat()
        return self

    def retreat(self) -> ReverseEdgeCursor:
        self._base.advance()
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseEdgeCursor):
            return NotImplemented
        return self._base == other._base

    def __repr__(self) -> str:
        return f"ReverseEdgeCursor({self._base!r})"
