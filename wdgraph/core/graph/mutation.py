"""Node renaming and merge-with-redirect."""

from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING, Any

from wdgraph.core.exceptions import EndpointNotFoundError, NodeNotFoundError
from wdgraph.core.models import Edge, NodeRecord

if TYPE_CHECKING:
    from wdgraph.core.graph.base import Graph

logger = logging.getLogger(__name__)


def rename_node(graph: Graph, old: Any, new: Any) -> bool:
    """Give the node ``old`` the value ``new`` in place.

    Edges pointing at the node share its handle and see the new value without
    being rewritten. Returns False if ``new`` is already another node.
    """
    record = graph._index.get(old)
    if record is None:
        raise NodeNotFoundError(f"Cannot replace node {old!r}: node does not exist")
    if new == old:
        return True
    if new in graph._index:
        return False

    graph._index.rekey(record, new)
    logger.debug("Renamed node %r to %r", old, new)
    return True


def merge_nodes(graph: Graph, old: Any, new: Any) -> None:
    """Fold node ``old`` into node ``new`` and delete ``old``.

    1. ``old``'s outgoing edges are merged into ``new``'s sorted edge list
    2. Every edge targeting ``old`` is re-inserted to target ``new``
    3. Every edge list is sorted and deduplicated by (destination, weight)
    4. ``old``'s record is removed
    """
    index = graph._index
    old_record = index.get(old)
    new_record = index.get(new)
    if old_record is None or new_record is None:
        raise EndpointNotFoundError(
            f"Cannot merge {old!r} into {new!r}: both nodes must exist in the graph"
        )
    if old_record is new_record:
        return

    new_record.sort_edges()
    old_record.sort_edges()
    new_record.edges[:] = list(
        heapq.merge(new_record.edges, old_record.edges, key=Edge.sort_key)
    )
    old_record.edges.clear()

    old_handle = old_record.handle
    redirected = 0
    for record in index:
        if record is old_record:
            continue
        kept: list[Edge] = []
        weights: list[Any] = []
        for edge in record.edges:
            if edge.is_stale:
                continue
            if edge.target is old_handle:
                weights.append(edge.weight)
            else:
                kept.append(edge)
        record.edges[:] = kept
        for weight in weights:
            record.add_edge(new_record.handle, weight)
        redirected += len(weights)

    for record in index:
        _dedupe(record)

    index.remove(old)
    logger.debug("Merged node %r into %r (%d edges redirected)", old, new, redirected)


def _dedupe(record: NodeRecord) -> None:
    """Sort and collapse edges sharing (destination, weight)."""
    record.sort_edges()
    unique: list[Edge] = []
    for edge in record.edges:
        if unique and unique[-1].sort_key() == edge.sort_key():
            continue
        unique.append(edge)
    record.edges[:] = unique
