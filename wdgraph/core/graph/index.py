"""Sorted, unique-key node index."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from typing import Any

from wdgraph.core.models import NodeHandle, NodeRecord


def _record_value(record: NodeRecord) -> Any:
    return record.handle.value


class NodeIndex:
    """Node records kept in ascending order of their values.

    Lookups are O(log n) binary searches. Positions are plain list indices and
    shift when records are inserted or removed before them.
    """

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[NodeRecord] = []

    def _locate(self, value: Any) -> tuple[int, bool]:
        pos = bisect_left(self._records, value, key=_record_value)
        found = pos < len(self._records) and self._records[pos].handle.value == value
        return pos, found

    def position(self, value: Any) -> int | None:
        """Index of the record holding ``value``, or None. O(log n)."""
        pos, found = self._locate(value)
        return pos if found else None

    def get(self, value: Any) -> NodeRecord | None:
        pos, found = self._locate(value)
        return self._records[pos] if found else None

    def __contains__(self, value: Any) -> bool:
        return self._locate(value)[1]

    def insert(self, value: Any) -> NodeRecord | None:
        """Create a record for ``value``. Returns None if already present."""
        pos, found = self._locate(value)
        if found:
            return None
        record = NodeRecord(NodeHandle(value))
        self._records.insert(pos, record)
        return record

    def remove(self, value: Any) -> NodeRecord | None:
        """Detach and release the record for ``value``. Returns it, or None."""
        pos, found = self._locate(value)
        if not found:
            return None
        record = self._records.pop(pos)
        record.handle.release()
        return record

    def rekey(self, record: NodeRecord, value: Any) -> None:
        """Assign ``value`` to the record's handle and move it to its sorted slot."""
        self._records.remove(record)
        record.handle.value = value
        pos, _ = self._locate(value)
        self._records.insert(pos, record)

    def clear(self) -> None:
        for record in self._records:
            record.handle.release()
        self._records = []

    def detach(self) -> list[NodeRecord]:
        """Hand the records over to a new owner, leaving this index empty."""
        records, self._records = self._records, []
        return records

    def adopt(self, records: list[NodeRecord]) -> None:
        self._records = records

    def __getitem__(self, pos: int) -> NodeRecord:
        return self._records[pos]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[NodeRecord]:
        return iter(self._records)
