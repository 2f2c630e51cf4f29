# This module holds the ordered in-memory record collection for one resource type.
# It exists so every read and write against process-local state goes through one small surface.
# Records are plain dictionaries keyed by field name and always carry an `id`.
# Lookups are linear scans and the first matching id wins when ids collide.

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

Record = dict[str, Any]


class CollectionStore:
    """Insertion-ordered record sequence with primitive access by id."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: list[Record] = [dict(record) for record in records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.all())

    def all(self) -> list[Record]:
        return [dict(record) for record in self._records]

    def find_by_id(self, record_id: int) -> Record | None:
        index = self._index_of(record_id)
        if index is None:
            return None
        return dict(self._records[index])

    def append(self, record: Record) -> None:
        if record.get("id") is None:
            raise ValueError("record must have an assigned id before it is appended")
        self._records.append(dict(record))

    def replace_at(self, record_id: int, record: Record) -> bool:
        index = self._index_of(record_id)
        if index is None:
            return False
        self._records[index] = dict(record)
        return True

    def remove_by_id(self, record_id: int) -> bool:
        index = self._index_of(record_id)
        if index is None:
            return False
        del self._records[index]
        return True

    def _index_of(self, record_id: int) -> int | None:
        for index, record in enumerate(self._records):
            if record["id"] == record_id:
                return index
        return None
