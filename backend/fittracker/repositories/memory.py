"""In-process repository backed by a list."""
import copy
import itertools
from typing import Any, List, Optional

from fittracker.repositories.base import Record, Repository


class InMemoryRepository(Repository):
    """
    Keeps records in a list in insertion order.

    Ids come from a monotonic counter so a deleted id is never handed out
    again. Every record crossing the boundary is deep-copied; callers never
    hold references into the stored state.
    """

    def __init__(self):
        self._records: List[Record] = []
        self._ids = itertools.count(1)

    @staticmethod
    def _matches(record: Record, filters: dict[str, Any]) -> bool:
        return all(record.get(field) == value for field, value in filters.items())

    def _index_of(self, record_id: int, filters: dict[str, Any]) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record["id"] == record_id and self._matches(record, filters):
                return index
        return None

    async def list(self, **filters: Any) -> List[Record]:
        return [
            copy.deepcopy(record)
            for record in self._records
            if self._matches(record, filters)
        ]

    async def get(self, record_id: int, **filters: Any) -> Optional[Record]:
        index = self._index_of(record_id, filters)
        if index is None:
            return None
        return copy.deepcopy(self._records[index])

    async def create(self, data: Record) -> Record:
        values = {k: v for k, v in copy.deepcopy(data).items() if k != "id"}
        record = {"id": next(self._ids), **values}
        self._records.append(record)
        return copy.deepcopy(record)

    async def update(self, record_id: int, patch: Record, **filters: Any) -> Optional[Record]:
        index = self._index_of(record_id, filters)
        if index is None:
            return None

        current = self._records[index]
        changes = {k: v for k, v in copy.deepcopy(patch).items() if k != "id"}
        self._records[index] = {**current, **changes}
        return copy.deepcopy(self._records[index])

    async def delete(self, record_id: int, **filters: Any) -> bool:
        index = self._index_of(record_id, filters)
        if index is None:
            return False
        del self._records[index]
        return True

    def __len__(self) -> int:
        return len(self._records)
