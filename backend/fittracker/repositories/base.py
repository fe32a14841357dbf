"""Repository interface shared by the storage backends."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class Repository(ABC):
    """
    Storage for one kind of record, addressed by integer id.

    Keyword filters match fields by equality, so ``list(user_id=3)`` returns
    only the records owned by user 3. Records come back in insertion order.
    """

    @abstractmethod
    async def list(self, **filters: Any) -> List[Record]:
        """Return all records matching the filters."""

    @abstractmethod
    async def get(self, record_id: int, **filters: Any) -> Optional[Record]:
        """Return the record with this id, if it also matches the filters."""

    @abstractmethod
    async def create(self, data: Record) -> Record:
        """Store a new record, assign its id and return it."""

    @abstractmethod
    async def update(self, record_id: int, patch: Record, **filters: Any) -> Optional[Record]:
        """
        Shallow-merge ``patch`` into the matching record.

        Returns None, leaving storage untouched, when nothing matches.
        """

    @abstractmethod
    async def delete(self, record_id: int, **filters: Any) -> bool:
        """Remove the matching record. Returns False when nothing matched."""

    async def first(self, **filters: Any) -> Optional[Record]:
        """Return the first record matching the filters."""
        records = await self.list(**filters)
        return records[0] if records else None
