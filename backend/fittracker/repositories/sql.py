"""SQLAlchemy-backed repository."""
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fittracker.models.base import Base
from fittracker.repositories.base import Record, Repository


class SQLRepository(Repository):
    """
    Maps one ORM model onto the repository interface.

    Each call runs in its own session and commits before returning. Keys
    that are not columns of the model are dropped on write.
    """

    def __init__(self, model: type[Base], session_factory: async_sessionmaker):
        self.model = model
        self._session_factory = session_factory
        self._columns = set(model.__table__.columns.keys())

    def _values(self, data: Record) -> Record:
        return {k: v for k, v in data.items() if k in self._columns and k != "id"}

    async def _load(self, session: AsyncSession, record_id: int, filters: dict[str, Any]):
        result = await session.execute(
            select(self.model).filter_by(id=record_id, **filters)
        )
        return result.scalar_one_or_none()

    async def list(self, **filters: Any) -> List[Record]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(self.model).filter_by(**filters).order_by(self.model.id)
            )
            return [row.to_dict() for row in result.scalars().all()]

    async def get(self, record_id: int, **filters: Any) -> Optional[Record]:
        async with self._session_factory() as session:
            row = await self._load(session, record_id, filters)
            return row.to_dict() if row else None

    async def create(self, data: Record) -> Record:
        async with self._session_factory() as session:
            row = self.model(**self._values(data))
            session.add(row)
            await session.commit()
            return row.to_dict()

    async def update(self, record_id: int, patch: Record, **filters: Any) -> Optional[Record]:
        async with self._session_factory() as session:
            row = await self._load(session, record_id, filters)
            if not row:
                return None

            for field, value in self._values(patch).items():
                setattr(row, field, value)

            await session.commit()
            return row.to_dict()

    async def delete(self, record_id: int, **filters: Any) -> bool:
        async with self._session_factory() as session:
            row = await self._load(session, record_id, filters)
            if not row:
                return False

            await session.delete(row)
            await session.commit()
            return True
