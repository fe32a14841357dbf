"""Per-application bundle of repositories."""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from fittracker.config import Settings
from fittracker.models import NutritionEntry, ProgressSample, User, Workout
from fittracker.models.base import create_engine, create_session_factory, init_db
from fittracker.repositories.base import Repository
from fittracker.repositories.memory import InMemoryRepository
from fittracker.repositories.sql import SQLRepository

logger = logging.getLogger(__name__)


@dataclass
class DataStore:
    """The repositories a running application reads and writes."""

    users: Repository
    workouts: Repository
    nutrition: Repository
    progress: Repository
    engine: Optional[AsyncEngine] = None

    async def open(self) -> None:
        """Prepare the backing storage."""
        if self.engine is not None:
            await init_db(self.engine)
            logger.info("Database tables ready")

    async def close(self) -> None:
        """Release connections held by the backing storage."""
        if self.engine is not None:
            await self.engine.dispose()


def build_store(settings: Settings) -> DataStore:
    """Create the data store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "database":
        engine = create_engine(settings)
        session_factory = create_session_factory(engine)
        return DataStore(
            users=SQLRepository(User, session_factory),
            workouts=SQLRepository(Workout, session_factory),
            nutrition=SQLRepository(NutritionEntry, session_factory),
            progress=SQLRepository(ProgressSample, session_factory),
            engine=engine,
        )

    return DataStore(
        users=InMemoryRepository(),
        workouts=InMemoryRepository(),
        nutrition=InMemoryRepository(),
        progress=InMemoryRepository(),
    )


def get_store(request: Request) -> DataStore:
    """Dependency to get the application's data store."""
    return request.app.state.store
