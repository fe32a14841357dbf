"""Base model and database setup."""
from typing import Any

from sqlalchemy import Integer, MetaData, pool
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from fittracker.config import Settings

# Naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all models."""

    metadata = MetaData(naming_convention=convention)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary."""
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}


def build_engine_params(database_url: str) -> tuple[str, dict]:
    """Normalize asyncpg URL options and return (url, connect_args)."""
    url = make_url(database_url)
    query = dict(url.query)
    connect_args: dict = {}

    sslmode = query.pop("sslmode", None)
    if sslmode and sslmode.lower() != "disable":
        connect_args["ssl"] = True

    # libpq-only options; asyncpg does not accept these as kwargs
    query.pop("channel_binding", None)

    return url.set(query=query).render_as_string(hide_password=False), connect_args


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database."""
    database_url, connect_args = build_engine_params(settings.database_url)

    # SQLite connections are cheap and must not outlive the event loop that opened them
    if make_url(database_url).get_backend_name() == "sqlite":
        return create_async_engine(
            database_url,
            echo=settings.database_echo,
            poolclass=pool.NullPool,
            connect_args=connect_args,
        )

    return create_async_engine(
        database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        connect_args=connect_args,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the given engine."""
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Initialize database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
