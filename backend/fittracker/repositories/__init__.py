"""Storage backends."""
from fittracker.repositories.base import Record, Repository
from fittracker.repositories.memory import InMemoryRepository
from fittracker.repositories.sql import SQLRepository
from fittracker.repositories.store import DataStore, build_store, get_store

__all__ = [
    "Record",
    "Repository",
    "InMemoryRepository",
    "SQLRepository",
    "DataStore",
    "build_store",
    "get_store",
]
