"""Persistence boundary: adapters mapping entities to JSON documents."""

from pagesmith.storage.adapter import Category, PersistenceAdapter, check_key
from pagesmith.storage.json_files import JsonFileAdapter
from pagesmith.storage.memory import MemoryAdapter

__all__ = [
    "Category",
    "JsonFileAdapter",
    "MemoryAdapter",
    "PersistenceAdapter",
    "check_key",
]
