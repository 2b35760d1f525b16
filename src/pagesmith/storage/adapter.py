"""Persistence adapter contract: one JSON document per entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

from pagesmith.errors import ValidationFailed


class Category(StrEnum):
    """Document collections known to the adapters."""

    PAGES = "pages"
    SECTIONS = "sections"
    CONFIG = "config"
    THEMES = "themes"


class PersistenceAdapter(ABC):
    """Base class for document storage backends.

    Documents are plain JSON-ready dicts. Each save stands alone; there is
    no transaction spanning several documents or categories.
    """

    @abstractmethod
    def load(self, category: Category, key: str) -> dict[str, Any]:
        """Return the stored document.

        Raises NotFound if no document is stored under ``key``.
        """

    @abstractmethod
    def save(self, category: Category, key: str, document: dict[str, Any]) -> None:
        """Create or overwrite the document stored under ``key``."""

    @abstractmethod
    def delete(self, category: Category, key: str) -> None:
        """Remove a document. Deleting a missing document is a no-op."""

    @abstractmethod
    def list(self, category: Category) -> list[str]:
        """Return the keys stored in ``category``, sorted."""

    def exists(self, category: Category, key: str) -> bool:
        return key in self.list(category)


def check_key(key: str) -> str:
    """Reject keys that cannot be used as a single file name."""
    if not key or not key.strip():
        raise ValidationFailed("document key must not be empty")
    if "/" in key or "\\" in key or key.startswith("."):
        raise ValidationFailed(f"invalid document key: {key!r}")
    return key
