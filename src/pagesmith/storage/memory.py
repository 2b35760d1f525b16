"""In-process adapter, used for tests and for throwaway editing sessions."""

from __future__ import annotations

import json
from typing import Any

from pagesmith.errors import NotFound
from pagesmith.storage.adapter import Category, PersistenceAdapter, check_key

_list = list


class MemoryAdapter(PersistenceAdapter):
    """Keeps serialized JSON text per document.

    Storing text rather than the dict itself means a loaded document never
    aliases the one that was saved.
    """

    def __init__(self) -> None:
        self._documents: dict[Category, dict[str, str]] = {c: {} for c in Category}

    def load(self, category: Category, key: str) -> dict[str, Any]:
        bucket = self._documents[Category(category)]
        if check_key(key) not in bucket:
            raise NotFound(str(category), key)
        return json.loads(bucket[key])

    def save(self, category: Category, key: str, document: dict[str, Any]) -> None:
        self._documents[Category(category)][check_key(key)] = json.dumps(document)

    def delete(self, category: Category, key: str) -> None:
        self._documents[Category(category)].pop(check_key(key), None)

    def list(self, category: Category) -> _list[str]:
        return sorted(self._documents[Category(category)])
