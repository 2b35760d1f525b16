"""File-per-document adapter rooted at a site data directory.

Layout::

    <root>/pages/<slug>.json
    <root>/sections/<type>.json
    <root>/config/<domain>.json
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pagesmith.errors import NotFound, PersistenceError
from pagesmith.storage.adapter import Category, PersistenceAdapter, check_key

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".json"

# Alias to avoid shadowing by JsonFileAdapter.list method
_list = list


class JsonFileAdapter(PersistenceAdapter):
    """Stores each document as an indented UTF-8 JSON file."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, category: Category, key: str) -> Path:
        return self._root / Category(category).value / f"{check_key(key)}{DOCUMENT_SUFFIX}"

    def load(self, category: Category, key: str) -> dict[str, Any]:
        path = self.path_for(category, key)
        if not path.exists():
            raise NotFound(str(category), key)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Corrupt document at {path}: {exc}") from exc
        except OSError as exc:
            raise PersistenceError(f"Failed to read {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceError(f"Document at {path} is not a JSON object")
        return data

    def save(self, category: Category, key: str, document: dict[str, Any]) -> None:
        path = self.path_for(category, key)
        payload = json.dumps(document, indent=2, ensure_ascii=False)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-", suffix=DOCUMENT_SUFFIX)
        except OSError as exc:
            raise PersistenceError(f"Failed to write {path}: {exc}") from exc
        # Readers never see a partially written document.
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise PersistenceError(f"Failed to write {path}: {exc}") from exc
        logger.info("Saved %s", path)

    def delete(self, category: Category, key: str) -> None:
        path = self.path_for(category, key)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Nothing to delete at %s", path)
            return
        except OSError as exc:
            raise PersistenceError(f"Failed to delete {path}: {exc}") from exc
        logger.info("Deleted %s", path)

    def list(self, category: Category) -> _list[str]:
        directory = self._root / Category(category).value
        if not directory.is_dir():
            return []
        return sorted(
            p.stem
            for p in directory.glob(f"*{DOCUMENT_SUFFIX}")
            if not p.name.startswith(".")
        )
