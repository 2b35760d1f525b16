"""Base model for every entity that is persisted as a JSON document.

Python attributes are snake_case; documents keep the camelCase field
names the admin UI has always written (``createdAt``, ``isSticky``, ...).
"""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Pydantic model that round-trips through a camelCase JSON document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict; unset optionals are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Self:
        return cls.model_validate(document)


class FrozenDocumentModel(DocumentModel):
    """Immutable variant used for values that are shared, never edited in place."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def new_id() -> str:
    """Return a short random identifier."""
    return uuid.uuid4().hex[:12]


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


def today() -> date:
    return datetime.now(tz=UTC).date()
