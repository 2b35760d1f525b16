"""Helpers shared by every pagesmith domain."""

from pagesmith.shared.documents import (
    DocumentModel,
    FrozenDocumentModel,
    new_id,
    today,
    utcnow,
)

__all__ = [
    "DocumentModel",
    "FrozenDocumentModel",
    "new_id",
    "today",
    "utcnow",
]
