"""Section template domain models.

A section template is a reusable content block definition: a named,
categorised, ordered list of typed input slots (field schemas).
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from pagesmith.shared.documents import DocumentModel, new_id, utcnow


class FieldType(StrEnum):
    """The field kinds the editor knows how to render."""

    TEXT = "text"
    TEXTAREA = "textarea"
    RICHTEXT = "richtext"
    IMAGE = "image"
    SELECT = "select"
    CHECKBOX = "checkbox"
    REPEATER = "repeater"
    LINK = "link"
    COLOR = "color"


class MoveDirection(StrEnum):
    UP = "up"
    DOWN = "down"


class FieldOption(DocumentModel):
    """One choice of a select field."""

    label: str
    value: str


class FieldSchema(DocumentModel):
    """One typed input slot of a section template.

    ``type`` stays a plain string when it is not one of the known kinds, so
    documents written by a newer editor still load.
    """

    id: str = Field(default_factory=new_id)
    name: str
    type: FieldType | str = FieldType.TEXT
    label: str
    placeholder: str | None = None
    required: bool = False
    default_value: str | None = None
    options: list[FieldOption] | None = None


class FieldDraft(DocumentModel):
    """Input of ``SectionRegistry.add_field``."""

    name: str = ""
    type: FieldType | str = FieldType.TEXT
    label: str = ""
    placeholder: str | None = None
    required: bool = False


class SectionTemplate(DocumentModel):
    """Named, typed bundle of field schemas."""

    id: str = Field(default_factory=lambda: f"section-{new_id()}")
    name: str
    description: str = ""
    type: str = "custom"  # free-form category: "hero", "features", ...
    fields: list[FieldSchema] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def field_by_id(self, field_id: str) -> FieldSchema | None:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]
