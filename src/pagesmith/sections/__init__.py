"""Section templates: reusable, schema-defined content blocks."""

from pagesmith.sections.models import (
    FieldDraft,
    FieldOption,
    FieldSchema,
    FieldType,
    MoveDirection,
    SectionTemplate,
)
from pagesmith.sections.preview import PreviewDescriptor, PreviewKind, render_preview
from pagesmith.sections.registry import SectionRegistry

__all__ = [
    "FieldDraft",
    "FieldOption",
    "FieldSchema",
    "FieldType",
    "MoveDirection",
    "PreviewDescriptor",
    "PreviewKind",
    "SectionRegistry",
    "SectionTemplate",
    "render_preview",
]
