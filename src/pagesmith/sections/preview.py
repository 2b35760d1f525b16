"""UI-agnostic preview descriptors for field schemas.

``render_preview`` tells a presentation layer which control to draw for a
field and with which constraints. Unknown field types get a generic text
input rather than an error, so the editor keeps working when it meets a
field kind it does not know yet.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from pagesmith.sections.models import FieldOption, FieldSchema, FieldType

NO_OPTIONS = FieldOption(label="No options defined", value="placeholder")
DEFAULT_COLOR = "#000000"


class PreviewKind(StrEnum):
    """Control kinds a presentation layer is expected to support."""

    INPUT = "input"
    TEXTAREA = "textarea"
    RICHTEXT = "richtext"
    SELECT = "select"
    SWITCH = "switch"
    UPLOAD = "upload"
    REPEATER = "repeater"
    URL = "url"
    COLOR = "color"


class PreviewDescriptor(BaseModel):
    """Description of the control that previews one field."""

    kind: PreviewKind
    field_id: str
    name: str
    label: str
    required: bool = False
    placeholder: str | None = None
    hint: str | None = None
    action: str | None = None
    default_value: str | None = None
    options: list[FieldOption] = Field(default_factory=list)
    fallback: bool = False  # True when the field type was not recognised


def _known_type(field: FieldSchema) -> FieldType | None:
    try:
        return FieldType(field.type)
    except ValueError:
        return None


def render_preview(field: FieldSchema) -> PreviewDescriptor:
    """Map a field schema to the control that previews it."""
    base = {
        "field_id": field.id,
        "name": field.name,
        "label": field.label,
        "required": field.required,
        "default_value": field.default_value,
    }
    enter = field.placeholder or f"Enter {field.label}"

    match _known_type(field):
        case FieldType.TEXT:
            return PreviewDescriptor(kind=PreviewKind.INPUT, placeholder=enter, **base)
        case FieldType.TEXTAREA:
            return PreviewDescriptor(kind=PreviewKind.TEXTAREA, placeholder=enter, **base)
        case FieldType.RICHTEXT:
            return PreviewDescriptor(kind=PreviewKind.RICHTEXT, placeholder=enter, **base)
        case FieldType.SELECT:
            return PreviewDescriptor(
                kind=PreviewKind.SELECT,
                placeholder=field.placeholder or f"Select {field.label}",
                options=list(field.options) if field.options else [NO_OPTIONS],
                **base,
            )
        case FieldType.CHECKBOX:
            return PreviewDescriptor(kind=PreviewKind.SWITCH, **base)
        case FieldType.IMAGE:
            return PreviewDescriptor(
                kind=PreviewKind.UPLOAD, hint=f"Upload {field.label}", **base
            )
        case FieldType.REPEATER:
            return PreviewDescriptor(
                kind=PreviewKind.REPEATER,
                hint="Repeater field placeholder",
                action="Add Item",
                **{**base, "label": f"{field.label} Items"},
            )
        case FieldType.LINK:
            return PreviewDescriptor(
                kind=PreviewKind.URL, placeholder=field.placeholder or "https://", **base
            )
        case FieldType.COLOR:
            return PreviewDescriptor(
                kind=PreviewKind.COLOR,
                **{**base, "default_value": field.default_value or DEFAULT_COLOR},
            )
        case _:
            return PreviewDescriptor(
                kind=PreviewKind.INPUT,
                placeholder=f"{field.type} field",
                fallback=True,
                **base,
            )
