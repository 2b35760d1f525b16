"""SectionRegistry: owns the section templates of a site.

Edits are held in memory until ``save`` writes the template document,
which is stored under the template type (``sections/<type>.json``).
Every accessor hands out a deep copy, so nothing outside the registry can
mutate a template without going through one of its commands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from pagesmith.errors import NotFound, PersistenceError, ValidationFailed
from pagesmith.sections.models import (
    FieldDraft,
    FieldOption,
    FieldSchema,
    FieldType,
    MoveDirection,
    SectionTemplate,
)
from pagesmith.shared.documents import new_id, utcnow
from pagesmith.storage.adapter import Category, PersistenceAdapter, check_key

logger = logging.getLogger(__name__)

_list = list


class SectionRegistry:
    """In-memory mapping of template id to SectionTemplate."""

    def __init__(
        self,
        templates: Iterable[SectionTemplate] = (),
        adapter: PersistenceAdapter | None = None,
    ) -> None:
        self._adapter = adapter
        self._templates: dict[str, SectionTemplate] = {
            t.id: t.model_copy(deep=True) for t in templates
        }
        # template id -> type its document was last saved under
        self._persisted_keys: dict[str, str] = {t.id: t.type for t in self._templates.values()}

    @classmethod
    def from_adapter(cls, adapter: PersistenceAdapter) -> SectionRegistry:
        """Hydrate from every document in the ``sections`` category.

        Corrupt documents are logged and skipped.
        """
        templates: _list[SectionTemplate] = []
        keys: dict[str, str] = {}
        for key in adapter.list(Category.SECTIONS):
            try:
                template = SectionTemplate.from_document(adapter.load(Category.SECTIONS, key))
            except (PersistenceError, ValueError) as exc:
                logger.warning("Skipping unreadable section document %s: %s", key, exc)
                continue
            templates.append(template)
            keys[template.id] = key
        logger.info("Loaded %d section templates", len(templates))
        registry = cls(templates, adapter=adapter)
        registry._persisted_keys = keys
        return registry

    # ── Private helpers ──────────────────────────────────────────

    def _require(self, template_id: str) -> SectionTemplate:
        template = self._templates.get(template_id)
        if template is None:
            raise NotFound(Category.SECTIONS.value, template_id)
        return template

    def _replace(self, template: SectionTemplate, fields: _list[FieldSchema]) -> None:
        self._templates[template.id] = template.model_copy(
            update={"fields": fields, "updated_at": utcnow()}
        )

    def _type_problems(self, template: SectionTemplate) -> _list[str]:
        try:
            check_key(template.type)
        except ValidationFailed as exc:
            return [f"section type: {problem}" for problem in exc.problems]
        owner = next(
            (
                tid
                for tid, key in self._persisted_keys.items()
                if tid != template.id and key == template.type
            ),
            None,
        )
        if owner is not None:
            return [f"section type already used by template {owner}: {template.type}"]
        return []

    def _discard_document(self, key: str) -> None:
        """Remove a document no template is persisted under any more."""
        if self._adapter is None or key in self._persisted_keys.values():
            return
        try:
            self._adapter.delete(Category.SECTIONS, key)
        except PersistenceError as exc:
            logger.warning("Could not remove stale section document %s: %s", key, exc)

    # ── Read operations ──────────────────────────────────────────

    def get(self, template_id: str) -> SectionTemplate:
        """Return a copy of a template. Raises NotFound for unknown ids."""
        return self._require(template_id).model_copy(deep=True)

    def list(self) -> _list[SectionTemplate]:
        return [t.model_copy(deep=True) for t in self._templates.values()]

    def ids(self) -> _list[str]:
        return _list(self._templates)

    def search(self, query: str) -> Iterator[SectionTemplate]:
        """Yield templates whose name or description contains ``query``."""
        needle = query.lower()
        for template in _list(self._templates.values()):
            if needle in template.name.lower() or needle in template.description.lower():
                yield template.model_copy(deep=True)

    def is_saved(self, template_id: str) -> bool:
        return template_id in self._persisted_keys

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    # ── Template commands ────────────────────────────────────────

    def create(
        self,
        name: str = "New Section",
        type: str = "custom",
        description: str = "Section description",
    ) -> SectionTemplate:
        """Register a new template with no fields. Not persisted until saved."""
        if not name.strip():
            raise ValidationFailed("section name is required")
        now = utcnow()
        template = SectionTemplate(
            name=name,
            type=type,
            description=description,
            created_at=now,
            updated_at=now,
        )
        self._templates[template.id] = template
        return template.model_copy(deep=True)

    def add(self, template: SectionTemplate) -> SectionTemplate:
        """Register a ready-made template (imported or seeded) under its own id."""
        if template.id in self._templates:
            raise ValidationFailed(f"section id already in use: {template.id}")
        self._templates[template.id] = template.model_copy(deep=True)
        return template.model_copy(deep=True)

    def update(
        self,
        template_id: str,
        *,
        name: str | None = None,
        type: str | None = None,
        description: str | None = None,
    ) -> SectionTemplate:
        """Edit template metadata; only the given attributes change."""
        template = self._require(template_id)
        if name is not None and not name.strip():
            raise ValidationFailed("section name is required")
        changes: dict[str, object] = {"updated_at": utcnow()}
        if name is not None:
            changes["name"] = name
        if type is not None:
            changes["type"] = type
        if description is not None:
            changes["description"] = description
        self._templates[template_id] = template.model_copy(update=changes)
        return self.get(template_id)

    def save(self, template_id: str) -> SectionTemplate:
        """Validate and write the template document under its type.

        Raises ValidationFailed when the template has save-time problems,
        including a type another saved template is stored under, and
        PersistenceError when the write fails. A changed type moves the
        document.
        """
        template = self._require(template_id)
        problems = self.validate(template_id)
        if problems:
            raise ValidationFailed(problems)
        if self._adapter is not None:
            self._adapter.save(Category.SECTIONS, template.type, template.to_document())
            logger.info("Saved section template %s (%s) as %s", template.id, template.name, template.type)
        old_key = self._persisted_keys.get(template.id)
        self._persisted_keys[template.id] = template.type
        if old_key is not None and old_key != template.type:
            self._discard_document(old_key)
        return template.model_copy(deep=True)

    def delete(self, template_id: str) -> None:
        """Remove a template. Pages that reference it are left untouched.

        If the stored document cannot be removed the template is restored
        and the PersistenceError propagates.
        """
        template = self._require(template_id)
        del self._templates[template_id]
        key = self._persisted_keys.pop(template_id, None)
        if self._adapter is None or key is None:
            return
        try:
            self._adapter.delete(Category.SECTIONS, key)
        except PersistenceError:
            self._templates[template_id] = template
            self._persisted_keys[template_id] = key
            raise
        logger.info("Deleted section template %s", template_id)

    def validate(self, template_id: str) -> _list[str]:
        """Return save-time problems; an empty list means the template is saveable."""
        template = self._require(template_id)
        problems: _list[str] = []
        if not template.name.strip():
            problems.append("section name is required")
        problems.extend(self._type_problems(template))
        seen: set[str] = set()
        for field in template.fields:
            if field.name in seen:
                problems.append(f"duplicate field name: {field.name}")
            seen.add(field.name)
            if field.type == FieldType.SELECT and not field.options:
                problems.append(f"select field {field.name} has no options")
        return problems

    # ── Field commands ───────────────────────────────────────────

    def add_field(self, template_id: str, draft: FieldDraft) -> FieldSchema:
        """Append a field built from ``draft``.

        Raises ValidationFailed if the name or label is blank or the name is
        already used by another field of the template.
        """
        template = self._require(template_id)
        problems: _list[str] = []
        if not draft.name.strip():
            problems.append("field name is required")
        if not draft.label.strip():
            problems.append("field label is required")
        if draft.name and draft.name in template.field_names():
            problems.append(f"field name already in use: {draft.name}")
        if problems:
            raise ValidationFailed(problems)

        field = FieldSchema(
            id=f"field-{new_id()}",
            name=draft.name,
            type=draft.type or FieldType.TEXT,
            label=draft.label,
            placeholder=draft.placeholder,
            required=draft.required,
        )
        self._replace(template, [*template.fields, field])
        return field.model_copy(deep=True)

    def remove_field(self, template_id: str, field_id: str) -> None:
        """Remove a field; unknown field ids are ignored."""
        template = self._require(template_id)
        if template.field_by_id(field_id) is None:
            logger.debug("Field %s not on template %s, nothing to remove", field_id, template_id)
            return
        self._replace(template, [f for f in template.fields if f.id != field_id])

    def move_field(self, template_id: str, field_id: str, direction: MoveDirection) -> None:
        """Swap a field with its neighbour. No-op at either end of the list."""
        template = self._require(template_id)
        fields = _list(template.fields)
        index = next((i for i, f in enumerate(fields) if f.id == field_id), -1)
        if index == -1:
            return
        target = index - 1 if MoveDirection(direction) is MoveDirection.UP else index + 1
        if target < 0 or target >= len(fields):
            return
        fields[index], fields[target] = fields[target], fields[index]
        self._replace(template, fields)

    def move_field_to(self, template_id: str, field_id: str, index: int) -> None:
        """Move a field to ``index`` (clamped to the list bounds)."""
        template = self._require(template_id)
        field = template.field_by_id(field_id)
        if field is None:
            return
        fields = [f for f in template.fields if f.id != field_id]
        index = max(0, min(index, len(fields)))
        fields.insert(index, field)
        self._replace(template, fields)

    def set_field_options(
        self, template_id: str, field_id: str, options: Iterable[FieldOption]
    ) -> FieldSchema:
        """Replace the options of a field. Raises NotFound for unknown fields."""
        template = self._require(template_id)
        if template.field_by_id(field_id) is None:
            raise NotFound(f"{Category.SECTIONS.value}/{template_id}/fields", field_id)
        option_list = [FieldOption.model_validate(o) for o in options]
        fields = [
            f.model_copy(update={"options": option_list}) if f.id == field_id else f
            for f in template.fields
        ]
        self._replace(template, fields)
        return self._require(template_id).field_by_id(field_id).model_copy(deep=True)
