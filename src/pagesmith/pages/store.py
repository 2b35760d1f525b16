"""PageStore: owns the pages of a site and their section composition.

Edits (title, slug, sections, status) are held in memory; ``save`` is the
single upsert that writes a page document. Page documents are keyed by
slug, so a slug change moves the document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from pagesmith.errors import NotFound, PersistenceError, ValidationFailed
from pagesmith.pages.models import Page, PageSEO, PageStatus, slugify
from pagesmith.shared.documents import today
from pagesmith.storage.adapter import Category, PersistenceAdapter, check_key

logger = logging.getLogger(__name__)

_list = list


class PageStore:
    """In-memory mapping of page id to Page."""

    def __init__(
        self,
        pages: Iterable[Page] = (),
        adapter: PersistenceAdapter | None = None,
        enforce_unique_slugs: bool = True,
    ) -> None:
        self._adapter = adapter
        self._enforce_unique_slugs = enforce_unique_slugs
        self._pages: dict[str, Page] = {p.id: p.model_copy(deep=True) for p in pages}
        # page id -> slug it was last saved under; unsaved drafts have no entry
        self._persisted_keys: dict[str, str] = {p.id: p.slug for p in self._pages.values()}

    @classmethod
    def from_adapter(
        cls, adapter: PersistenceAdapter, enforce_unique_slugs: bool = True
    ) -> PageStore:
        """Hydrate from every document in the ``pages`` category."""
        pages: _list[Page] = []
        keys: dict[str, str] = {}
        for key in adapter.list(Category.PAGES):
            try:
                page = Page.from_document(adapter.load(Category.PAGES, key))
            except (PersistenceError, ValueError) as exc:
                logger.warning("Skipping unreadable page document %s: %s", key, exc)
                continue
            pages.append(page)
            keys[page.id] = key
        logger.info("Loaded %d pages", len(pages))
        store = cls(pages, adapter=adapter, enforce_unique_slugs=enforce_unique_slugs)
        store._persisted_keys = keys
        return store

    # ── Private helpers ──────────────────────────────────────────

    def _require(self, page_id: str) -> Page:
        page = self._pages.get(page_id)
        if page is None:
            raise NotFound(Category.PAGES.value, page_id)
        return page

    def _update(self, page_id: str, **changes: Any) -> Page:
        page = self._require(page_id)
        updated = page.model_copy(update=changes)
        self._pages[page_id] = updated
        return updated.model_copy(deep=True)

    def _swap(self, page_id: str, index: int, other: int) -> None:
        sections = _list(self._require(page_id).sections)
        if not (0 <= index < len(sections) and 0 <= other < len(sections)):
            return
        sections[index], sections[other] = sections[other], sections[index]
        self._update(page_id, sections=sections)

    def _check_saveable(self, page: Page) -> None:
        problems: _list[str] = []
        if not page.slug.strip():
            problems.append("page slug is required")
        else:
            try:
                check_key(page.slug)
            except ValidationFailed as exc:
                problems.extend(exc.problems)
        if self._enforce_unique_slugs:
            # A saved page holds both its current slug and the key its document lives under.
            clash = next(
                (
                    p
                    for p in self._pages.values()
                    if p.id != page.id
                    and p.id in self._persisted_keys
                    and page.slug in (p.slug, self._persisted_keys[p.id])
                ),
                None,
            )
            if clash is not None:
                problems.append(f"slug already used by page {clash.id}: {page.slug}")
        if problems:
            raise ValidationFailed(problems)

    def _document_key(self, page: Page) -> str:
        """Key for the page's document: its slug, or slug and id when another page holds the slug."""
        taken = {key for pid, key in self._persisted_keys.items() if pid != page.id}
        if page.slug not in taken:
            return page.slug
        return check_key(f"{page.slug}--{page.id}")

    def _discard_document(self, key: str) -> None:
        """Remove a document no page is persisted under any more."""
        if self._adapter is None or key in self._persisted_keys.values():
            return
        try:
            self._adapter.delete(Category.PAGES, key)
        except PersistenceError as exc:
            logger.warning("Could not remove stale page document %s: %s", key, exc)

    # ── Read operations ──────────────────────────────────────────

    def get(self, page_id: str) -> Page:
        """Return a copy of a page. Raises NotFound for unknown ids."""
        return self._require(page_id).model_copy(deep=True)

    def list(self, status: PageStatus | None = None) -> _list[Page]:
        pages = self._pages.values()
        if status is not None:
            pages = [p for p in pages if p.status == status]
        return [p.model_copy(deep=True) for p in pages]

    def find_by_text(self, query: str) -> Iterator[Page]:
        """Yield pages whose title or slug contains ``query``, ignoring case."""
        needle = query.lower()
        for page in _list(self._pages.values()):
            if needle in page.title.lower() or needle in page.slug.lower():
                yield page.model_copy(deep=True)

    def referencing(self, template_id: str) -> _list[str]:
        """Return ids of pages whose composition includes ``template_id``."""
        return [p.id for p in self._pages.values() if template_id in p.sections]

    def is_saved(self, page_id: str) -> bool:
        """True once the page has been saved (or was loaded from storage)."""
        return page_id in self._persisted_keys

    def __contains__(self, page_id: object) -> bool:
        return page_id in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    # ── Page metadata ────────────────────────────────────────────

    def create(self, title: str = "New Page") -> Page:
        """Start a draft page. Held in memory until saved."""
        page = Page(title=title, slug=slugify(title))
        self._pages[page.id] = page
        return page.model_copy(deep=True)

    def set_title(self, page_id: str, title: str) -> Page:
        """Change the title and re-derive the slug from it."""
        return self._update(page_id, title=title, slug=slugify(title))

    def set_slug(self, page_id: str, raw: str) -> Page:
        return self._update(page_id, slug=slugify(raw))

    def set_seo(self, page_id: str, seo: PageSEO | dict[str, str]) -> Page:
        return self._update(page_id, seo=PageSEO.model_validate(seo))

    def set_status(self, page_id: str, status: PageStatus | str) -> Page:
        try:
            status = PageStatus(status)
        except ValueError:
            raise ValidationFailed(f"unknown page status: {status}") from None
        return self._update(page_id, status=status, last_modified=today())

    def toggle_status(self, page_id: str) -> Page:
        page = self._require(page_id)
        flipped = PageStatus.DRAFT if page.is_published else PageStatus.PUBLISHED
        return self.set_status(page_id, flipped)

    # ── Section composition ──────────────────────────────────────

    def attach_section(self, page_id: str, template_id: str) -> Page:
        """Append a template reference unless the page already has it."""
        page = self._require(page_id)
        if template_id in page.sections:
            logger.debug("Page %s already references %s", page_id, template_id)
            return page.model_copy(deep=True)
        return self._update(page_id, sections=[*page.sections, template_id])

    def detach_section(self, page_id: str, template_id: str) -> Page:
        """Remove the first reference to ``template_id``; no-op when absent."""
        page = self._require(page_id)
        if template_id not in page.sections:
            return page.model_copy(deep=True)
        sections = _list(page.sections)
        sections.remove(template_id)
        return self._update(page_id, sections=sections)

    def move_section_up(self, page_id: str, index: int) -> None:
        if index > 0:
            self._swap(page_id, index, index - 1)

    def move_section_down(self, page_id: str, index: int) -> None:
        self._swap(page_id, index, index + 1)

    def reorder_section(self, page_id: str, from_index: int, to_index: int) -> None:
        """Move a reference from one position to another by adjacent swaps.

        Out-of-range indices leave the page unchanged.
        """
        count = len(self._require(page_id).sections)
        if not (0 <= from_index < count and 0 <= to_index < count):
            return
        step = 1 if to_index > from_index else -1
        for index in range(from_index, to_index, step):
            self._swap(page_id, index, index + step)

    # ── Persistence ──────────────────────────────────────────────

    def save(self, page: Page) -> Page:
        """Insert or replace ``page`` and write its document.

        ``last_modified`` is stamped with today's date. Raises
        ValidationFailed (store unchanged) for an empty, malformed or, when
        enforced, duplicate slug. If the write fails the previous in-memory
        page is restored and PersistenceError propagates.

        The document is stored under the slug. When slugs are not enforced
        and another saved page already holds the slug, the page id is
        appended to the key so neither document is overwritten.
        """
        self._check_saveable(page)
        key = self._document_key(page)
        stamped = page.model_copy(deep=True, update={"last_modified": today()})
        previous = self._pages.get(stamped.id)
        self._pages[stamped.id] = stamped

        if self._adapter is not None:
            try:
                self._adapter.save(Category.PAGES, key, stamped.to_document())
            except PersistenceError:
                if previous is None:
                    del self._pages[stamped.id]
                else:
                    self._pages[stamped.id] = previous
                raise
            logger.info("Saved page %s at /%s", stamped.id, stamped.slug)

        old_key = self._persisted_keys.get(stamped.id)
        self._persisted_keys[stamped.id] = key
        if old_key is not None and old_key != key:
            self._discard_document(old_key)
        return stamped.model_copy(deep=True)

    def delete(self, page_id: str) -> None:
        """Remove a page and its document. Section templates are untouched."""
        page = self._require(page_id)
        del self._pages[page_id]
        key = self._persisted_keys.pop(page_id, None)
        if self._adapter is None or key is None:
            return
        try:
            self._adapter.delete(Category.PAGES, key)
        except PersistenceError:
            self._pages[page_id] = page
            self._persisted_keys[page_id] = key
            raise
        logger.info("Deleted page %s", page_id)
