"""Site facade: wires the three stores to one persistence adapter.

``Site.open`` is the startup path: it builds the adapter named by the
configuration and hydrates the section registry, the page store and the
config store from it. Cross-store rules (dangling references, cascade on
template delete) live here because no single store owns both sides.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pagesmith.config import PagesmithConfig, StorageBackend
from pagesmith.errors import DanglingReference
from pagesmith.pages.models import PageStatus
from pagesmith.pages.store import PageStore
from pagesmith.sections.models import SectionTemplate
from pagesmith.sections.preview import PreviewDescriptor, render_preview
from pagesmith.sections.registry import SectionRegistry
from pagesmith.siteconfig.models import ConfigDomain
from pagesmith.siteconfig.store import ConfigStore
from pagesmith.storage.adapter import PersistenceAdapter
from pagesmith.storage.json_files import JsonFileAdapter
from pagesmith.storage.memory import MemoryAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteStats:
    """Counters shown on the admin overview."""

    pages: int
    published: int
    drafts: int
    sections: int
    configs: int
    configs_customized: int


def build_adapter(config: PagesmithConfig) -> PersistenceAdapter:
    if config.storage.backend == StorageBackend.MEMORY:
        return MemoryAdapter()
    return JsonFileAdapter(config.data_path)


class Site:
    """One editing session over a site's pages, sections and configuration."""

    def __init__(
        self,
        sections: SectionRegistry,
        pages: PageStore,
        config: ConfigStore,
        *,
        cascade_delete: bool = False,
    ) -> None:
        self.sections = sections
        self.pages = pages
        self.config = config
        self.cascade_delete = cascade_delete

    @classmethod
    def open(
        cls,
        config: PagesmithConfig | None = None,
        adapter: PersistenceAdapter | None = None,
    ) -> Site:
        """Hydrate every store from ``adapter`` (or the configured one)."""
        config = config or PagesmithConfig()
        adapter = adapter or build_adapter(config)
        site = cls(
            SectionRegistry.from_adapter(adapter),
            PageStore.from_adapter(adapter, enforce_unique_slugs=config.pages.enforce_unique_slugs),
            ConfigStore.from_adapter(adapter),
            cascade_delete=config.sections.cascade_delete,
        )
        for warning in site.dangling_references():
            logger.warning("Dangling reference: %s", warning)
        return site

    def dangling_references(self, page_id: str | None = None) -> list[DanglingReference]:
        """Template ids referenced by pages but missing from the registry."""
        pages = [self.pages.get(page_id)] if page_id is not None else self.pages.list()
        return [
            DanglingReference(page_id=page.id, template_id=template_id)
            for page in pages
            for template_id in page.sections
            if template_id not in self.sections
        ]

    def preview_page(
        self, page_id: str
    ) -> list[tuple[SectionTemplate, list[PreviewDescriptor]]]:
        """Preview descriptors for each section of a page, in page order.

        Dangling references are skipped with a warning rather than failing
        the preview.
        """
        preview: list[tuple[SectionTemplate, list[PreviewDescriptor]]] = []
        for template_id in self.pages.get(page_id).sections:
            if template_id not in self.sections:
                logger.warning("%s", DanglingReference(page_id=page_id, template_id=template_id))
                continue
            template = self.sections.get(template_id)
            preview.append((template, [render_preview(f) for f in template.fields]))
        return preview

    def delete_section(self, template_id: str) -> list[str]:
        """Delete a template, detaching it from pages when cascading.

        Returns the ids of the pages that were detached (always empty when
        cascade is off). Detached pages that had been saved are saved again;
        unsaved drafts are only changed in memory.
        """
        self.sections.delete(template_id)
        if not self.cascade_delete:
            return []
        detached = self.pages.referencing(template_id)
        for page_id in detached:
            page = self.pages.detach_section(page_id, template_id)
            if self.pages.is_saved(page_id):
                self.pages.save(page)
        if detached:
            logger.info("Detached section %s from %d pages", template_id, len(detached))
        return detached

    def stats(self) -> SiteStats:
        pages = self.pages.list()
        published = sum(1 for p in pages if p.status == PageStatus.PUBLISHED)
        return SiteStats(
            pages=len(pages),
            published=published,
            drafts=len(pages) - published,
            sections=len(self.sections),
            configs=len(ConfigDomain),
            configs_customized=sum(1 for d in ConfigDomain if not self.config.is_default(d)),
        )
