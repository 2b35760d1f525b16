"""Page composition models."""

from __future__ import annotations

import re
from datetime import date
from enum import StrEnum

from pydantic import Field

from pagesmith.shared.documents import DocumentModel, new_id, today

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(value: str) -> str:
    """Derive a URL slug: whitespace runs become ``-``, then lowercase.

    >>> slugify("New Page")
    'new-page'
    """
    return _WHITESPACE_RE.sub("-", value).lower()


class PageStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"


class PageSEO(DocumentModel):
    """Per-page search metadata; empty values fall back to the site SEO config."""

    title: str = ""
    description: str = ""
    keywords: str = ""


class Page(DocumentModel):
    """A page: metadata plus an ordered list of section template ids."""

    id: str = Field(default_factory=lambda: f"page-{new_id()}")
    title: str
    slug: str
    status: PageStatus = PageStatus.DRAFT
    last_modified: date = Field(default_factory=today)
    sections: list[str] = Field(default_factory=list)
    seo: PageSEO = Field(default_factory=PageSEO)

    @property
    def is_published(self) -> bool:
        return self.status == PageStatus.PUBLISHED
