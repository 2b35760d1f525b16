"""Pages: ordered compositions of section templates plus page metadata."""

from pagesmith.pages.models import Page, PageSEO, PageStatus, slugify
from pagesmith.pages.store import PageStore

__all__ = [
    "Page",
    "PageSEO",
    "PageStatus",
    "PageStore",
    "slugify",
]
