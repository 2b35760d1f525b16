"""Tests for the starter content."""

from pagesmith.seed import seed_site, starter_pages, starter_templates
from pagesmith.site import Site
from pagesmith.storage import Category


class TestStarterContent:
    def test_pages_only_reference_starter_templates(self):
        template_ids = {t.id for t in starter_templates()}
        for page in starter_pages():
            assert set(page.sections) <= template_ids

    def test_hero_banner_fields(self):
        hero = next(t for t in starter_templates() if t.id == "hero")
        assert hero.name == "Hero Banner"
        assert hero.field_names() == [
            "heading",
            "subheading",
            "buttonText",
            "buttonUrl",
            "backgroundImage",
        ]
        assert hero.fields[0].required is True


class TestSeedSite:
    def test_seeds_and_persists(self, adapter):
        site = Site.open(adapter=adapter)
        result = seed_site(site)

        assert len(result.sections) == 9
        assert result.pages == ["home", "about", "contact"]
        assert adapter.list(Category.PAGES) == ["about", "contact", "home"]
        assert site.dangling_references() == []
        assert site.stats().published == 2

    def test_is_idempotent(self, adapter):
        site = Site.open(adapter=adapter)
        seed_site(site)
        again = seed_site(site)

        assert again.sections == []
        assert again.pages == []
        assert len(site.sections) == 9
