"""Tests for ConfigStore: get/set/reset per domain."""

import pytest
from pagesmith.errors import PersistenceError, ValidationFailed
from pagesmith.siteconfig import edits
from pagesmith.siteconfig.defaults import default_for
from pagesmith.siteconfig.models import ConfigDomain, HeaderConfig, SEOConfig
from pagesmith.siteconfig.store import ConfigStore
from pagesmith.storage import Category


class TestGet:
    @pytest.mark.parametrize("domain", list(ConfigDomain))
    def test_unset_domain_returns_default(self, domain):
        assert ConfigStore().get(domain) == default_for(domain)

    def test_initial_values(self):
        store = ConfigStore({"header": {"logo": "/brand.png", "favicon": "/f.ico", "isSticky": False}})
        assert store.get("header").logo == "/brand.png"
        assert store.get("seo") == default_for("seo")

    def test_unknown_domain_rejected(self):
        with pytest.raises(ValidationFailed):
            ConfigStore().get("sidebar")


class TestSet:
    def test_replaces_value(self):
        store = ConfigStore()
        header = HeaderConfig(logo="/new.svg", favicon="/new.ico", is_sticky=False)
        store.set("header", header)
        assert store.get("header") == header
        assert not store.is_default("header")

    def test_accepts_document_dict(self):
        store = ConfigStore()
        store.set("seo", {**default_for("seo").to_document(), "enableSitemap": False})
        assert store.get("seo").enable_sitemap is False

    def test_wrong_model_rejected(self):
        store = ConfigStore()
        with pytest.raises(ValidationFailed):
            store.set("seo", HeaderConfig())
        assert store.get("seo") == default_for("seo")

    def test_invalid_document_rejected(self):
        with pytest.raises(ValidationFailed) as excinfo:
            ConfigStore().set("header", {"isSticky": "definitely not"})
        assert any("isSticky" in p for p in excinfo.value.problems)

    def test_notifies_subscribers(self):
        store = ConfigStore()
        seen = []
        store.subscribe(lambda domain, value: seen.append((domain, value)))
        nav = edits.add_nav_item(store.get("navigation"))
        store.set("navigation", nav)
        assert seen == [(ConfigDomain.NAVIGATION, nav)]

    def test_unsubscribe(self):
        store = ConfigStore()
        seen = []

        def listener(domain, value):
            seen.append(domain)

        store.subscribe(listener)
        store.unsubscribe(listener)
        store.set("header", HeaderConfig())
        assert seen == []

    def test_nested_edit_never_aliases_default(self):
        store = ConfigStore()
        store.set("footer", edits.add_social_link(store.get("footer")))
        assert len(store.get("footer").social_links) == 4
        assert len(default_for("footer").social_links) == 3

    def test_persistence_failure_restores_previous(self, flaky_adapter):
        store = ConfigStore()
        store.persist_to(flaky_adapter)
        first = HeaderConfig(logo="/one.svg")
        store.set("header", first)
        flaky_adapter.fail_saves = True

        with pytest.raises(PersistenceError):
            store.set("header", HeaderConfig(logo="/two.svg"))
        assert store.get("header") == first

    def test_persistence_failure_on_first_set_falls_back_to_default(self, flaky_adapter):
        store = ConfigStore()
        store.persist_to(flaky_adapter)
        flaky_adapter.fail_saves = True

        with pytest.raises(PersistenceError):
            store.set("seo", SEOConfig(default_title="Shop"))
        assert store.is_default("seo")


class TestReset:
    def test_seo_reset_scenario(self):
        store = ConfigStore()
        store.set("seo", {**default_for("seo").to_document(), "enableSitemap": False})
        store.reset("seo")
        assert store.get("seo").enable_sitemap is True

    @pytest.mark.parametrize("domain", list(ConfigDomain))
    def test_reset_law(self, domain):
        store = ConfigStore()
        store.set("header", HeaderConfig(logo="/x"))
        store.set("footer", edits.add_footer_column(store.get("footer")))
        store.set("scripts", edits.toggle_script(store.get("scripts"), "head", "1"))
        store.reset(domain)
        assert store.get(domain) == default_for(domain)

    def test_reset_does_not_notify(self):
        store = ConfigStore()
        seen = []
        store.subscribe(lambda domain, value: seen.append(domain))
        store.reset("header")
        assert seen == []

    def test_save_pushes_current_value(self):
        store = ConfigStore()
        seen = []
        store.subscribe(lambda domain, value: seen.append((domain, value)))
        store.reset("navigation")
        store.save("navigation")
        assert seen == [(ConfigDomain.NAVIGATION, default_for("navigation"))]


class TestPersistence:
    def test_persist_to_writes_documents(self, adapter):
        store = ConfigStore()
        store.persist_to(adapter)
        store.set("seo", SEOConfig(default_title="Shop", enable_robots=False))

        document = adapter.load(Category.CONFIG, "seo")
        assert document["defaultTitle"] == "Shop"
        assert document["enableRobots"] is False

    def test_from_adapter_round_trip(self, adapter):
        store = ConfigStore.from_adapter(adapter)
        footer = edits.add_footer_link(store.get("footer"), "1", text="Careers", url="/careers")
        store.set("footer", footer)

        restored = ConfigStore.from_adapter(adapter)
        assert restored.get("footer") == footer
        assert restored.is_default("header")

    def test_from_adapter_skips_invalid_documents(self, adapter):
        adapter.save(Category.CONFIG, "header", {"isSticky": {"nested": "nonsense"}})
        store = ConfigStore.from_adapter(adapter)
        assert store.is_default("header")

    def test_snapshot(self):
        snapshot = ConfigStore().snapshot()
        assert set(snapshot) == set(ConfigDomain)
