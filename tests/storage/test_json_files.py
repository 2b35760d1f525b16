"""Tests for JsonFileAdapter: one JSON document per file."""

import json
import os
from pathlib import Path

import pytest
from pagesmith.errors import NotFound, PersistenceError, ValidationFailed
from pagesmith.storage import Category, JsonFileAdapter


class TestSaveAndLoad:
    def test_writes_document_under_category(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        adapter.save(Category.CONFIG, "header", {"logo": "/logo.svg"})

        path = tmp_path / "config" / "header.json"
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"logo": "/logo.svg"}

    def test_load_returns_saved_document(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        document = {"id": "p1", "title": "Home", "sections": ["hero", "features"]}
        adapter.save(Category.PAGES, "home", document)

        assert adapter.load(Category.PAGES, "home") == document

    def test_overwrites_existing(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        adapter.save(Category.PAGES, "home", {"title": "v1"})
        adapter.save(Category.PAGES, "home", {"title": "v2"})

        assert adapter.load(Category.PAGES, "home") == {"title": "v2"}
        assert adapter.list(Category.PAGES) == ["home"]

    def test_preserves_non_ascii(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        adapter.save(Category.CONFIG, "footer", {"copyright": "© 2026 Café"})

        raw = (tmp_path / "config" / "footer.json").read_text(encoding="utf-8")
        assert "© 2026 Café" in raw

    def test_no_temp_files_left_behind(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        adapter.save(Category.SECTIONS, "hero", {"id": "hero"})

        assert [p.name for p in (tmp_path / "sections").iterdir()] == ["hero.json"]

    def test_failed_replace_removes_temp_file(self, tmp_path: Path, monkeypatch):
        adapter = JsonFileAdapter(tmp_path)
        adapter.save(Category.SECTIONS, "hero", {"id": "hero", "name": "v1"})

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)
        with pytest.raises(PersistenceError):
            adapter.save(Category.SECTIONS, "hero", {"id": "hero", "name": "v2"})

        assert [p.name for p in (tmp_path / "sections").iterdir()] == ["hero.json"]
        assert adapter.load(Category.SECTIONS, "hero")["name"] == "v1"


class TestMissingAndCorrupt:
    def test_load_missing_raises_not_found(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        with pytest.raises(NotFound) as excinfo:
            adapter.load(Category.PAGES, "nope")
        assert excinfo.value.category == "pages"
        assert excinfo.value.key == "nope"

    def test_not_found_is_a_key_error(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        with pytest.raises(KeyError):
            adapter.load(Category.CONFIG, "seo")

    def test_corrupt_document_raises_persistence_error(self, tmp_path: Path):
        (tmp_path / "pages").mkdir()
        (tmp_path / "pages" / "broken.json").write_text("{not json", encoding="utf-8")
        adapter = JsonFileAdapter(tmp_path)

        with pytest.raises(PersistenceError):
            adapter.load(Category.PAGES, "broken")

    def test_non_object_document_raises_persistence_error(self, tmp_path: Path):
        (tmp_path / "pages").mkdir()
        (tmp_path / "pages" / "list.json").write_text("[1, 2]", encoding="utf-8")
        adapter = JsonFileAdapter(tmp_path)

        with pytest.raises(PersistenceError):
            adapter.load(Category.PAGES, "list")

    def test_write_failure_raises_persistence_error(self, tmp_path: Path):
        blocker = tmp_path / "pages"
        blocker.write_text("a file where the directory should be", encoding="utf-8")
        adapter = JsonFileAdapter(tmp_path)

        with pytest.raises(PersistenceError):
            adapter.save(Category.PAGES, "home", {"title": "Home"})


class TestDeleteAndList:
    def test_delete_removes_file(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        adapter.save(Category.PAGES, "home", {"title": "Home"})
        adapter.delete(Category.PAGES, "home")

        assert adapter.list(Category.PAGES) == []
        assert not adapter.exists(Category.PAGES, "home")

    def test_delete_missing_is_noop(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        adapter.delete(Category.PAGES, "never-saved")

    def test_list_empty_category(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        assert adapter.list(Category.THEMES) == []

    def test_list_is_sorted_and_ignores_hidden_files(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        for key in ("contact", "about", "home"):
            adapter.save(Category.PAGES, key, {"slug": key})
        (tmp_path / "pages" / ".tmp-leftover.json").write_text("{}", encoding="utf-8")

        assert adapter.list(Category.PAGES) == ["about", "contact", "home"]


class TestKeys:
    @pytest.mark.parametrize("key", ["", "   ", "../escape", "a/b", ".hidden"])
    def test_rejects_unsafe_keys(self, tmp_path: Path, key: str):
        adapter = JsonFileAdapter(tmp_path)
        with pytest.raises(ValidationFailed):
            adapter.save(Category.PAGES, key, {})

    def test_path_for(self, tmp_path: Path):
        adapter = JsonFileAdapter(tmp_path)
        assert adapter.path_for(Category.SECTIONS, "hero") == tmp_path / "sections" / "hero.json"
