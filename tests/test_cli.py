"""Smoke tests for the CLI."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pagesmith import __version__
from pagesmith.cli import app
from pagesmith.pages.models import Page
from pagesmith.storage import Category, JsonFileAdapter


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch) -> Path:
    """An empty site data directory with no ambient configuration."""
    for key in ("PAGESMITH_DATA_DIR", "PAGESMITH_STORAGE_BACKEND"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    with patch("pagesmith.config.GLOBAL_CONFIG_PATH", tmp_path / "no-global.toml"):
        yield tmp_path / "site"


def _run(runner: CliRunner, data_dir: Path, *args: str):
    return runner.invoke(app, ["--data-dir", str(data_dir), *args])


class TestCLI:
    """Tests for the CLI entry point."""

    def test_main_help(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "pages" in result.output
        assert "config" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_stats_on_empty_site(self, runner: CliRunner, data_dir: Path) -> None:
        result = _run(runner, data_dir, "stats")
        assert result.exit_code == 0
        assert "Site overview" in result.output


class TestSeedAndList:
    def test_seed_writes_documents(self, runner: CliRunner, data_dir: Path) -> None:
        result = _run(runner, data_dir, "seed")
        assert result.exit_code == 0
        assert "9 sections and 3 pages" in result.output
        assert (data_dir / "pages" / "home.json").exists()
        assert (data_dir / "sections" / "hero.json").exists()

    def test_seed_twice_adds_nothing(self, runner: CliRunner, data_dir: Path) -> None:
        _run(runner, data_dir, "seed")
        result = _run(runner, data_dir, "seed")
        assert "0 sections and 0 pages" in result.output

    def test_pages_list(self, runner: CliRunner, data_dir: Path) -> None:
        _run(runner, data_dir, "seed")
        result = _run(runner, data_dir, "pages", "list", "--status", "draft")
        assert result.exit_code == 0
        assert "/contact" in result.output
        assert "/home" not in result.output

    def test_sections_list_query(self, runner: CliRunner, data_dir: Path) -> None:
        _run(runner, data_dir, "seed")
        result = _run(runner, data_dir, "sections", "list", "--query", "testimonials")
        assert result.exit_code == 0
        assert "testimonials" in result.output
        assert "hero" not in result.output

    def test_sections_preview(self, runner: CliRunner, data_dir: Path) -> None:
        _run(runner, data_dir, "seed")
        result = _run(runner, data_dir, "sections", "preview", "hero")
        assert result.exit_code == 0
        assert "heading*" in result.output
        assert "upload" in result.output

    def test_sections_preview_unknown(self, runner: CliRunner, data_dir: Path) -> None:
        result = _run(runner, data_dir, "sections", "preview", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCheck:
    def test_clean_site(self, runner: CliRunner, data_dir: Path) -> None:
        _run(runner, data_dir, "seed")
        result = _run(runner, data_dir, "check")
        assert result.exit_code == 0

    def test_dangling_reference_fails(self, runner: CliRunner, data_dir: Path) -> None:
        JsonFileAdapter(data_dir).save(
            Category.PAGES,
            "landing",
            Page(id="p1", title="Landing", slug="landing", sections=["gone"]).to_document(),
        )
        result = _run(runner, data_dir, "check")
        assert result.exit_code == 1
        assert "gone" in result.output


class TestConfigCommands:
    def test_show_default(self, runner: CliRunner, data_dir: Path) -> None:
        result = _run(runner, data_dir, "config", "show", "seo")
        assert result.exit_code == 0
        assert json.loads(result.output)["defaultTitle"] == "Your Website"

    def test_show_unknown_domain(self, runner: CliRunner, data_dir: Path) -> None:
        result = _run(runner, data_dir, "config", "show", "sidebar")
        assert result.exit_code == 1
        assert "unknown domain" in result.output

    def test_reset_overwrites_saved_value(self, runner: CliRunner, data_dir: Path) -> None:
        adapter = JsonFileAdapter(data_dir)
        adapter.save(Category.CONFIG, "header", {"logo": "/custom.svg"})

        result = _run(runner, data_dir, "config", "reset", "header")

        assert result.exit_code == 0
        assert adapter.load(Category.CONFIG, "header")["logo"] == "/logo.svg"
