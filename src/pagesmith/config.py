"""Unified configuration loaded from .pagesmith.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".pagesmith.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG_PATH = Path.home() / ".config" / "pagesmith" / "config.toml"


class StorageBackend(StrEnum):
    JSON = "json"
    MEMORY = "memory"


class StorageConfig(BaseModel):
    """[storage] section."""

    backend: StorageBackend = StorageBackend.JSON
    data_dir: str = "./site-data"


class PagesConfig(BaseModel):
    """[pages] section."""

    enforce_unique_slugs: bool = True


class SectionsConfig(BaseModel):
    """[sections] section."""

    # Detach a deleted template from every page instead of leaving dangling ids.
    cascade_delete: bool = False


class PagesmithConfig(BaseModel):
    """Top-level configuration model."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    pages: PagesConfig = Field(default_factory=PagesConfig)
    sections: SectionsConfig = Field(default_factory=SectionsConfig)

    @property
    def data_path(self) -> Path:
        return Path(self.storage.data_dir).expanduser()


def load_config(path: str | Path | None = None) -> PagesmithConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .pagesmith.toml in CWD
    3. ~/.config/pagesmith/config.toml

    Then overlay environment variables.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG_PATH.exists():
            data = _load_toml(GLOBAL_CONFIG_PATH)
            logger.info("Loaded config from %s", GLOBAL_CONFIG_PATH)

    config = PagesmithConfig.model_validate(data) if data else PagesmithConfig()
    return _apply_env_vars(config)


def merge_cli_overrides(config: PagesmithConfig, **cli_kwargs: object) -> PagesmithConfig:
    """Overlay explicitly-set CLI flags (those not None) onto the config."""
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "data_dir": ("storage", "data_dir"),
        "backend": ("storage", "backend"),
        "enforce_unique_slugs": ("pages", "enforce_unique_slugs"),
        "cascade_delete": ("sections", "cascade_delete"),
    }

    for key, value in cli_kwargs.items():
        if value is None or key not in mapping:
            continue
        section, field = mapping[key]
        data[section][field] = value

    return PagesmithConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("true", "1", "yes")


def _apply_env_vars(config: PagesmithConfig) -> PagesmithConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    for env_var, (section, field) in {
        "PAGESMITH_DATA_DIR": ("storage", "data_dir"),
        "PAGESMITH_STORAGE_BACKEND": ("storage", "backend"),
    }.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    for env_var, (section, field) in {
        "PAGESMITH_ENFORCE_UNIQUE_SLUGS": ("pages", "enforce_unique_slugs"),
        "PAGESMITH_CASCADE_DELETE": ("sections", "cascade_delete"),
    }.items():
        raw = os.environ.get(env_var)
        if raw is not None:
            data[section][field] = _parse_bool(raw)

    return PagesmithConfig.model_validate(data)
