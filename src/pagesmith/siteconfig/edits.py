"""Copy-on-write edits of the nested collections inside domain values.

Each function takes a domain value and returns a new one; the input is
never modified. Store the result with ``ConfigStore.set``.
"""

from __future__ import annotations

from pagesmith.errors import NotFound
from pagesmith.siteconfig.models import (
    FooterColumn,
    FooterConfig,
    FooterLink,
    NavigationConfig,
    NavItem,
    Script,
    ScriptConfig,
    ScriptLocation,
    SocialLink,
)

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def add_nav_item(
    nav: NavigationConfig, text: str = "New Item", url: str = "/"
) -> NavigationConfig:
    return nav.model_copy(update={"items": (*nav.items, NavItem(text=text, url=url))})


def remove_nav_item(nav: NavigationConfig, item_id: str) -> NavigationConfig:
    """Drop a top-level item; unknown ids leave the items unchanged."""
    return nav.model_copy(update={"items": tuple(i for i in nav.items if i.id != item_id)})


# ---------------------------------------------------------------------------
# Footer
# ---------------------------------------------------------------------------


def add_social_link(
    footer: FooterConfig,
    platform: str = "New Platform",
    url: str = "https://",
    icon: str = "link",
) -> FooterConfig:
    link = SocialLink(platform=platform, url=url, icon=icon)
    return footer.model_copy(update={"social_links": (*footer.social_links, link)})


def remove_social_link(footer: FooterConfig, link_id: str) -> FooterConfig:
    return footer.model_copy(
        update={"social_links": tuple(s for s in footer.social_links if s.id != link_id)}
    )


def add_footer_column(footer: FooterConfig, title: str = "New Column") -> FooterConfig:
    return footer.model_copy(update={"columns": (*footer.columns, FooterColumn(title=title))})


def remove_footer_column(footer: FooterConfig, column_id: str) -> FooterConfig:
    return footer.model_copy(
        update={"columns": tuple(c for c in footer.columns if c.id != column_id)}
    )


def _replace_column(footer: FooterConfig, column_id: str, column: FooterColumn) -> FooterConfig:
    return footer.model_copy(
        update={"columns": tuple(column if c.id == column_id else c for c in footer.columns)}
    )


def _require_column(footer: FooterConfig, column_id: str) -> FooterColumn:
    for column in footer.columns:
        if column.id == column_id:
            return column
    raise NotFound("config/footer/columns", column_id)


def add_footer_link(
    footer: FooterConfig, column_id: str, text: str = "New Link", url: str = "/"
) -> FooterConfig:
    """Append a link to a column. Raises NotFound for an unknown column."""
    column = _require_column(footer, column_id)
    updated = column.model_copy(update={"links": (*column.links, FooterLink(text=text, url=url))})
    return _replace_column(footer, column_id, updated)


def remove_footer_link(footer: FooterConfig, column_id: str, link_id: str) -> FooterConfig:
    column = _require_column(footer, column_id)
    updated = column.model_copy(
        update={"links": tuple(link for link in column.links if link.id != link_id)}
    )
    return _replace_column(footer, column_id, updated)


# ---------------------------------------------------------------------------
# Scripts
# ---------------------------------------------------------------------------

_SCRIPT_ATTRS = {
    ScriptLocation.HEAD: "head_scripts",
    ScriptLocation.BODY: "body_scripts",
}


def _scripts_at(config: ScriptConfig, location: ScriptLocation) -> tuple[Script, ...]:
    return getattr(config, _SCRIPT_ATTRS[ScriptLocation(location)])


def _with_scripts(
    config: ScriptConfig, location: ScriptLocation, scripts: tuple[Script, ...]
) -> ScriptConfig:
    return config.model_copy(update={_SCRIPT_ATTRS[ScriptLocation(location)]: scripts})


def add_script(
    config: ScriptConfig,
    location: ScriptLocation,
    name: str = "New Script",
    content: str = "<!-- Script content -->",
) -> ScriptConfig:
    script = Script(name=name, content=content, is_enabled=True)
    return _with_scripts(config, location, (*_scripts_at(config, location), script))


def remove_script(config: ScriptConfig, location: ScriptLocation, script_id: str) -> ScriptConfig:
    """Delete a script and its content."""
    remaining = tuple(s for s in _scripts_at(config, location) if s.id != script_id)
    return _with_scripts(config, location, remaining)


def toggle_script(config: ScriptConfig, location: ScriptLocation, script_id: str) -> ScriptConfig:
    """Flip ``is_enabled``; the script content is kept either way."""
    toggled = tuple(
        s.model_copy(update={"is_enabled": not s.is_enabled}) if s.id == script_id else s
        for s in _scripts_at(config, location)
    )
    return _with_scripts(config, location, toggled)


def enabled_scripts(config: ScriptConfig, location: ScriptLocation) -> list[Script]:
    """Scripts that should be rendered at ``location``, in order."""
    return [s for s in _scripts_at(config, location) if s.is_enabled]
