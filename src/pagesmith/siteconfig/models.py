"""Global site configuration domains.

Every domain value is a frozen model whose nested collections are tuples:
an edit always produces a new value, so the current value of a domain can
never alias its compiled-in default.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from pagesmith.shared.documents import FrozenDocumentModel, new_id


class ConfigDomain(StrEnum):
    HEADER = "header"
    FOOTER = "footer"
    NAVIGATION = "navigation"
    SEO = "seo"
    SCRIPTS = "scripts"


class ScriptLocation(StrEnum):
    HEAD = "head"
    BODY = "body"


class HeaderConfig(FrozenDocumentModel):
    logo: str = ""
    favicon: str = ""
    is_sticky: bool = False


class SocialLink(FrozenDocumentModel):
    id: str = Field(default_factory=new_id)
    platform: str
    url: str
    icon: str = "link"


class FooterLink(FrozenDocumentModel):
    id: str = Field(default_factory=new_id)
    text: str
    url: str


class FooterColumn(FrozenDocumentModel):
    id: str = Field(default_factory=new_id)
    title: str
    links: tuple[FooterLink, ...] = ()


class FooterConfig(FrozenDocumentModel):
    copyright: str = ""
    social_links: tuple[SocialLink, ...] = ()
    columns: tuple[FooterColumn, ...] = ()


class NavItem(FrozenDocumentModel):
    """A navigation entry; ``children`` nests a submenu."""

    id: str = Field(default_factory=new_id)
    text: str
    url: str
    children: tuple[NavItem, ...] | None = None


class NavigationConfig(FrozenDocumentModel):
    items: tuple[NavItem, ...] = ()


class SEOConfig(FrozenDocumentModel):
    default_title: str = ""
    default_description: str = ""
    default_keywords: str = ""
    og_image: str = ""
    twitter_handle: str = ""
    enable_sitemap: bool = True
    enable_robots: bool = True


class Script(FrozenDocumentModel):
    """A snippet injected into the page head or body.

    Disabled scripts keep their content; they are only skipped when
    rendering.
    """

    id: str = Field(default_factory=new_id)
    name: str
    content: str = ""
    is_enabled: bool = True


class ScriptConfig(FrozenDocumentModel):
    head_scripts: tuple[Script, ...] = ()
    body_scripts: tuple[Script, ...] = ()


DomainValue = HeaderConfig | FooterConfig | NavigationConfig | SEOConfig | ScriptConfig

DOMAIN_MODELS: dict[ConfigDomain, type[DomainValue]] = {
    ConfigDomain.HEADER: HeaderConfig,
    ConfigDomain.FOOTER: FooterConfig,
    ConfigDomain.NAVIGATION: NavigationConfig,
    ConfigDomain.SEO: SEOConfig,
    ConfigDomain.SCRIPTS: ScriptConfig,
}
