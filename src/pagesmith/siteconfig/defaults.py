"""Compiled-in default value of every configuration domain.

Used when no document has been saved for a domain and by ``reset``.
"""

from __future__ import annotations

from datetime import date

from pagesmith.siteconfig.models import (
    ConfigDomain,
    DomainValue,
    FooterColumn,
    FooterConfig,
    FooterLink,
    HeaderConfig,
    NavigationConfig,
    NavItem,
    Script,
    ScriptConfig,
    SEOConfig,
    SocialLink,
)

DEFAULT_HEADER = HeaderConfig(logo="/logo.svg", favicon="/favicon.ico", is_sticky=True)

DEFAULT_FOOTER = FooterConfig(
    copyright=f"© {date.today().year} Your Company. All rights reserved.",
    social_links=(
        SocialLink(id="1", platform="Twitter", url="https://twitter.com", icon="twitter"),
        SocialLink(id="2", platform="Facebook", url="https://facebook.com", icon="facebook"),
        SocialLink(id="3", platform="Instagram", url="https://instagram.com", icon="instagram"),
    ),
    columns=(
        FooterColumn(
            id="1",
            title="Company",
            links=(
                FooterLink(id="1", text="About", url="/about"),
                FooterLink(id="2", text="Contact", url="/contact"),
            ),
        ),
        FooterColumn(
            id="2",
            title="Resources",
            links=(
                FooterLink(id="1", text="Blog", url="/blog"),
                FooterLink(id="2", text="Documentation", url="/docs"),
            ),
        ),
    ),
)

DEFAULT_NAVIGATION = NavigationConfig(
    items=(
        NavItem(id="1", text="Home", url="/"),
        NavItem(id="2", text="About", url="/about"),
        NavItem(id="3", text="Services", url="/services"),
        NavItem(id="4", text="Contact", url="/contact"),
    )
)

DEFAULT_SEO = SEOConfig(
    default_title="Your Website",
    default_description="Your website description goes here",
    default_keywords="website, cms, content management",
    og_image="/og-image.jpg",
    twitter_handle="@yourhandle",
    enable_sitemap=True,
    enable_robots=True,
)

DEFAULT_SCRIPTS = ScriptConfig(
    head_scripts=(
        Script(
            id="1",
            name="Google Analytics",
            content="<!-- Google Analytics code -->",
            is_enabled=True,
        ),
    ),
    body_scripts=(
        Script(
            id="1",
            name="Chat Widget",
            content="<!-- Chat widget code -->",
            is_enabled=False,
        ),
    ),
)

DEFAULTS: dict[ConfigDomain, DomainValue] = {
    ConfigDomain.HEADER: DEFAULT_HEADER,
    ConfigDomain.FOOTER: DEFAULT_FOOTER,
    ConfigDomain.NAVIGATION: DEFAULT_NAVIGATION,
    ConfigDomain.SEO: DEFAULT_SEO,
    ConfigDomain.SCRIPTS: DEFAULT_SCRIPTS,
}


def default_for(domain: ConfigDomain | str) -> DomainValue:
    return DEFAULTS[ConfigDomain(domain)]
