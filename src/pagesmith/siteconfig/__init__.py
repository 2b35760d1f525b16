"""Global site configuration: header, footer, navigation, SEO and scripts."""

from pagesmith.siteconfig.defaults import DEFAULTS, default_for
from pagesmith.siteconfig.models import (
    DOMAIN_MODELS,
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
    ScriptLocation,
    SEOConfig,
    SocialLink,
)
from pagesmith.siteconfig.store import ConfigStore, coerce_value

__all__ = [
    "DEFAULTS",
    "DOMAIN_MODELS",
    "ConfigDomain",
    "ConfigStore",
    "DomainValue",
    "FooterColumn",
    "FooterConfig",
    "FooterLink",
    "HeaderConfig",
    "NavItem",
    "NavigationConfig",
    "SEOConfig",
    "Script",
    "ScriptConfig",
    "ScriptLocation",
    "SocialLink",
    "coerce_value",
    "default_for",
]
