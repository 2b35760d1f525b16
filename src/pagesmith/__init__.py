"""pagesmith - schema-driven page composition and site configuration."""

__version__ = "0.1.0"
