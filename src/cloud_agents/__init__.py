"""Image templates, catalog sync and client factory for build-agent clouds."""

__version__ = "0.1.0"
