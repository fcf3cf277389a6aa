"""Registry of core cloud plugins."""

from __future__ import annotations

from cloud_agents.plugin import BasePlugin


def get_core_plugins() -> list[BasePlugin]:
    """Return all core cloud plugin instances.

    Returns:
        List of plugin instances shipped with this package.
    """
    from cloud_agents.domains.google.plugin import GoogleCloudPlugin

    return [GoogleCloudPlugin()]
