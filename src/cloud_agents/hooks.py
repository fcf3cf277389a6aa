"""Pluggy hook specifications for cloud agent plugins.

The host discovers cloud plugins through these hooks. Plugins mark their
implementations with ``hookimpl``; the host-side ``PluginManager`` calls
them through ``pm.hook``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from cloud_agents.config import CloudAgentsConfig
    from cloud_agents.plugin import ClientFactory, PluginMetadata

PROJECT_NAME = "cloud_agents"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class CloudAgentsHookSpec:
    """Hooks a cloud plugin can implement."""

    @hookspec
    def cloud_get_plugin_metadata(self) -> PluginMetadata:  # type: ignore[empty-body]
        """Return metadata describing the plugin."""

    @hookspec
    def cloud_get_client_factory(self, config: CloudAgentsConfig) -> ClientFactory | None:
        """Return the client factory this plugin provides, if any."""

    @hookspec
    def cloud_health_check(self, config: CloudAgentsConfig) -> tuple[bool, str]:  # type: ignore[empty-body]
        """Report whether the plugin can serve profiles.

        Returns:
            Tuple of (healthy, message).
        """
