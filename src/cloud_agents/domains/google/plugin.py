"""Plugin registration for the Google Compute cloud."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cloud_agents import __version__
from cloud_agents.domains.google.constants import CLOUD_CODE, DISPLAY_NAME
from cloud_agents.domains.google.factory import GoogleCloudClientFactory
from cloud_agents.hooks import hookimpl
from cloud_agents.plugin import BasePlugin, PluginMetadata

if TYPE_CHECKING:
    from cloud_agents.config import CloudAgentsConfig


class GoogleCloudPlugin(BasePlugin):
    """Cloud plugin that starts build agents on Google Compute instances."""

    def __init__(self) -> None:
        super().__init__(
            PluginMetadata(
                name=CLOUD_CODE,
                version=__version__,
                description=f"{DISPLAY_NAME} build agent images",
                maintainer="cloud-agents@example.com",
            )
        )

    @hookimpl
    def cloud_get_client_factory(self, config: CloudAgentsConfig) -> GoogleCloudClientFactory:
        return GoogleCloudClientFactory(
            server_id=config.server_id,
            plugin_resources_path=config.plugin_resources_path,
        )

    @hookimpl
    def cloud_health_check(self, config: CloudAgentsConfig) -> tuple[bool, str]:
        if not config.resource_url:
            return False, "No catalog resource URL configured"
        return True, f"Catalog served from {config.resource_url}"


def create_plugin() -> GoogleCloudPlugin:
    """Factory function for plugin creation."""
    return GoogleCloudPlugin()
