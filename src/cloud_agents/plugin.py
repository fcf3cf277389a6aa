"""Plugin interface for cloud agent providers.

This module defines the plugin base class, its metadata and the narrow
client factory interface the host relies on.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from cloud_agents.hooks import hookimpl

if TYPE_CHECKING:
    from cloud_agents.config import CloudAgentsConfig
    from cloud_agents.models.common import AgentDescription, CloudErrorInfo


@runtime_checkable
class ClientFactory(Protocol):
    """What the host needs from a cloud to build and manage its clients."""

    cloud_code: str
    display_name: str

    def create_client(
        self,
        profile_id: str,
        parameters: Mapping[str, str],
        prior_errors: Iterable[CloudErrorInfo] = (),
    ) -> Any: ...

    def filter_properties(self, properties: MutableMapping[str, str]) -> list[str]: ...

    def can_be_agent_of_type(self, description: AgentDescription) -> bool: ...


@dataclass
class PluginMetadata:
    """Metadata describing a cloud plugin."""

    name: str
    """Unique plugin name, e.g., 'google'."""

    version: str
    """Plugin version following semver, e.g., '1.0.0'."""

    description: str
    """Human-readable description of what this plugin provides."""

    maintainer: str
    """Maintainer email or team."""


class BasePlugin:
    """Base implementation of a cloud plugin with common functionality.

    Provider plugins extend this class and override the hooks they need.

    Example entry point in pyproject.toml for external plugins:
        [project.entry-points."cloud_agents.plugins"]
        my_cloud = "my_package.plugin:MyCloudPlugin"
    """

    def __init__(self, metadata: PluginMetadata) -> None:
        """Initialize the plugin with metadata.

        Args:
            metadata: Plugin metadata.
        """
        self._metadata = metadata

    @hookimpl
    def cloud_get_plugin_metadata(self) -> PluginMetadata:
        """Return plugin metadata."""
        return self._metadata

    @hookimpl
    def cloud_get_client_factory(self, config: CloudAgentsConfig) -> ClientFactory | None:  # noqa: ARG002
        """Return the client factory. Override in subclass."""
        return None

    @hookimpl
    def cloud_health_check(self, config: CloudAgentsConfig) -> tuple[bool, str]:  # noqa: ARG002
        """Check plugin health. Plugins without requirements are healthy."""
        return True, "No requirements"
