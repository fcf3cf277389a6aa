"""Plugin manager using pluggy for cloud agent plugins.

This module provides the PluginManager class that handles plugin
discovery and registration, and routes host calls to the client factory
of the right cloud.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

import pluggy

from cloud_agents.config import CloudAgentsConfig, get_config
from cloud_agents.hooks import PROJECT_NAME, CloudAgentsHookSpec

if TYPE_CHECKING:
    from cloud_agents.models.common import AgentDescription, CloudErrorInfo
    from cloud_agents.plugin import ClientFactory, PluginMetadata

logger = logging.getLogger(__name__)

# Entry point group name for external plugin discovery
PLUGIN_ENTRY_POINT_GROUP = "cloud_agents.plugins"


class PluginManager:
    """Manages plugin discovery, registration and client factories.

    Uses pluggy for the hook-based plugin architecture, so core and external
    cloud plugins are handled the same way.
    """

    def __init__(self, config: CloudAgentsConfig | None = None) -> None:
        """Initialize the plugin manager with a pluggy PluginManager."""
        self._config = config or get_config()
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CloudAgentsHookSpec)
        self._registered_plugins: dict[str, Any] = {}
        self._factories: dict[str, ClientFactory] | None = None

    @property
    def hook(self) -> Any:
        """Get the pluggy hook caller for invoking hooks."""
        return self._pm.hook

    @property
    def registered_plugins(self) -> dict[str, Any]:
        """Get all registered plugins by name."""
        return self._registered_plugins

    def register_plugin(self, plugin: Any, name: str | None = None) -> str:
        """Register a plugin instance.

        Args:
            plugin: Plugin instance implementing hook methods.
            name: Optional name for the plugin. If not provided,
                  will try to get from plugin metadata.

        Returns:
            The name used to register the plugin.
        """
        if name is None:
            if hasattr(plugin, "cloud_get_plugin_metadata"):
                name = plugin.cloud_get_plugin_metadata().name
            else:
                name = type(plugin).__name__

        self._pm.register(plugin, name=name)
        self._registered_plugins[name] = plugin
        self._factories = None
        logger.debug(f"Registered plugin: {name}")
        return name

    def unregister_plugin(self, name: str) -> None:
        """Unregister a plugin by name."""
        if name in self._registered_plugins:
            plugin = self._registered_plugins.pop(name)
            self._pm.unregister(plugin)
            self._factories = None
            logger.debug(f"Unregistered plugin: {name}")

    def load_entrypoint_plugins(self) -> int:
        """Discover and load external plugins from entry points.

        Returns:
            Number of plugins loaded.
        """
        count = self._pm.load_setuptools_entrypoints(PLUGIN_ENTRY_POINT_GROUP)

        for plugin in self._pm.get_plugins():
            name = self._pm.get_name(plugin)
            if name and name not in self._registered_plugins:
                self._registered_plugins[name] = plugin
                logger.info(f"Loaded external plugin from entry point: {name}")

        self._factories = None
        logger.info(f"Loaded {count} external plugins from entry points")
        return count

    def load_core_plugins(self) -> int:
        """Load the cloud plugins shipped with this package.

        Returns:
            Number of plugins loaded.
        """
        from cloud_agents.domains.registry import get_core_plugins

        plugins = get_core_plugins()
        for plugin in plugins:
            self.register_plugin(plugin)

        logger.info(f"Loaded {len(plugins)} core cloud plugins")
        return len(plugins)

    def get_all_metadata(self) -> list[PluginMetadata]:
        """Collect metadata from all registered plugins."""
        results = self.hook.cloud_get_plugin_metadata()
        return [meta for meta in results if meta is not None]

    def run_health_checks(self) -> dict[str, tuple[bool, str]]:
        """Run health checks on all registered plugins.

        Returns:
            Dictionary mapping plugin names to (healthy, message) tuples.
        """
        results: dict[str, tuple[bool, str]] = {}

        for name, plugin in self._registered_plugins.items():
            try:
                if hasattr(plugin, "cloud_health_check"):
                    is_healthy, message = plugin.cloud_health_check(config=self._config)
                else:
                    is_healthy, message = True, "No health check defined"

                results[name] = (is_healthy, message)
                if is_healthy:
                    logger.info(f"Plugin {name} health check passed: {message}")
                else:
                    logger.warning(f"Plugin {name} unavailable: {message}")
            except Exception as e:
                results[name] = (False, f"Health check error: {e}")
                logger.warning(f"Plugin {name} health check failed with error: {e}")

        return results

    @property
    def factories(self) -> dict[str, ClientFactory]:
        """Client factories of all plugins, keyed by cloud code."""
        if self._factories is None:
            factories: dict[str, ClientFactory] = {}
            for factory in self.hook.cloud_get_client_factory(config=self._config):
                if factory is None:
                    continue
                if factory.cloud_code in factories:
                    logger.warning(f"Duplicate client factory for cloud '{factory.cloud_code}'")
                    continue
                factories[factory.cloud_code] = factory
            self._factories = factories
        return self._factories

    def get_factory(self, cloud_code: str) -> ClientFactory:
        """Get the client factory for a cloud.

        Raises:
            KeyError: If no plugin provides that cloud.
        """
        try:
            return self.factories[cloud_code]
        except KeyError:
            raise KeyError(f"No client factory registered for cloud '{cloud_code}'") from None

    def create_client(
        self,
        cloud_code: str,
        profile_id: str,
        parameters: Mapping[str, str],
        prior_errors: Iterable[CloudErrorInfo] = (),
    ) -> Any:
        """Build a client for a profile of the given cloud."""
        return self.get_factory(cloud_code).create_client(profile_id, parameters, prior_errors)

    def filter_properties(self, cloud_code: str, properties: MutableMapping[str, str]) -> list[str]:
        """Run the cloud's property filter before the host persists a profile."""
        return self.get_factory(cloud_code).filter_properties(properties)

    def find_agent_cloud(self, description: AgentDescription) -> str | None:
        """Return the code of the cloud a reported agent belongs to, if any."""
        for cloud_code, factory in self.factories.items():
            if factory.can_be_agent_of_type(description):
                return cloud_code
        return None
