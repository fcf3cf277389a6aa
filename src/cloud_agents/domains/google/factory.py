"""Constructs Google Compute cloud clients from profile parameters."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping

from cloud_agents.domains.google.client import GoogleCloudClient
from cloud_agents.domains.google.connector import GoogleApiConnector
from cloud_agents.domains.google.constants import (
    ACCESS_KEY,
    CLOUD_CODE,
    DISPLAY_NAME,
    IMAGES_DATA,
    INSTANCE_NAME,
    VM_NAME_PREFIX,
)
from cloud_agents.domains.images import codec
from cloud_agents.domains.images.models import ImageCollection
from cloud_agents.models.common import AgentDescription, CloudErrorInfo
from cloud_agents.utils.errors import ConfigurationError, ImageDataError

logger = logging.getLogger(__name__)

# Carried in the images field, never as a plain profile property
SKIP_PARAMETERS = (VM_NAME_PREFIX,)


class GoogleCloudClientFactory:
    """Builds ``GoogleCloudClient`` instances for the host."""

    cloud_code = CLOUD_CODE
    display_name = DISPLAY_NAME

    def __init__(self, server_id: str = "", plugin_resources_path: str = "") -> None:
        """Initialize the factory.

        Args:
            server_id: Identity of the server installation.
            plugin_resources_path: Path prefix of this plugin's web resources.
        """
        self._server_id = server_id
        self._plugin_resources_path = plugin_resources_path

    @property
    def edit_profile_url(self) -> str:
        return self._plugin_resources_path.rstrip("/") + "/settings.html"

    def initial_parameter_values(self) -> dict[str, str]:
        return {}

    def check_client_params(self, parameters: Mapping[str, str]) -> list[CloudErrorInfo]:  # noqa: ARG002
        return []

    def create_client(
        self,
        profile_id: str,
        parameters: Mapping[str, str],
        prior_errors: Iterable[CloudErrorInfo] = (),
    ) -> GoogleCloudClient:
        """Create a client for a profile.

        Args:
            profile_id: Profile the client serves.
            parameters: Persisted profile parameters.
            prior_errors: Errors of the client this one replaces; attached
                as they are.

        Returns:
            The new client.

        Raises:
            ConfigurationError: If the access key parameter is missing or empty.
        """
        access_key = self._get_parameter(parameters, ACCESS_KEY)

        connector = GoogleApiConnector(
            access_key, server_id=self._server_id, profile_id=profile_id
        )

        images = self.parse_image_data(parameters)
        for image in images:
            if image.profile_id and image.profile_id != profile_id:
                logger.debug(
                    f"Image '{image.name_prefix}' names profile '{image.profile_id}' "
                    f"but is loaded for profile '{profile_id}'"
                )

        client = GoogleCloudClient(parameters, connector, images)
        client.update_errors(*prior_errors)

        logger.info(
            f"Created {self.display_name} client for profile {profile_id} "
            f"with {len(images)} images"
        )
        return client

    def _get_parameter(self, parameters: Mapping[str, str], name: str) -> str:
        value = parameters.get(name)
        if not value:
            raise ConfigurationError(f"{name} must not be empty")
        return value

    def parse_image_data(self, parameters: Mapping[str, str]) -> ImageCollection:
        """Decode the profile's image definitions.

        Malformed data yields an empty collection instead of an error.
        """
        try:
            return codec.decode(parameters.get(IMAGES_DATA))
        except ImageDataError as e:
            logger.warning(f"Ignoring malformed image data: {e}")
            return ImageCollection()

    def filter_properties(self, properties: MutableMapping[str, str]) -> list[str]:
        """Remove properties the host must not persist as plain parameters.

        Returns:
            Names of invalid properties; always empty.
        """
        for key in [key for key in properties if key in SKIP_PARAMETERS]:
            del properties[key]
        return []

    def can_be_agent_of_type(self, description: AgentDescription) -> bool:
        """Check whether a reported agent runs on an instance of this cloud."""
        return INSTANCE_NAME in description.configuration_parameters
