"""Google Compute cloud client."""

from __future__ import annotations

from collections.abc import Mapping

from cloud_agents.domains.google.connector import GoogleApiConnector
from cloud_agents.domains.images.models import ImageCollection, ImageDefinition
from cloud_agents.models.common import CloudErrorInfo


class GoogleCloudClient:
    """Runtime client for one cloud profile."""

    def __init__(
        self,
        parameters: Mapping[str, str],
        connector: GoogleApiConnector,
        images: ImageCollection,
    ) -> None:
        self._parameters = dict(parameters)
        self._connector = connector
        self._images = images
        self._errors: list[CloudErrorInfo] = []

    @property
    def parameters(self) -> dict[str, str]:
        return self._parameters

    @property
    def connector(self) -> GoogleApiConnector:
        return self._connector

    @property
    def images(self) -> ImageCollection:
        return self._images

    @property
    def errors(self) -> list[CloudErrorInfo]:
        return list(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def update_errors(self, *errors: CloudErrorInfo) -> None:
        """Replace the client's errors."""
        self._errors = list(errors)

    def find_image(self, name_prefix: str) -> ImageDefinition | None:
        """Find an image definition by its name prefix."""
        return self._images.find(name_prefix)
