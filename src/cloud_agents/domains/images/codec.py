"""Conversion between image collections and the persisted images field.

The persisted field is a JSON array with one object per image definition,
for example::

    [{"sourceImage": "ubuntu-2004-focal-v20230101", "zone": "us-east1-b",
      "network": "default", "maxInstances": 2, "source-id": "web-1",
      "machineType": "n1-standard-1", "agent_pool_id": "0",
      "profileId": "google-1"}]
"""

from __future__ import annotations

import json

from pydantic import ValidationError as PydanticValidationError

from cloud_agents.domains.images.models import ImageCollection, ImageDefinition
from cloud_agents.utils.errors import ImageDataError


def encode(collection: ImageCollection) -> str:
    """Serialize a collection to the persisted JSON text."""
    return json.dumps([image.to_storage() for image in collection])


def decode(text: str | None) -> ImageCollection:
    """Parse persisted JSON text into a collection.

    Missing or blank text decodes to an empty collection.

    Raises:
        ImageDataError: If the text is not a JSON array of objects.
    """
    if text is None or not text.strip():
        return ImageCollection()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImageDataError(f"Image data is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ImageDataError(f"Image data must be a JSON array, got {type(data).__name__}")

    images = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ImageDataError(f"Image data element {index} is not an object")
        try:
            images.append(ImageDefinition.model_validate(item))
        except PydanticValidationError as e:
            raise ImageDataError(f"Image data element {index} is invalid: {e}") from e

    return ImageCollection(images)
