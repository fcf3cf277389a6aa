"""Field rules for image definitions.

All rules are evaluated together so every violation can be reported at
once. Messages are keyed by the storage name of the offending field.
"""

from __future__ import annotations

import re

from cloud_agents.domains.images.models import (
    AGENT_POOL_ID_FIELD,
    NAME_PREFIX_MAX_LENGTH,
    SOURCE_ID_FIELD,
    ImageCollection,
    ImageDefinition,
)
from cloud_agents.utils.errors import ValidationError

NAME_PREFIX_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$", re.IGNORECASE)

REQUIRED_MESSAGE = "This field is required."
MAX_INSTANCES_MESSAGE = "Please enter a value greater than or equal to 1."
MAX_LENGTH_MESSAGE = f"Please enter no more than {NAME_PREFIX_MAX_LENGTH} characters."
PATTERN_MESSAGE = "Name can contain alphanumeric characters, underscore and hyphen"
UNIQUE_MESSAGE = "Name prefix should be unique within subscription"

_REQUIRED_FIELDS = {
    "sourceImage": "source_image",
    "zone": "zone",
    "network": "network",
    "machineType": "machine_type",
    AGENT_POOL_ID_FIELD: "agent_pool_id",
}


def validate_image(
    image: ImageDefinition,
    collection: ImageCollection,
    original: ImageDefinition | None = None,
) -> dict[str, list[str]]:
    """Check an image definition against every field rule.

    Args:
        image: Definition to check.
        collection: Collection the definition is going to be saved into.
        original: Collection member being edited, if any. Its own name
            prefix does not count as a duplicate.

    Returns:
        Messages per storage field name; empty when the definition is valid.
    """
    messages: dict[str, list[str]] = {}

    def add(field: str, message: str) -> None:
        messages.setdefault(field, []).append(message)

    for storage_name, attribute in _REQUIRED_FIELDS.items():
        value = getattr(image, attribute)
        if value is None or (isinstance(value, str) and not value.strip()):
            add(storage_name, REQUIRED_MESSAGE)

    max_instances = image.max_instances
    if max_instances is None:
        add("maxInstances", REQUIRED_MESSAGE)
    elif isinstance(max_instances, bool) or not isinstance(max_instances, int):
        add("maxInstances", MAX_INSTANCES_MESSAGE)
    elif max_instances < 1:
        add("maxInstances", MAX_INSTANCES_MESSAGE)

    name_prefix = (image.name_prefix or "").strip()
    if not name_prefix:
        add(SOURCE_ID_FIELD, REQUIRED_MESSAGE)
    else:
        if len(name_prefix) > NAME_PREFIX_MAX_LENGTH:
            add(SOURCE_ID_FIELD, MAX_LENGTH_MESSAGE)
        if not NAME_PREFIX_PATTERN.match(name_prefix):
            add(SOURCE_ID_FIELD, PATTERN_MESSAGE)
        if name_prefix in collection.name_prefixes(exclude=original):
            add(SOURCE_ID_FIELD, UNIQUE_MESSAGE)

    return messages


def ensure_valid(
    image: ImageDefinition,
    collection: ImageCollection,
    original: ImageDefinition | None = None,
) -> None:
    """Raise if the definition breaks any field rule.

    Raises:
        ValidationError: With every violation found.
    """
    messages = validate_image(image, collection, original)
    if messages:
        raise ValidationError(messages)
