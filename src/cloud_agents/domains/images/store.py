"""Stores for the persisted images field."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Protocol

from cloud_agents.domains.images.models import SOURCE_IMAGES_JSON


class ImageStore(Protocol):
    """Durable holder of the serialized image collection."""

    def load(self) -> str | None:
        """Return the persisted text, or None if nothing was saved."""
        ...

    def save(self, text: str) -> None:
        """Replace the persisted text."""
        ...


class InMemoryImageStore:
    """Image store backed by a single string."""

    def __init__(self, text: str | None = None) -> None:
        self._text = text

    def load(self) -> str | None:
        return self._text

    def save(self, text: str) -> None:
        self._text = text


class ParametersImageStore:
    """Image store backed by a profile's parameter map.

    The serialized collection lives under the ``source_images_json`` key, the
    same key the client factory reads from.
    """

    def __init__(self, parameters: MutableMapping[str, str], key: str = SOURCE_IMAGES_JSON) -> None:
        self._parameters = parameters
        self._key = key

    def load(self) -> str | None:
        return self._parameters.get(self._key)

    def save(self, text: str) -> None:
        self._parameters[self._key] = text
