"""Interactive create/edit/delete of image definitions.

The editor owns a scratch working copy while a definition is open. Nothing
reaches the collection or the persisted field until ``save`` passes
validation; every successful mutation is re-encoded into the store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from cloud_agents.domains.images import codec
from cloud_agents.domains.images.models import (
    NAME_PREFIX_MAX_LENGTH,
    ImageCollection,
    ImageDefinition,
)
from cloud_agents.domains.images.store import ImageStore
from cloud_agents.domains.images.validation import ensure_valid
from cloud_agents.utils.errors import EditorStateError, ImageDataError, ValidationError

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]


class EditorState(str, Enum):
    """Editor states."""

    CLOSED = "closed"
    OPEN_NEW = "open-new"
    OPEN_EDITING = "open-editing"


def _deny(message: str) -> bool:  # noqa: ARG001
    return False


class ImageEditor:
    """State machine for editing a profile's image collection."""

    def __init__(self, store: ImageStore, confirm: ConfirmCallback | None = None) -> None:
        """Initialize the editor from the store's persisted text.

        Unreadable persisted text gives an empty collection; the first save
        or delete then replaces it.

        Args:
            store: Holder of the persisted images field.
            confirm: Asked before a definition is deleted; returns True to
                proceed. Declines everything by default.
        """
        self._store = store
        self._confirm = confirm or _deny
        self._state = EditorState.CLOSED
        self._image: ImageDefinition | None = None
        self._original: ImageDefinition | None = None
        self._messages: dict[str, list[str]] = {}
        self._images = self._load()

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is not EditorState.CLOSED

    @property
    def images(self) -> ImageCollection:
        return self._images

    @property
    def image(self) -> ImageDefinition:
        """The working copy of the open definition."""
        if self._image is None:
            raise EditorStateError("access the working copy", self._state.value)
        return self._image

    @property
    def original(self) -> ImageDefinition | None:
        """Collection member being edited, None when creating."""
        return self._original

    @property
    def messages(self) -> dict[str, list[str]]:
        """Validation messages from the last failed save."""
        return self._messages

    def reload(self) -> None:
        """Replace the collection with a fresh decode of the store."""
        if self.is_open:
            raise EditorStateError("reload", self._state.value)
        self._images = self._load()

    def open_create(self) -> ImageDefinition:
        """Open a blank working copy for a new definition."""
        self._open(EditorState.OPEN_NEW, ImageDefinition(max_instances=1), None)
        return self.image

    def open_edit(self, image: ImageDefinition) -> ImageDefinition:
        """Open a working copy of an existing collection member."""
        if not self._images.contains(image):
            raise ValueError("Only members of the collection can be edited")
        self._open(EditorState.OPEN_EDITING, image.model_copy(), image)
        return self.image

    def _open(
        self,
        state: EditorState,
        image: ImageDefinition,
        original: ImageDefinition | None,
    ) -> None:
        if self.is_open:
            raise EditorStateError("open another image", self._state.value)
        self._state = state
        self._image = image
        self._original = original
        self._messages = {}

    def update(self, **fields: Any) -> None:
        """Change fields of the working copy.

        Setting ``source_image`` while the name prefix is still empty fills the
        prefix with the last characters of the image name.
        """
        image = self.image
        for name, value in fields.items():
            if name not in ImageDefinition.model_fields:
                raise AttributeError(f"ImageDefinition has no field '{name}'")
            if name == "max_instances":
                value = _parse_count(value)
            setattr(image, name, value)

        source_image = fields.get("source_image")
        if source_image and not image.name_prefix:
            image.name_prefix = source_image[-NAME_PREFIX_MAX_LENGTH:]

    def save(self) -> bool:
        """Validate the working copy and commit it.

        Returns:
            True if the definition was saved and the editor closed, False if
            validation failed; the editor then stays open with ``messages``
            describing every violation.
        """
        image = self.image
        if image.name_prefix is not None:
            image.name_prefix = image.name_prefix.strip()

        try:
            ensure_valid(image, self._images, self._original)
        except ValidationError as e:
            self._messages = e.messages
            logger.debug(f"Image definition rejected: {e.messages}")
            return False

        if self._original is not None:
            self._images.replace(self._original, image)
        else:
            self._images.append(image)
        self._persist()

        logger.info(f"Saved image definition '{image.name_prefix}'")
        self._close()
        return True

    def cancel(self) -> None:
        """Close the editor, discarding the working copy."""
        self._close()

    def delete(self, image: ImageDefinition) -> bool:
        """Remove a collection member after user confirmation.

        Returns:
            True if the definition was removed.
        """
        if self.is_open:
            raise EditorStateError("delete an image", self._state.value)

        message = f"Do you really want to delete agent image based on {image.source_image}?"
        if not self._confirm(message):
            return False

        self._images.remove(image)
        self._persist()
        logger.info(f"Deleted image definition '{image.name_prefix}'")
        return True

    def _load(self) -> ImageCollection:
        """Decode the store, starting from an empty collection if it is unreadable."""
        try:
            return codec.decode(self._store.load())
        except ImageDataError as e:
            logger.warning(f"Ignoring malformed image data: {e}")
            return ImageCollection()

    def _persist(self) -> None:
        self._store.save(codec.encode(self._images))

    def _close(self) -> None:
        self._state = EditorState.CLOSED
        self._image = None
        self._original = None


def _parse_count(value: Any) -> Any:
    """Turn numeric form text into an int; leave anything else for validation."""
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
    return value
