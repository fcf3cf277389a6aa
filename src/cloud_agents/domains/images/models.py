"""Pydantic models for agent image definitions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Storage keys shared with the host's generic image parameters
SOURCE_ID_FIELD = "source-id"
AGENT_POOL_ID_FIELD = "agent_pool_id"
SOURCE_IMAGES_JSON = "source_images_json"

NAME_PREFIX_MAX_LENGTH = 12


class ImageDefinition(BaseModel):
    """Provisioning template for agent instances.

    Every field is optional so that an unsaved working copy and leniently
    persisted data can be represented; required fields are enforced by
    ``validate_image`` before a definition enters a collection.
    """

    model_config = ConfigDict(populate_by_name=True)

    source_image: str | None = Field(None, alias="sourceImage", description="Base image")
    zone: str | None = Field(None, description="Compute zone")
    network: str | None = Field(None, description="Network name")
    max_instances: int | None = Field(
        None, alias="maxInstances", description="Maximum running instances"
    )
    name_prefix: str | None = Field(
        None, alias=SOURCE_ID_FIELD, description="Instance name prefix, unique per profile"
    )
    machine_type: str | None = Field(None, alias="machineType", description="Machine type")
    agent_pool_id: str | None = Field(
        None, alias=AGENT_POOL_ID_FIELD, description="Target agent pool"
    )
    profile_id: str | None = Field(None, alias="profileId", description="Owning profile")

    @field_validator("name_prefix")
    @classmethod
    def strip_name_prefix(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None

    def to_storage(self) -> dict[str, object]:
        """Return the persisted representation keyed by storage names."""
        return self.model_dump(by_alias=True)


class ImageCollection:
    """Ordered image definitions belonging to one profile.

    Mutations that target an existing member match it by identity, not by
    value, so two equal definitions are still distinct members.
    """

    def __init__(self, images: Iterable[ImageDefinition] = ()) -> None:
        self._images: list[ImageDefinition] = list(images)

    def __iter__(self) -> Iterator[ImageDefinition]:
        return iter(self._images)

    def __len__(self) -> int:
        return len(self._images)

    def __getitem__(self, index: int) -> ImageDefinition:
        return self._images[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageCollection):
            return NotImplemented
        return self._images == other._images

    def __repr__(self) -> str:
        return f"ImageCollection({self._images!r})"

    def _index_of(self, image: ImageDefinition) -> int:
        for index, member in enumerate(self._images):
            if member is image:
                return index
        raise ValueError("Image definition is not a member of this collection")

    def append(self, image: ImageDefinition) -> None:
        self._images.append(image)

    def replace(self, original: ImageDefinition, image: ImageDefinition) -> None:
        """Replace ``original`` in place, keeping its position."""
        self._images[self._index_of(original)] = image

    def remove(self, image: ImageDefinition) -> None:
        del self._images[self._index_of(image)]

    def contains(self, image: ImageDefinition) -> bool:
        return any(member is image for member in self._images)

    def find(self, name_prefix: str) -> ImageDefinition | None:
        """Find a definition by its name prefix."""
        name_prefix = name_prefix.strip()
        for image in self._images:
            if image.name_prefix is not None and image.name_prefix.strip() == name_prefix:
                return image
        return None

    def name_prefixes(self, exclude: ImageDefinition | None = None) -> list[str]:
        """Return name prefixes of all members except ``exclude``."""
        return [
            image.name_prefix.strip()
            for image in self._images
            if image is not exclude and image.name_prefix is not None
        ]
