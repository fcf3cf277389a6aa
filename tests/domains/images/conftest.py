"""Pytest fixtures for images domain tests."""

from collections.abc import Callable

import pytest

from cloud_agents.domains.images.models import ImageCollection, ImageDefinition
from cloud_agents.domains.images.store import InMemoryImageStore


@pytest.fixture
def image_data() -> dict:
    """Sample persisted image definition."""
    return {
        "sourceImage": "ubuntu-2004-focal-v20230101",
        "zone": "us-east1-b",
        "network": "default",
        "maxInstances": 2,
        "source-id": "web-1",
        "machineType": "n1-standard-1",
        "agent_pool_id": "0",
        "profileId": "google-1",
    }


@pytest.fixture
def image(image_data: dict) -> ImageDefinition:
    """Sample well-formed image definition."""
    return ImageDefinition.model_validate(image_data)


def _make_image(name_prefix: str, **overrides: object) -> ImageDefinition:
    """Build a valid image definition with the given prefix."""
    fields: dict = {
        "source_image": "debian-11-bullseye-v20230206",
        "zone": "europe-west1-b",
        "network": "default",
        "max_instances": 1,
        "name_prefix": name_prefix,
        "machine_type": "e2-medium",
        "agent_pool_id": "1",
    }
    fields.update(overrides)
    return ImageDefinition(**fields)


@pytest.fixture
def make_image() -> Callable[..., ImageDefinition]:
    """Factory for valid image definitions keyed by name prefix."""
    return _make_image


@pytest.fixture
def two_images() -> ImageCollection:
    """Collection with prefixes 'a1' and 'b2'."""
    return ImageCollection([_make_image("a1"), _make_image("b2")])


@pytest.fixture
def empty_store() -> InMemoryImageStore:
    """Store with nothing persisted."""
    return InMemoryImageStore()
