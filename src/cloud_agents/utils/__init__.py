"""Utility functions and helpers for cloud agent images."""

from cloud_agents.utils.errors import (
    CatalogFetchError,
    CloudError,
    ConfigurationError,
    EditorStateError,
    ImageDataError,
    ValidationError,
)
from cloud_agents.utils.observable import Observable

__all__ = [
    # Errors
    "CloudError",
    "ConfigurationError",
    "ValidationError",
    "CatalogFetchError",
    "ImageDataError",
    "EditorStateError",
    # Reactive values
    "Observable",
]
