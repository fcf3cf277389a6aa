"""Images domain - agent image definitions and their editor."""

from cloud_agents.domains.images.codec import decode, encode
from cloud_agents.domains.images.editor import EditorState, ImageEditor
from cloud_agents.domains.images.models import (
    AGENT_POOL_ID_FIELD,
    SOURCE_ID_FIELD,
    SOURCE_IMAGES_JSON,
    ImageCollection,
    ImageDefinition,
)
from cloud_agents.domains.images.store import (
    ImageStore,
    InMemoryImageStore,
    ParametersImageStore,
)
from cloud_agents.domains.images.validation import ensure_valid, validate_image

__all__ = [
    "AGENT_POOL_ID_FIELD",
    "SOURCE_ID_FIELD",
    "SOURCE_IMAGES_JSON",
    "EditorState",
    "ImageCollection",
    "ImageDefinition",
    "ImageEditor",
    "ImageStore",
    "InMemoryImageStore",
    "ParametersImageStore",
    "decode",
    "encode",
    "ensure_valid",
    "validate_image",
]
