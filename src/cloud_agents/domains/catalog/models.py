"""Pydantic models for the remote resource catalog."""

from enum import Enum

from pydantic import BaseModel, Field


class ResourceKind(str, Enum):
    """Resource kinds served by the plugin resource endpoint.

    Values are the ``resource`` query parameter names; ``container`` and
    ``item`` give the element names used for that kind in responses.
    """

    ZONES = "zones"
    NETWORKS = "networks"
    MACHINE_TYPES = "machineTypes"
    IMAGES = "images"
    AGENT_POOLS = "agentPools"

    @property
    def container(self) -> str:
        return self.value

    @property
    def item(self) -> str:
        return self.value[:-1]


# Kinds that need credentials and refresh together
CREDENTIALED_KINDS = (
    ResourceKind.ZONES,
    ResourceKind.NETWORKS,
    ResourceKind.MACHINE_TYPES,
    ResourceKind.IMAGES,
)


class CatalogItem(BaseModel):
    """One selectable choice offered by the provider."""

    id: str = Field(..., description="Provider identifier")
    label: str = Field(..., description="Display label")


class ResourceCatalog(BaseModel):
    """Provider resources needed to fill in an image definition."""

    zones: list[CatalogItem] = Field(default_factory=list, description="Compute zones")
    networks: list[CatalogItem] = Field(default_factory=list, description="Networks")
    machine_types: list[CatalogItem] = Field(default_factory=list, description="Machine types")
    source_images: list[CatalogItem] = Field(default_factory=list, description="Base images")
