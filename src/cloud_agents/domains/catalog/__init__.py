"""Catalog domain - provider resource choice lists."""

from cloud_agents.domains.catalog.client import CatalogClient
from cloud_agents.domains.catalog.models import (
    CatalogItem,
    ResourceCatalog,
    ResourceKind,
)

__all__ = [
    "CatalogClient",
    "CatalogItem",
    "ResourceCatalog",
    "ResourceKind",
]
