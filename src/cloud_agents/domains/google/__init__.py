"""Google domain - Google Compute client factory."""

from cloud_agents.domains.google.client import GoogleCloudClient
from cloud_agents.domains.google.connector import GoogleApiConnector
from cloud_agents.domains.google.factory import GoogleCloudClientFactory

__all__ = [
    "GoogleApiConnector",
    "GoogleCloudClient",
    "GoogleCloudClientFactory",
]
