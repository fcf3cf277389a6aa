"""Shared models."""

from cloud_agents.models.common import AgentDescription, CloudErrorInfo

__all__ = [
    "AgentDescription",
    "CloudErrorInfo",
]
