"""Profile domain - settings editing session."""

from cloud_agents.domains.profile.session import Credentials, ProfileSession

__all__ = [
    "Credentials",
    "ProfileSession",
]
