"""Google Compute API connector identity."""

from __future__ import annotations

import json

from cloud_agents.domains.google.constants import (
    TAG_DATA,
    TAG_PROFILE,
    TAG_SERVER,
    TAG_SOURCE,
)


class GoogleApiConnector:
    """Connection settings for calls made on behalf of one cloud profile.

    Instance calls themselves are made by the host's provider bindings; the
    connector carries the credentials and the server/profile identity those
    calls are tagged with.
    """

    def __init__(self, access_key: str, server_id: str = "", profile_id: str = "") -> None:
        self._access_key = access_key
        self.server_id = server_id
        self.profile_id = profile_id

    @property
    def access_key(self) -> str:
        return self._access_key

    def instance_tags(self, source_id: str, user_data: dict[str, str] | None = None) -> dict[str, str]:
        """Labels to stamp on an instance started for ``source_id``."""
        tags = {
            TAG_SERVER: self.server_id,
            TAG_PROFILE: self.profile_id,
            TAG_SOURCE: source_id,
        }
        if user_data:
            tags[TAG_DATA] = json.dumps(user_data, sort_keys=True)
        return tags

    def owns_instance(self, tags: dict[str, str]) -> bool:
        """Check whether an instance with ``tags`` belongs to this profile."""
        return (
            tags.get(TAG_SERVER) == self.server_id and tags.get(TAG_PROFILE) == self.profile_id
        )

    def __repr__(self) -> str:
        return (
            f"GoogleApiConnector(server_id={self.server_id!r}, profile_id={self.profile_id!r})"
        )
