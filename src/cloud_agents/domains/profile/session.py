"""Editing session for one cloud profile's settings.

Ties the credentials field to catalog refreshes and gives the image editor
the choice lists it offers. A session is single-user; at most one image is
open in its editor at a time.
"""

from __future__ import annotations

import logging

from cloud_agents.domains.catalog.client import CatalogClient
from cloud_agents.domains.images.editor import ConfirmCallback, ImageEditor
from cloud_agents.domains.images.store import ImageStore
from cloud_agents.utils.observable import Observable

logger = logging.getLogger(__name__)


class Credentials:
    """Credentials entered for a profile."""

    def __init__(self, access_key: str | None = None) -> None:
        self.access_key: Observable[str | None] = Observable(access_key)

    @property
    def is_valid(self) -> bool:
        return bool(self.access_key.value)


class ProfileSession:
    """Profile settings being edited, with the catalog that feeds them."""

    def __init__(
        self,
        store: ImageStore,
        catalog: CatalogClient,
        confirm: ConfirmCallback | None = None,
        credentials: Credentials | None = None,
    ) -> None:
        self.credentials = credentials or Credentials()
        self.catalog = catalog
        self.editor = ImageEditor(store, confirm)
        self._started = False
        self.credentials.access_key.subscribe(self._on_access_key_changed)

    def start(self) -> None:
        """Begin the session's background loading.

        Agent pools are loaded once regardless of credentials; resources are
        loaded right away if an access key is already present. Must be called
        from a running event loop.
        """
        if self._started:
            return
        self._started = True
        self.catalog.start_refresh_agent_pools()
        self.catalog.start_refresh_resources(self.credentials.access_key.value)

    def set_access_key(self, access_key: str | None) -> None:
        self.credentials.access_key.set(access_key)

    def _on_access_key_changed(self, access_key: str | None, previous: str | None) -> None:  # noqa: ARG002
        if not access_key:
            return
        if not self._started:
            logger.debug("Access key changed before session start, deferring catalog refresh")
            return
        logger.debug("Access key changed, refreshing catalog")
        self.catalog.start_refresh_resources(access_key)
