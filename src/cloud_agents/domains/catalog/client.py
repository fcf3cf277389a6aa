"""Remote catalog client for provider resource choice lists.

Refreshes never raise: failures are exposed through ``error`` and the
previous catalog stays in place. When refreshes overlap, only the response
to the most recently issued request is applied.
"""

from __future__ import annotations

import asyncio
import logging
import xml.etree.ElementTree as ET
from collections.abc import Coroutine, Iterable, Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from cloud_agents.domains.catalog.models import (
    CREDENTIALED_KINDS,
    CatalogItem,
    ResourceCatalog,
    ResourceKind,
)
from cloud_agents.domains.catalog.parser import get_errors, get_items, parse_document
from cloud_agents.domains.google.constants import ACCESS_KEY, PROPERTY_FORM_PREFIX
from cloud_agents.utils.errors import CatalogFetchError

logger = logging.getLogger(__name__)

ACCESS_KEY_FORM_FIELD = PROPERTY_FORM_PREFIX + ACCESS_KEY


class CatalogClient:
    """Client for the plugin resource endpoint."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient | None = None) -> None:
        """Initialize the client.

        Args:
            base_url: URL of the plugin resource endpoint.
            http_client: Client to send requests with. When omitted one is
                created on first use and closed by ``aclose``.
        """
        self._base_url = base_url
        self._http = http_client
        self._owns_http = http_client is None
        self._tasks: set[asyncio.Task[None]] = set()
        self._in_flight = 0
        self._resources_seq = 0
        self._agent_pools_seq = 0

        self.catalog = ResourceCatalog()
        self.agent_pools: list[CatalogItem] = []
        self.resources_error = ""
        self.agent_pools_error = ""

    @property
    def error(self) -> str:
        """Failure messages of the latest resource and agent pool refreshes."""
        return "\n".join(e for e in (self.resources_error, self.agent_pools_error) if e)

    @property
    def loading(self) -> bool:
        """Whether any refresh request is in flight."""
        return self._in_flight > 0

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this catalog client created it."""
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self._in_flight += 1
        try:
            yield
        finally:
            self._in_flight -= 1

    async def refresh_resources(self, access_key: str | None) -> None:
        """Reload zones, networks, machine types and source images.

        Does nothing when ``access_key`` is empty. All four lists are
        replaced together or not at all.
        """
        if not access_key:
            return

        self._resources_seq += 1
        seq = self._resources_seq

        with self._loading():
            try:
                root = await self._fetch(CREDENTIALED_KINDS, {ACCESS_KEY_FORM_FIELD: access_key})
            except CatalogFetchError as e:
                if seq == self._resources_seq:
                    self.resources_error = self._fail(str(e))
                return

            if seq != self._resources_seq:
                logger.debug(f"Discarding stale resource response #{seq}")
                return

            errors = get_errors(root)
            if errors is not None:
                self.resources_error = self._fail(errors)
                return

            catalog = ResourceCatalog(
                zones=get_items(root, ResourceKind.ZONES),
                networks=get_items(root, ResourceKind.NETWORKS),
                machine_types=get_items(root, ResourceKind.MACHINE_TYPES),
                source_images=get_items(root, ResourceKind.IMAGES),
            )
            self.resources_error = ""
            self.catalog = catalog
            logger.debug(
                f"Loaded {len(catalog.zones)} zones, {len(catalog.networks)} networks, "
                f"{len(catalog.machine_types)} machine types, "
                f"{len(catalog.source_images)} images"
            )

    async def refresh_agent_pools(self) -> None:
        """Reload the agent pools list. Needs no credentials."""
        self._agent_pools_seq += 1
        seq = self._agent_pools_seq

        with self._loading():
            try:
                root = await self._fetch((ResourceKind.AGENT_POOLS,))
            except CatalogFetchError as e:
                if seq == self._agent_pools_seq:
                    self.agent_pools_error = self._fail(str(e))
                return

            if seq != self._agent_pools_seq:
                logger.debug(f"Discarding stale agent pools response #{seq}")
                return

            errors = get_errors(root)
            if errors is not None:
                self.agent_pools_error = self._fail(errors)
                return

            self.agent_pools_error = ""
            self.agent_pools = get_items(root, ResourceKind.AGENT_POOLS)
            logger.debug(f"Loaded {len(self.agent_pools)} agent pools")

    def start_refresh_resources(self, access_key: str | None) -> asyncio.Task[None] | None:
        """Schedule ``refresh_resources`` on the running loop without waiting.

        Returns:
            The scheduled task, or None when ``access_key`` is empty.
        """
        if not access_key:
            return None
        return self._spawn(self.refresh_resources(access_key))

    def start_refresh_agent_pools(self) -> asyncio.Task[None]:
        """Schedule ``refresh_agent_pools`` on the running loop without waiting."""
        return self._spawn(self.refresh_agent_pools())

    async def wait(self) -> None:
        """Wait for every scheduled refresh to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _fail(self, message: str) -> str:
        logger.warning(f"Catalog refresh failed: {message}")
        return message

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient()
        return self._http

    async def _fetch(
        self,
        kinds: Iterable[ResourceKind],
        data: dict[str, str] | None = None,
    ) -> ET.Element:
        """POST a resource request and parse the response document.

        Raises:
            CatalogFetchError: On transport failure, HTTP error status or a
                malformed document.
        """
        params = [("resource", kind.value) for kind in kinds]
        try:
            response = await self._client().post(self._base_url, params=params, data=data)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise CatalogFetchError(f"Failed to load data: {e}") from e

        try:
            return parse_document(response.text)
        except CatalogFetchError as e:
            raise CatalogFetchError(f"Failed to load data: {e}") from e
