"""Parsing of plugin resource endpoint responses.

A response is an XML document with one container per requested kind::

    <response>
      <zones>
        <zone id="us-east1-b">us-east1-b</zone>
      </zones>
      <errors>
        <error id="auth">Invalid credentials</error>
      </errors>
    </response>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from cloud_agents.domains.catalog.models import CatalogItem, ResourceKind
from cloud_agents.utils.errors import CatalogFetchError

UNKNOWN_ERROR = "Provider reported an error without details"


def parse_document(text: str) -> ET.Element:
    """Parse a response body.

    Raises:
        CatalogFetchError: If the body is not well-formed XML.
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise CatalogFetchError(f"Malformed response: {e}") from e


def _first(root: ET.Element, tag: str) -> ET.Element | None:
    # root.iter includes root itself, so a bare container document also works
    return next(root.iter(tag), None)


def get_errors(root: ET.Element) -> str | None:
    """Return the provider error text, or None if no error was reported."""
    container = _first(root, "errors")
    if container is None:
        return None
    errors = list(container.iter("error"))
    if not errors:
        return None
    texts = [(error.text or "").strip() for error in errors]
    return "\n".join(text for text in texts if text) or UNKNOWN_ERROR


def get_items(root: ET.Element, kind: ResourceKind) -> list[CatalogItem]:
    """Return the items of the first container for ``kind``.

    A missing container yields an empty list.
    """
    container = _first(root, kind.container)
    if container is None:
        return []
    return [
        CatalogItem(id=element.get("id", ""), label=(element.text or "").strip())
        for element in container.iter(kind.item)
        if element is not container
    ]
