"""Tests for catalog response parsing."""

import pytest

from cloud_agents.domains.catalog.models import CatalogItem, ResourceKind
from cloud_agents.domains.catalog.parser import (
    UNKNOWN_ERROR,
    get_errors,
    get_items,
    parse_document,
)
from cloud_agents.utils.errors import CatalogFetchError


class TestResourceKind:
    """Test resource kind element names."""

    @pytest.mark.parametrize(
        "kind,container,item",
        [
            (ResourceKind.ZONES, "zones", "zone"),
            (ResourceKind.NETWORKS, "networks", "network"),
            (ResourceKind.MACHINE_TYPES, "machineTypes", "machineType"),
            (ResourceKind.IMAGES, "images", "image"),
            (ResourceKind.AGENT_POOLS, "agentPools", "agentPool"),
        ],
    )
    def test_element_names(self, kind: ResourceKind, container: str, item: str) -> None:
        """Test container and item element names per kind."""
        assert kind.container == container
        assert kind.item == item


class TestParseDocument:
    """Test parse_document."""

    def test_malformed(self) -> None:
        """Test a body that is not XML is rejected."""
        with pytest.raises(CatalogFetchError) as exc_info:
            parse_document("<response><zones>")

        assert "Malformed response" in str(exc_info.value)


class TestGetItems:
    """Test get_items."""

    def test_items_in_document_order(self, resources_xml: str) -> None:
        """Test ids and labels are read in order."""
        root = parse_document(resources_xml)

        assert get_items(root, ResourceKind.ZONES) == [
            CatalogItem(id="us-east1-b", label="us-east1-b"),
            CatalogItem(id="europe-west1-b", label="europe-west1-b"),
        ]

    def test_label_is_stripped(self, resources_xml: str) -> None:
        """Test surrounding whitespace is removed from labels."""
        root = parse_document(resources_xml)

        images = get_items(root, ResourceKind.IMAGES)

        assert images == [CatalogItem(id="ubuntu-2004-focal-v20230101", label="Ubuntu 20.04 LTS")]

    def test_missing_container(self, agent_pools_xml: str) -> None:
        """Test a kind absent from the response yields nothing."""
        root = parse_document(agent_pools_xml)

        assert get_items(root, ResourceKind.NETWORKS) == []

    def test_empty_container(self, errors_xml: str) -> None:
        """Test an empty container yields nothing."""
        assert get_items(parse_document(errors_xml), ResourceKind.ZONES) == []

    def test_missing_id(self) -> None:
        """Test an item without an id attribute gets an empty id."""
        root = parse_document("<response><networks><network>x</network></networks></response>")

        assert get_items(root, ResourceKind.NETWORKS) == [CatalogItem(id="", label="x")]

    def test_container_as_root(self) -> None:
        """Test a bare container document is read."""
        root = parse_document('<agentPools><agentPool id="1">Pool</agentPool></agentPools>')

        assert get_items(root, ResourceKind.AGENT_POOLS) == [CatalogItem(id="1", label="Pool")]


class TestGetErrors:
    """Test get_errors."""

    def test_no_errors(self, resources_xml: str) -> None:
        """Test documents without errors report None."""
        assert get_errors(parse_document(resources_xml)) is None

    def test_errors_joined(self, errors_xml: str) -> None:
        """Test every error message is reported, one per line."""
        assert get_errors(parse_document(errors_xml)) == "Invalid credentials\nQuota exceeded"

    def test_empty_errors_container(self) -> None:
        """Test an errors container without entries is not a failure."""
        assert get_errors(parse_document("<response><errors/></response>")) is None

    def test_error_without_text(self) -> None:
        """Test an error element without text still reports a failure."""
        root = parse_document('<response><errors><error id="x"/></errors></response>')

        assert get_errors(root) == UNKNOWN_ERROR
