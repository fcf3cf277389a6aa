"""Tests for image definition field rules."""

import pytest

from cloud_agents.domains.images.models import ImageCollection, ImageDefinition
from cloud_agents.domains.images.validation import (
    MAX_INSTANCES_MESSAGE,
    MAX_LENGTH_MESSAGE,
    PATTERN_MESSAGE,
    REQUIRED_MESSAGE,
    UNIQUE_MESSAGE,
    ensure_valid,
    validate_image,
)
from cloud_agents.utils.errors import ValidationError


class TestValidateImage:
    """Test validate_image rules."""

    def test_valid_image_has_no_messages(self, make_image) -> None:
        """Test a complete definition passes."""
        assert validate_image(make_image("web-1"), ImageCollection()) == {}

    def test_blank_image_reports_every_required_field(self) -> None:
        """Test all missing fields are reported at once."""
        messages = validate_image(ImageDefinition(), ImageCollection())

        assert set(messages) == {
            "sourceImage",
            "zone",
            "network",
            "machineType",
            "agent_pool_id",
            "maxInstances",
            "source-id",
        }
        assert all(m == [REQUIRED_MESSAGE] for m in messages.values())

    def test_whitespace_counts_as_missing(self, make_image) -> None:
        """Test whitespace-only text fails the required rule."""
        messages = validate_image(make_image("web-1", zone="  "), ImageCollection())

        assert messages == {"zone": [REQUIRED_MESSAGE]}

    def test_profile_id_not_required(self, make_image) -> None:
        """Test profile id may be absent."""
        assert validate_image(make_image("web-1", profile_id=None), ImageCollection()) == {}

    @pytest.mark.parametrize("count", [0, -1, True, "3"])
    def test_max_instances_below_one_or_not_integer(self, make_image, count) -> None:
        """Test max instances must be an integer of at least 1."""
        image = make_image("web-1")
        image.max_instances = count

        messages = validate_image(image, ImageCollection())

        assert messages == {"maxInstances": [MAX_INSTANCES_MESSAGE]}

    def test_name_prefix_at_max_length(self, make_image) -> None:
        """Test a 12 character prefix is accepted."""
        assert validate_image(make_image("a" * 12), ImageCollection()) == {}

    def test_name_prefix_too_long(self, make_image) -> None:
        """Test a 13 character prefix is rejected."""
        messages = validate_image(make_image("a" * 13), ImageCollection())

        assert messages == {"source-id": [MAX_LENGTH_MESSAGE]}

    @pytest.mark.parametrize("prefix", ["1abc", "-abc", "web 1", "web.1", "wéb"])
    def test_name_prefix_pattern(self, make_image, prefix: str) -> None:
        """Test prefixes must start with a letter and use allowed characters."""
        messages = validate_image(make_image(prefix), ImageCollection())

        assert PATTERN_MESSAGE in messages["source-id"]

    @pytest.mark.parametrize("prefix", ["Web_1", "a", "build-agent"])
    def test_name_prefix_pattern_accepts(self, make_image, prefix: str) -> None:
        """Test allowed prefixes, case-insensitive."""
        assert validate_image(make_image(prefix), ImageCollection()) == {}

    def test_duplicate_prefix(self, make_image, two_images: ImageCollection) -> None:
        """Test a new definition cannot reuse an existing prefix."""
        messages = validate_image(make_image("a1"), two_images)

        assert messages == {"source-id": [UNIQUE_MESSAGE]}

    def test_edited_member_keeps_own_prefix(self, two_images: ImageCollection) -> None:
        """Test the member being edited is excluded from the uniqueness check."""
        original = two_images[0]
        working = original.model_copy()
        working.max_instances = 5

        assert validate_image(working, two_images, original) == {}

    def test_edit_into_other_members_prefix(self, two_images: ImageCollection) -> None:
        """Test an edit cannot take another member's prefix."""
        original = two_images[0]
        working = original.model_copy()
        working.name_prefix = "b2"

        messages = validate_image(working, two_images, original)

        assert messages == {"source-id": [UNIQUE_MESSAGE]}

    def test_duplicate_ignores_member_whitespace(self, make_image, two_images: ImageCollection) -> None:
        """Test a member prefix with stray whitespace still counts as taken."""
        two_images[0].name_prefix = " a1 "

        messages = validate_image(make_image("a1"), two_images)

        assert messages == {"source-id": [UNIQUE_MESSAGE]}

    def test_multiple_prefix_violations(self, make_image) -> None:
        """Test a prefix can break several rules at once."""
        messages = validate_image(make_image("1" * 13), ImageCollection())

        assert messages["source-id"] == [MAX_LENGTH_MESSAGE, PATTERN_MESSAGE]


class TestEnsureValid:
    """Test ensure_valid."""

    def test_valid_passes(self, make_image) -> None:
        """Test no exception for a valid definition."""
        ensure_valid(make_image("web-1"), ImageCollection())

    def test_invalid_raises_with_messages(self, make_image) -> None:
        """Test the exception carries the per-field messages."""
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid(make_image("web-1", network=None, max_instances=0), ImageCollection())

        assert exc_info.value.messages == {
            "network": [REQUIRED_MESSAGE],
            "maxInstances": [MAX_INSTANCES_MESSAGE],
        }
        assert "maxInstances, network" in str(exc_info.value)
