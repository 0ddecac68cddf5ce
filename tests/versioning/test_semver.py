"""Tests for semantic version parsing and bumping."""

import pytest

from apibump.versioning.classify import BumpKind
from apibump.versioning.semver import SemanticVersion, next_version


class TestSemanticVersionParse:
    """Parsing tests."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("0.0.0", (0, 0, 0)),
            ("1.2.3", (1, 2, 3)),
            ("10.20.30", (10, 20, 30)),
            ("01.002.0003", (1, 2, 3)),
            ("123456789012345678901234567890.0.0", (123456789012345678901234567890, 0, 0)),
        ],
    )
    def test_given_version_core_when_parsed_then_components(
        self, tag: str, expected: tuple[int, int, int]
    ) -> None:
        """Plain cores parse to integers, leading zeros and big numbers included."""
        version = SemanticVersion.parse(tag)
        assert version is not None
        assert version.as_tuple() == expected

    @pytest.mark.parametrize(
        "tag",
        [
            "",
            "v1.2.3",
            "1.2",
            "1.2.3.4",
            "1.2.3-rc.1",
            "1.2.3+build",
            " 1.2.3",
            "1.2.3\n",
            "a.b.c",
            "1.-2.3",
            "１.２.３",
        ],
    )
    def test_given_non_core_when_parsed_then_none(self, tag: str) -> None:
        """Anything but a full ASCII MAJOR.MINOR.PATCH is unparseable."""
        assert SemanticVersion.parse(tag) is None

    def test_given_negative_component_when_constructed_then_raises(self) -> None:
        """Components are non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            SemanticVersion(1, -1, 0)


class TestSemanticVersionBump:
    """Bump arithmetic tests."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (BumpKind.MAJOR, "2.0.0"),
            (BumpKind.MINOR, "1.3.0"),
            (BumpKind.PATCH, "1.2.4"),
        ],
    )
    def test_given_kind_when_bumped_then_lower_components_reset(
        self, kind: BumpKind, expected: str
    ) -> None:
        """Major resets minor and patch; minor resets patch."""
        assert str(SemanticVersion(1, 2, 3).bump(kind)) == expected

    def test_given_leading_zeros_when_bumped_then_canonical_output(self) -> None:
        """Output drops leading zeros."""
        version = SemanticVersion.parse("01.02.03")
        assert version is not None
        assert str(version.bump(BumpKind.PATCH)) == "1.2.4"

    def test_versions_order_numerically(self) -> None:
        assert SemanticVersion(1, 10, 0) > SemanticVersion(1, 9, 9)


class TestNextVersion:
    """next_version() tests."""

    @pytest.mark.parametrize(
        ("tag", "has_removals", "has_additions", "expected"),
        [
            ("1.2.3", False, False, "1.2.4"),
            ("1.2.3", False, True, "1.3.0"),
            ("1.2.3", True, False, "2.0.0"),
            ("1.2.3", True, True, "2.0.0"),
            ("0.9.9", False, True, "0.10.0"),
            ("9.9.9", True, False, "10.0.0"),
        ],
    )
    def test_given_flags_when_next_version_then_bumped(
        self, tag: str, has_removals: bool, has_additions: bool, expected: str
    ) -> None:
        """Flags select the component to increment."""
        assert next_version(tag, has_removals, has_additions) == expected

    @pytest.mark.parametrize("tag", ["", "v1.2.3", "release-2024", "1.2"])
    def test_given_unparseable_tag_when_next_version_then_echoed(self, tag: str) -> None:
        """Unparseable tags come back unchanged whatever the flags."""
        assert next_version(tag, True, True) == tag
        assert next_version(tag, False, False) == tag
