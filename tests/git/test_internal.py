"""Tests for git internal helpers."""

from __future__ import annotations

import pytest

from apibump.git._internal import (
    extract_tag_name,
    matches_tag_pattern,
    version_sort_key,
)


class TestTagRefs:
    def test_extract_tag_name(self) -> None:
        assert extract_tag_name("refs/tags/1.2.3") == "1.2.3"
        assert extract_tag_name("refs/tags/release/1.0.0") == "release/1.0.0"

    def test_extract_non_tag(self) -> None:
        assert extract_tag_name("refs/heads/main") is None


class TestMatchesTagPattern:
    """Default release tag glob."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("1.2.3", True),
            ("10.0.12", True),
            ("1.2.3-rc.1", True),
            ("1.2", False),
            ("v1.2.3", False),
            ("nightly", False),
        ],
    )
    def test_default_pattern(self, name: str, expected: bool) -> None:
        """Anything starting with digit.digit.digit is selected, even with suffixes."""
        assert matches_tag_pattern(name, "[0-9]*.[0-9]*.[0-9]*") is expected

    def test_case_sensitive(self) -> None:
        assert not matches_tag_pattern("V1.0.0", "v*")


class TestVersionSortKey:
    """Ordering approximating git's version:refname sort."""

    def test_numeric_components(self) -> None:
        names = ["1.9.0", "1.10.0", "1.2.3", "2.0.0", "1.2.10"]
        assert sorted(names, key=version_sort_key) == [
            "1.2.3",
            "1.2.10",
            "1.9.0",
            "1.10.0",
            "2.0.0",
        ]

    def test_suffix_sorts_after_plain(self) -> None:
        """A longer key with equal prefix sorts later."""
        assert version_sort_key("1.2.3") < version_sort_key("1.2.3-rc.1")
