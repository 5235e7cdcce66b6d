"""
Tests for the sort entities.
"""

import pytest

from folder_files_fetch.entities.sort import SortBy, SortSpec, SortType


class TestSortEnums:
    """Test cases for SortType and SortBy parsing."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("asc", SortType.ASC),
            ("DESC", SortType.DESC),
            (" none ", SortType.NONE),
            (None, SortType.NONE),
            ("", SortType.NONE),
            ("sideways", SortType.NONE),
            (SortType.DESC, SortType.DESC),
        ],
    )
    def test_sort_type_parse(self, raw, expected):
        """Test that raw values map to a SortType, defaulting to none."""
        assert SortType.parse(raw) is expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("name", SortBy.NAME),
            ("Date", SortBy.DATE),
            (None, SortBy.NONE),
            ("size", SortBy.NONE),
        ],
    )
    def test_sort_by_parse(self, raw, expected):
        """Test that raw values map to a SortBy, defaulting to none."""
        assert SortBy.parse(raw) is expected

    def test_values_are_wire_names(self):
        """Test that enum values are the lowercase names callers send."""
        assert [t.value for t in SortType] == ["none", "asc", "desc"]
        assert [b.value for b in SortBy] == ["none", "name", "date"]


class TestSortSpec:
    """Test cases for SortSpec."""

    def test_default_is_inactive(self):
        """Test that the default spec requests no sorting."""
        assert SortSpec().is_active is False

    @pytest.mark.parametrize(
        "sort_type, sort_by",
        [
            (SortType.NONE, SortBy.NAME),
            (SortType.ASC, SortBy.NONE),
            (SortType.NONE, SortBy.NONE),
        ],
    )
    def test_inactive_when_either_part_is_none(self, sort_type, sort_by):
        """Test that a missing direction or field disables sorting."""
        assert SortSpec(sort_type, sort_by).is_active is False

    def test_active_and_descending(self):
        """Test an active descending spec."""
        spec = SortSpec.of("desc", "date")

        assert spec.is_active is True
        assert spec.descending is True
        assert spec.sort_by is SortBy.DATE

    def test_of_with_unknown_values(self):
        """Test that SortSpec.of maps unknown values to none."""
        assert SortSpec.of("up", "colour") == SortSpec()
