"""
Tests for the AccessGrant entity.
"""

import dataclasses

import pytest

from folder_files_fetch.entities.grant import AccessGrant


class TestAccessGrant:
    """Test cases for AccessGrant."""

    def test_defaults(self):
        """Test default permission flags."""
        grant = AccessGrant("content://tree/x")

        assert grant.is_read_permission is True
        assert grant.is_write_permission is False
        assert grant.persisted_time == 0

    def test_is_immutable(self):
        """Test that grants cannot be modified by the core."""
        grant = AccessGrant("content://tree/x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            grant.root_uri = "content://tree/y"  # type: ignore[misc]

    def test_str_representation(self):
        """Test string representation of AccessGrant."""
        assert str(AccessGrant("content://tree/x")) == "AccessGrant(root_uri='content://tree/x')"
