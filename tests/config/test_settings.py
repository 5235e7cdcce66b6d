"""
Tests for the Settings configuration.
"""

import os
from pathlib import Path

import pytest

from folder_files_fetch.config.settings import ACCESS_MODE_LEGACY, ACCESS_MODE_SCOPED
from folder_files_fetch.exceptions import ConfigurationError
from folder_files_fetch.use_cases.files.list_sorted_files import DEFAULT_MAX_WORKERS


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, make_settings):
        """Test default values with no environment overrides."""
        settings = make_settings()

        assert settings.access_mode == ACCESS_MODE_SCOPED
        assert settings.storage_root == str(Path.home())
        assert settings.grants_file == str(Path.home() / ".folder_files_fetch" / "grants.json")
        assert settings.max_workers == DEFAULT_MAX_WORKERS == 8

    def test_overrides(self, make_settings, tmp_path):
        """Test values read from the environment."""
        settings = make_settings(
            FOLDER_FILES_FETCH_ACCESS_MODE="Legacy",
            FOLDER_FILES_FETCH_STORAGE_ROOT=str(tmp_path),
            FOLDER_FILES_FETCH_GRANTS_FILE=str(tmp_path / "g.json"),
            FOLDER_FILES_FETCH_MAX_WORKERS="3",
        )

        assert settings.access_mode == ACCESS_MODE_LEGACY
        assert settings.storage_root == str(tmp_path)
        assert settings.grants_file == str(tmp_path / "g.json")
        assert settings.max_workers == 3

    def test_relative_paths_become_absolute(self, make_settings):
        """Test that relative paths are made absolute."""
        settings = make_settings(FOLDER_FILES_FETCH_STORAGE_ROOT="storage")

        assert settings.storage_root == os.path.abspath("storage")

    def test_invalid_access_mode(self, make_settings):
        """Test that an unknown access mode is rejected."""
        with pytest.raises(ConfigurationError, match="FOLDER_FILES_FETCH_ACCESS_MODE"):
            make_settings(FOLDER_FILES_FETCH_ACCESS_MODE="raw")

    @pytest.mark.parametrize(
        "value, message", [("many", "must be an integer"), ("0", "must be positive")]
    )
    def test_invalid_max_workers(self, make_settings, value, message):
        """Test that a bad worker count is rejected."""
        with pytest.raises(ConfigurationError, match=message):
            make_settings(FOLDER_FILES_FETCH_MAX_WORKERS=value)
