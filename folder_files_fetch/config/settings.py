"""
Configuration settings for the application.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from folder_files_fetch.exceptions import ConfigurationError
from folder_files_fetch.use_cases.files.list_sorted_files import DEFAULT_MAX_WORKERS

# Load environment variables from .env file
_ = load_dotenv()

ACCESS_MODE_SCOPED = "scoped"
ACCESS_MODE_LEGACY = "legacy"
ACCESS_MODES = (ACCESS_MODE_SCOPED, ACCESS_MODE_LEGACY)


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.access_mode: str = self._get_choice_env(
            "FOLDER_FILES_FETCH_ACCESS_MODE", ACCESS_MODE_SCOPED, ACCESS_MODES
        )
        self.storage_root: str = self._get_path_env(
            "FOLDER_FILES_FETCH_STORAGE_ROOT", str(Path.home())
        )
        self.grants_file: str = self._get_path_env(
            "FOLDER_FILES_FETCH_GRANTS_FILE",
            str(Path.home() / ".folder_files_fetch" / "grants.json"),
        )
        self.max_workers: int = self._get_positive_int_env(
            "FOLDER_FILES_FETCH_MAX_WORKERS", DEFAULT_MAX_WORKERS
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_choice_env(self, key: str, default: str, choices: tuple[str, ...]) -> str:
        """Get an environment variable restricted to a fixed set of values."""
        value = self._get_env(key, default).strip().lower()
        if value not in choices:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(choices)}, got '{value}'"
            )
        return value

    def _get_path_env(self, key: str, default: str) -> str:
        """Get a path environment variable, expanded to an absolute path."""
        value = self._get_env(key, default).strip() or default
        return os.path.abspath(os.path.expanduser(value))

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a strictly positive integer environment variable."""
        raw = self._get_env(key, str(default)).strip()
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got '{raw}'"
            )
        if value < 1:
            raise ConfigurationError(
                f"Environment variable {key} must be positive, got {value}"
            )
        return value


# Global settings instance
settings = Settings()
