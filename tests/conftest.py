"""
Pytest configuration and shared fixtures.
"""

import os
from typing import Optional
from unittest.mock import MagicMock

import pytest

from folder_files_fetch.config.settings import Settings
from folder_files_fetch.ports.storage.document_tree_port import DocumentNode


class FakeDocumentNode(DocumentNode):
    """In-memory document node with controllable metadata failures."""

    def __init__(
        self,
        name: Optional[str] = None,
        modified: int = 0,
        children: Optional[list] = None,
        name_error: Optional[Exception] = None,
        modified_error: Optional[Exception] = None,
        list_error: Optional[Exception] = None,
        locator: Optional[str] = None,
    ):
        self.name = name
        self.modified = modified
        self.children = children
        self.name_error = name_error
        self.modified_error = modified_error
        self.list_error = list_error
        self._locator = locator or f"uri({name})"
        self.name_calls = 0
        self.modified_calls = 0

    def locator(self) -> str:
        return self._locator

    def display_name(self) -> Optional[str]:
        self.name_calls += 1
        if self.name_error is not None:
            raise self.name_error
        return self.name

    def last_modified(self) -> int:
        self.modified_calls += 1
        if self.modified_error is not None:
            raise self.modified_error
        return self.modified

    def is_directory(self) -> bool:
        return self.children is not None

    def list_children(self) -> list:
        if self.list_error is not None:
            raise self.list_error
        return list(self.children or [])


@pytest.fixture
def fake_node():
    """
    Factory for in-memory document nodes.

    Returns:
        The FakeDocumentNode class
    """
    return FakeDocumentNode


@pytest.fixture
def sample_directory(fake_node):
    """
    Directory handle holding b.jpg (t=200) then a.jpg (t=100).

    Returns:
        FakeDocumentNode acting as the directory
    """
    return fake_node(
        name="com.app",
        children=[fake_node("b.jpg", modified=200), fake_node("a.jpg", modified=100)],
    )


@pytest.fixture
def temp_storage(tmp_path):
    """
    Create a shared-storage tree for testing local adapters.

    Layout::

        Android/media/com.app/b.jpg   (mtime 200s)
        Android/media/com.app/a.jpg   (mtime 100s)
        Android/media/com.app/thumbs/

    Returns:
        Path to the storage root as a string
    """
    folder = tmp_path / "Android" / "media" / "com.app"
    folder.mkdir(parents=True)
    (folder / "thumbs").mkdir()

    for name, mtime in (("b.jpg", 200), ("a.jpg", 100)):
        path = folder / name
        _ = path.write_text(name)
        os.utime(path, (mtime, mtime))

    yield str(tmp_path)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def make_settings(monkeypatch):
    """
    Build Settings from a clean environment plus the given overrides.

    Returns:
        Function taking environment overrides and returning Settings
    """

    def _make(**env: str) -> Settings:
        for key in list(os.environ):
            if key.startswith("FOLDER_FILES_FETCH_"):
                monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Settings()

    return _make
