"""
Local document tree adapter: serves granted trees from a directory on disk.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from urllib.parse import quote, unquote, urlparse

from typing_extensions import override

from folder_files_fetch.exceptions import FileRepositoryError
from folder_files_fetch.ports.storage.document_tree_port import (
    DocumentNode,
    DocumentTreePort,
)


def _child_document_id(document_id: str, name: str) -> str:
    # Volume roots look like "primary:" and take no separator.
    if not document_id or document_id.endswith((":", "/")):
        return f"{document_id}{name}"
    return f"{document_id}/{name}"


class LocalDocumentNode(DocumentNode):
    """
    A file or directory on local disk.

    Nodes opened from a ``content://`` tree carry the tree URI and their
    document id, and report document locators beneath that tree. Other nodes
    report ``file://`` URIs.
    """

    def __init__(
        self,
        path: Path,
        tree_uri: Optional[str] = None,
        document_id: Optional[str] = None,
        files_only: bool = False,
    ):
        self.path = path
        self._tree_uri = tree_uri
        self._document_id = document_id
        self._files_only = files_only

    @override
    def locator(self) -> str:
        if self._tree_uri is None or self._document_id is None:
            return self.path.absolute().as_uri()
        return f"{self._tree_uri}/document/{quote(self._document_id, safe='')}"

    @override
    def display_name(self) -> Optional[str]:
        return self.path.name or None

    @override
    def last_modified(self) -> int:
        return int(os.stat(self.path).st_mtime * 1000)

    @override
    def is_directory(self) -> bool:
        return self.path.is_dir()

    @override
    def list_children(self) -> list[Optional[DocumentNode]]:
        if not self.path.exists():
            raise FileRepositoryError(f"Directory does not exist: {self.path}")
        if not self.path.is_dir():
            raise FileRepositoryError(f"Path is not a directory: {self.path}")

        try:
            names = os.listdir(self.path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to list {self.path}: {e}")

        children: list[Optional[DocumentNode]] = []
        for name in names:
            child_path = self.path / name
            if not os.path.lexists(child_path):
                # Removed between listdir and here
                children.append(None)
                continue
            if self._files_only and not child_path.is_file():
                continue
            children.append(self._child(child_path, name))
        return children

    def _child(self, child_path: Path, name: str) -> "LocalDocumentNode":
        document_id = None
        if self._document_id is not None:
            document_id = _child_document_id(self._document_id, name)
        return LocalDocumentNode(
            child_path,
            tree_uri=self._tree_uri,
            document_id=document_id,
            files_only=self._files_only,
        )

    def __repr__(self) -> str:
        return f"LocalDocumentNode(path='{self.path}')"


class LocalDocumentTreeAdapter(DocumentTreePort):
    """Maps grant root URIs onto directories under a local storage root."""

    def __init__(self, storage_root: str, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            storage_root: Directory that ``content://`` document ids are relative to
            logger: Logger instance to use for logging
        """
        self._storage_root = Path(storage_root).absolute()
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    def storage_root(self) -> Path:
        return self._storage_root

    @override
    def from_tree_uri(self, tree_uri: str) -> Optional[DocumentNode]:
        parsed = urlparse(tree_uri)

        if parsed.scheme == "file":
            return LocalDocumentNode(Path(unquote(parsed.path)))

        if parsed.scheme == "content":
            return self._from_content_uri(tree_uri, parsed.netloc, parsed.path)

        self._logger.warning(f"Unsupported tree URI scheme: {tree_uri}")
        return None

    @override
    def from_directory(
        self, path: str, files_only: bool = False
    ) -> Optional[DocumentNode]:
        directory = Path(path)
        if not directory.is_dir():
            return None
        return LocalDocumentNode(directory, files_only=files_only)

    def _from_content_uri(
        self, tree_uri: str, authority: str, raw_path: str
    ) -> Optional[DocumentNode]:
        parts = [authority] + [s for s in raw_path.split("/") if s]
        if "tree" not in parts[:-1]:
            self._logger.warning(f"No tree document id in URI: {tree_uri}")
            return None

        document_id = unquote(parts[parts.index("tree") + 1])
        path = self._document_path(document_id)
        if path is None:
            self._logger.warning(
                f"Tree {tree_uri} resolves outside storage root {self._storage_root}"
            )
            return None

        return LocalDocumentNode(
            path, tree_uri=tree_uri.rstrip("/"), document_id=document_id
        )

    def _document_path(self, document_id: str) -> Optional[Path]:
        """Map a document id such as ``primary:Android/media`` to a local path."""
        relative = document_id.split(":", 1)[1] if ":" in document_id else document_id
        root = str(self._storage_root)
        target = os.path.abspath(os.path.join(root, relative.lstrip("/")))
        if os.path.commonpath([root, target]) != root:
            return None
        return Path(target)
