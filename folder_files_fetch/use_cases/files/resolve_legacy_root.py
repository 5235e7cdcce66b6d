"""
Use case for resolving a folder by direct path, without access grants.

This is the storage model of platforms that predate scoped access: the
caller names a directory and the process reads it with broad storage
permission.
"""

import logging
import os
from typing import Optional

from folder_files_fetch.ports.storage.document_tree_port import (
    DocumentNode,
    DocumentTreePort,
)

FILE_URI_PREFIX = "file://"


class ResolveLegacyRootUseCase:
    """Use case that opens a folder by path and exposes its regular files."""

    def __init__(
        self,
        document_tree: DocumentTreePort,
        storage_root: str,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            document_tree: Opens directory handles for filesystem paths
            storage_root: Shared storage directory that relative paths start from
            logger: Logger instance to use for logging
        """
        self._document_tree = document_tree
        self._storage_root = storage_root
        self._logger = logger or logging.getLogger(__name__)

    def has_storage_access(self) -> bool:
        """Check that the shared storage root exists and is readable."""
        try:
            return os.path.isdir(self._storage_root) and os.access(
                self._storage_root, os.R_OK
            )
        except OSError as e:
            self._logger.warning(f"Error checking storage access: {e}")
            return False

    def _to_path(self, folder_path: str) -> Optional[str]:
        if not folder_path:
            return None
        if folder_path.startswith("/"):
            return folder_path
        if folder_path.startswith(FILE_URI_PREFIX):
            return folder_path[len(FILE_URI_PREFIX):]
        return os.path.join(self._storage_root, folder_path)

    def execute(self, folder_path: str) -> Optional[DocumentNode]:
        """
        Resolve ``folder_path`` to a files-only directory handle.

        Args:
            folder_path: Absolute path, ``file://`` path, or path relative
                to the storage root

        Returns:
            A directory handle, or None when storage is inaccessible or the
            path is not an existing directory
        """
        self._logger.debug(f"Using legacy storage access for path: {folder_path}")

        if not self.has_storage_access():
            self._logger.warning("Storage is not accessible for legacy access")
            return None

        path = self._to_path(folder_path)
        root = None
        if path is not None:
            try:
                root = self._document_tree.from_directory(path, files_only=True)
            except Exception as e:
                self._logger.error(f"Error opening directory {path}: {e}")

        if root is None:
            self._logger.warning(f"No accessible folder found for path: {folder_path}")
        return root
