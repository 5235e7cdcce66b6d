"""
Document tree port interfaces: permission-scoped directory enumeration.
"""

from abc import ABC, abstractmethod
from typing import Optional


class DocumentNode(ABC):
    """
    One file or directory reachable through an access grant.

    A node for which ``is_directory()`` is true acts as a directory handle.
    Metadata accessors may raise independently of the node's existence.
    """

    @abstractmethod
    def locator(self) -> str:
        """Return the string that identifies this node to the caller."""
        pass

    @abstractmethod
    def display_name(self) -> Optional[str]:
        """Return the display name, or None when it cannot be determined."""
        pass

    @abstractmethod
    def last_modified(self) -> int:
        """Return the last-modified timestamp in milliseconds, 0 if unknown."""
        pass

    @abstractmethod
    def is_directory(self) -> bool:
        pass

    @abstractmethod
    def list_children(self) -> list[Optional["DocumentNode"]]:
        """
        List the direct children of this node.

        Returns:
            Child nodes in enumeration order; unresolvable children are None

        Raises:
            FileRepositoryError: If the directory cannot be enumerated
        """
        pass


class DocumentTreePort(ABC):
    """Port interface for opening a document tree from a grant's root URI."""

    @abstractmethod
    def from_tree_uri(self, tree_uri: str) -> Optional[DocumentNode]:
        """
        Build a directory handle for the tree rooted at ``tree_uri``.

        Args:
            tree_uri: Root URI carried by an access grant

        Returns:
            A directory handle, or None if the URI is not understood
        """
        pass

    @abstractmethod
    def from_directory(
        self, path: str, files_only: bool = False
    ) -> Optional[DocumentNode]:
        """
        Build a directory handle for a plain filesystem directory.

        Args:
            path: Directory path
            files_only: If True, the handle lists regular files only

        Returns:
            A directory handle, or None if ``path`` is not a directory
        """
        pass
