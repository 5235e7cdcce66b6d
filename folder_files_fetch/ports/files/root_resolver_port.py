"""
Root resolver port: turns a requested folder into a directory handle.
"""

from typing import Optional, Protocol

from folder_files_fetch.ports.storage.document_tree_port import DocumentNode


class RootResolverPort(Protocol):
    """Port for resolving a requested folder path to a directory handle."""

    def execute(self, folder_path: str) -> Optional[DocumentNode]: ...
