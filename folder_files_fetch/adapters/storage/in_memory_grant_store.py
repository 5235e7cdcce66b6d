"""
In-memory grant store adapter.
"""

from typing import Iterable, Optional

from typing_extensions import override

from folder_files_fetch.entities.grant import AccessGrant
from folder_files_fetch.ports.storage.grant_store_port import GrantStorePort


class InMemoryGrantStore(GrantStorePort):
    """Grant store backed by a list supplied by the embedding platform."""

    def __init__(self, grants: Optional[Iterable[AccessGrant]] = None):
        self._grants: list[AccessGrant] = list(grants or [])

    def replace(self, grants: Iterable[AccessGrant]) -> None:
        """Swap in a refreshed set of grants from the platform."""
        self._grants = list(grants)

    @override
    def persisted_grants(self) -> list[AccessGrant]:
        # Callers get a snapshot so a concurrent refresh cannot change it.
        return list(self._grants)
