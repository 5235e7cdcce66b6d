"""
Use case for resolving a requested folder to a granted directory handle.
"""

import logging
from typing import Iterable, Optional
from urllib.parse import unquote, urlparse

from folder_files_fetch.entities.grant import AccessGrant
from folder_files_fetch.ports.storage.document_tree_port import (
    DocumentNode,
    DocumentTreePort,
)
from folder_files_fetch.ports.storage.grant_store_port import GrantStorePort


def find_grant(fragment: str, grants: Iterable[AccessGrant]) -> Optional[AccessGrant]:
    """
    Return the first grant whose root URI contains ``fragment``.

    The fragment is tested against the URI text and against its decoded
    path, so both ``com.app`` and ``Android/media/com.app`` find
    ``content://.../tree/primary%3AAndroid%2Fmedia%2Fcom.app``. The match is a
    plain substring test: an empty fragment selects the first grant and
    overlapping URIs resolve to whichever comes first.
    """
    for grant in grants:
        if fragment in grant.root_uri or fragment in _decoded_path(grant.root_uri):
            return grant
    return None


def _decoded_path(uri: str) -> str:
    return unquote(urlparse(uri).path)


class ResolveRootUseCase:
    """Use case that picks a durable access grant and opens its tree."""

    def __init__(
        self,
        grant_store: GrantStorePort,
        document_tree: DocumentTreePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            grant_store: Source of persisted access grants
            document_tree: Opens directory handles from grant root URIs
            logger: Logger instance to use for logging
        """
        self._grant_store = grant_store
        self._document_tree = document_tree
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, folder_path: str) -> Optional[DocumentNode]:
        """
        Resolve ``folder_path`` against the currently persisted grants.

        Args:
            folder_path: Folder path fragment requested by the caller

        Returns:
            A directory handle, or None if nothing matches or the store fails
        """
        try:
            grants = self._grant_store.persisted_grants()
        except Exception as e:
            self._logger.error(f"Error reading persisted grants: {e}")
            return None

        self._logger.debug(
            f"Looking for path: {folder_path} from {len(grants)} persisted grants"
        )
        return self.resolve(folder_path, grants)

    def resolve(
        self, folder_path: str, grants: Iterable[AccessGrant]
    ) -> Optional[DocumentNode]:
        """
        Resolve ``folder_path`` against an explicit set of grants.

        Returns:
            A directory handle built from the first matching grant, or None
        """
        grant = find_grant(folder_path, grants)
        if grant is None:
            self._logger.debug(f"No grant matches path: {folder_path}")
            return None

        try:
            return self._document_tree.from_tree_uri(grant.root_uri)
        except Exception as e:
            self._logger.error(f"Error opening tree {grant.root_uri}: {e}")
            return None
