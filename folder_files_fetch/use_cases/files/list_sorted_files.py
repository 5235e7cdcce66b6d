"""
Use case for listing a directory handle's children, optionally sorted.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, TypeVar

from folder_files_fetch.entities.sort import SortBy, SortSpec
from folder_files_fetch.ports.storage.document_tree_port import DocumentNode

K = TypeVar("K", str, int)

DEFAULT_MAX_WORKERS = 8


class ListSortedFilesUseCase:
    """
    Use case that enumerates a directory and orders its entries.

    Listing is fail-soft: a missing handle, an enumeration error or any other
    unexpected condition yields an empty list rather than an exception.
    Metadata is only read when a sort is actually requested.
    """

    def __init__(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            max_workers: Upper bound on concurrent metadata lookups
            logger: Logger instance to use for logging
        """
        self._max_workers = max_workers
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, root: Optional[DocumentNode], spec: SortSpec) -> list[str]:
        """
        List the direct children of ``root`` as locators.

        Args:
            root: Directory handle to enumerate, or None
            spec: Requested sort direction and field

        Returns:
            Child locators, in enumeration order when ``spec`` is inactive
            and otherwise stably sorted on the requested field
        """
        if root is None:
            return []

        try:
            children = self._list_children(root)
            if children is None:
                return []

            self._logger.debug(
                f"SortType {spec.sort_type.value} and SortBy {spec.sort_by.value}"
            )

            if not spec.is_active:
                return [child.locator() for child in children]

            return [child.locator() for child in self._sort(children, spec)]
        except Exception as e:
            self._logger.error(f"Error processing files: {e}")
            return []

    def _list_children(self, root: DocumentNode) -> Optional[list[DocumentNode]]:
        try:
            entries = root.list_children()
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            return None
        return [entry for entry in entries if entry is not None]

    def _sort(self, children: list[DocumentNode], spec: SortSpec) -> list[DocumentNode]:
        if spec.sort_by is SortBy.NAME:
            keys = self._fetch_keys(children, self._name_of)
        else:
            keys = self._fetch_keys(children, self._modified_of)

        pairs = sorted(
            zip(children, keys), key=lambda pair: pair[1], reverse=spec.descending
        )
        return [child for child, _ in pairs]

    def _fetch_keys(
        self, children: list[DocumentNode], lookup: Callable[[DocumentNode], K]
    ) -> list[K]:
        """Run ``lookup`` for every child concurrently and wait for all of them."""
        if not children:
            return []
        workers = min(self._max_workers, len(children))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields results in input order, one slot per child
            return list(executor.map(lookup, children))

    def _name_of(self, child: DocumentNode) -> str:
        try:
            return child.display_name() or ""
        except Exception as e:
            self._logger.warning(f"Error getting file name: {e}")
            return ""

    def _modified_of(self, child: DocumentNode) -> int:
        try:
            return child.last_modified() or 0
        except Exception as e:
            self._logger.warning(f"Error getting last modified time: {e}")
            return 0
