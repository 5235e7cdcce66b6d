"""
Use case for fetching the file locators of a requested folder.
"""

import logging
from concurrent.futures import Executor, Future
from typing import Optional

from folder_files_fetch.api.schemas import FetchFileUriListRequest
from folder_files_fetch.ports.files.root_resolver_port import RootResolverPort
from folder_files_fetch.use_cases.files.list_sorted_files import ListSortedFilesUseCase


class FetchFileUriListUseCase:
    """Use case that resolves a folder, then lists and sorts its entries."""

    def __init__(
        self,
        root_resolver: RootResolverPort,
        list_sorted_files: ListSortedFilesUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            root_resolver: Resolves the requested folder to a directory handle
            list_sorted_files: Enumerates and orders the handle's children
            logger: Logger instance to use for logging
        """
        self._root_resolver = root_resolver
        self._list_sorted_files = list_sorted_files
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, request: FetchFileUriListRequest) -> list[str]:
        """
        Fetch the locators of the files in the requested folder.

        Args:
            request: Folder path and sort options

        Returns:
            List of locators; empty if the folder is not found or anything fails
        """
        try:
            self._logger.info(f"Looking for path: {request.folder_path}")
            root = self._root_resolver.execute(request.folder_path)
            uris = self._list_sorted_files.execute(root, request.sort_spec())
            self._logger.info(f"Found {len(uris)} files in directory")
            return uris
        except Exception as e:
            self._logger.error(f"Error fetching files: {e}")
            return []

    def execute_async(
        self, request: FetchFileUriListRequest, executor: Executor
    ) -> "Future[list[str]]":
        """
        Run :meth:`execute` on ``executor``.

        Returns:
            A future that completes exactly once with the locator list
        """
        return executor.submit(self.execute, request)
