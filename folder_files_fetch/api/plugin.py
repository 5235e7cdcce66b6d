"""
In-process entry point for fetching folder file locators.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from folder_files_fetch.api.schemas import FetchFileUriListRequest
from folder_files_fetch.entities.sort import SortBy, SortType
from folder_files_fetch.use_cases.files.fetch_file_uris import FetchFileUriListUseCase


def _clean_uris(items: Any) -> list[str]:
    """Drop null and empty items and coerce the rest to strings."""
    if not isinstance(items, list):
        return []
    return [str(item) for item in items if item is not None and str(item)]


class FolderFilesFetch:
    """
    Fetch the files of a user-granted folder off the calling thread.

    Each call returns a future that completes exactly once with a list of
    locators (never None; empty on any failure). Callers needing a timeout
    pass one to ``Future.result`` and ignore a late result.
    """

    def __init__(
        self,
        use_case: Optional[FetchFileUriListUseCase] = None,
        max_workers: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the facade.

        Args:
            use_case: Pipeline to run; defaults to the one from the global container
            max_workers: Number of requests that may run at once
            logger: Logger instance to use for logging
        """
        if use_case is None:
            from folder_files_fetch.container import container

            use_case = container.get_fetch_file_uri_list_use_case()
        self._use_case = use_case
        self._logger = logger or logging.getLogger(__name__)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="folder-files-fetch"
        )

    def fetch_file_uri_list(
        self,
        folder_path: str,
        sort_type: SortType | str = SortType.NONE,
        sort_by: SortBy | str = SortBy.NONE,
        callback: Optional[Callable[[list[str]], None]] = None,
    ) -> "Future[list[str]]":
        """
        Request the locators of the files in ``folder_path``.

        Args:
            folder_path: Folder path fragment matched against granted trees
            sort_type: Sort direction; unknown values mean no sorting
            sort_by: Sort field; unknown values mean no sorting
            callback: Optional function called once with the result list

        Returns:
            Future resolving to the list of locators
        """
        result: "Future[list[str]]" = Future()
        try:
            request = FetchFileUriListRequest(
                folder_path=folder_path, sort_type=sort_type, sort_by=sort_by
            )
            inner = self._use_case.execute_async(request, self._executor)
        except Exception as e:
            self._logger.error(f"Error fetching files: {e}")
            result.set_result([])
        else:
            inner.add_done_callback(lambda done: self._complete(done, result))
        if callback is not None:
            result.add_done_callback(lambda done: callback(done.result()))
        return result

    def _complete(self, done: "Future[list[str]]", result: "Future[list[str]]") -> None:
        try:
            uris = _clean_uris(done.result())
        except Exception as e:
            self._logger.error(f"Error fetching files: {e}")
            uris = []
        result.set_result(uris)

    def close(self) -> None:
        """Stop accepting requests and wait for running ones to finish."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "FolderFilesFetch":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
