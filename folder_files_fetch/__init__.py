"""folder_files_fetch: list the contents of user-granted folders, optionally sorted.

The public surface is the :class:`FolderFilesFetch` facade plus the sort enums.
"""

from folder_files_fetch.api.plugin import FolderFilesFetch
from folder_files_fetch.entities.sort import SortBy, SortSpec, SortType

__all__: list[str] = ["FolderFilesFetch", "SortBy", "SortSpec", "SortType"]
