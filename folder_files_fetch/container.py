"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from folder_files_fetch.adapters.storage.json_grant_store import JsonGrantStore
from folder_files_fetch.adapters.storage.local_document_tree import (
    LocalDocumentTreeAdapter,
)
from folder_files_fetch.config.settings import ACCESS_MODE_LEGACY, Settings
from folder_files_fetch.config.settings import settings as default_settings
from folder_files_fetch.ports.files.root_resolver_port import RootResolverPort
from folder_files_fetch.ports.storage.document_tree_port import DocumentTreePort
from folder_files_fetch.ports.storage.grant_store_port import GrantStorePort
from folder_files_fetch.use_cases.files.fetch_file_uris import FetchFileUriListUseCase
from folder_files_fetch.use_cases.files.list_sorted_files import ListSortedFilesUseCase
from folder_files_fetch.use_cases.files.resolve_legacy_root import (
    ResolveLegacyRootUseCase,
)
from folder_files_fetch.use_cases.files.resolve_root import ResolveRootUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_grant_store(self) -> GrantStorePort:
        """
        Get grant store adapter instance.

        Returns:
            GrantStorePort implementation
        """
        if "grant_store" not in self._instances:
            self._instances["grant_store"] = JsonGrantStore(
                self.settings.grants_file, self._logger
            )
        return self._instances["grant_store"]

    def get_document_tree(self) -> DocumentTreePort:
        """
        Get document tree adapter instance.

        Returns:
            DocumentTreePort implementation
        """
        if "document_tree" not in self._instances:
            self._instances["document_tree"] = LocalDocumentTreeAdapter(
                self.settings.storage_root, self._logger
            )
        return self._instances["document_tree"]

    def get_root_resolver(self) -> RootResolverPort:
        """
        Get the folder resolver for the configured access mode.

        Returns:
            ResolveLegacyRootUseCase in legacy mode, ResolveRootUseCase otherwise
        """
        if "root_resolver" not in self._instances:
            if self.settings.access_mode == ACCESS_MODE_LEGACY:
                resolver: RootResolverPort = ResolveLegacyRootUseCase(
                    self.get_document_tree(), self.settings.storage_root, self._logger
                )
            else:
                resolver = ResolveRootUseCase(
                    self.get_grant_store(), self.get_document_tree(), self._logger
                )
            self._instances["root_resolver"] = resolver
        return self._instances["root_resolver"]

    def get_list_sorted_files_use_case(self) -> ListSortedFilesUseCase:
        """
        Get list sorted files use case.

        Returns:
            Configured ListSortedFilesUseCase
        """
        if "list_sorted_files_use_case" not in self._instances:
            self._instances["list_sorted_files_use_case"] = ListSortedFilesUseCase(
                self.settings.max_workers, self._logger
            )
        return self._instances["list_sorted_files_use_case"]

    def get_fetch_file_uri_list_use_case(self) -> FetchFileUriListUseCase:
        """
        Get fetch file URI list use case with injected dependencies.

        Returns:
            Configured FetchFileUriListUseCase
        """
        if "fetch_file_uri_list_use_case" not in self._instances:
            self._instances["fetch_file_uri_list_use_case"] = FetchFileUriListUseCase(
                self.get_root_resolver(),
                self.get_list_sorted_files_use_case(),
                self._logger,
            )
        return self._instances["fetch_file_uri_list_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
