"""
JSON file grant store adapter.

Grants are stored as a JSON array of records::

    [{"rootUri": "content://...", "isReadPermission": true,
      "isWritePermission": false, "persistedTime": 1700000000000}]
"""

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from typing_extensions import override

from folder_files_fetch.entities.grant import AccessGrant
from folder_files_fetch.exceptions import GrantStoreError
from folder_files_fetch.ports.storage.grant_store_port import GrantStorePort


class GrantRecord(BaseModel):
    """Schema for one persisted grant record."""

    model_config = ConfigDict(populate_by_name=True)

    root_uri: str = Field(..., alias="rootUri", description="Root URI of the granted tree")
    is_read_permission: bool = Field(True, alias="isReadPermission")
    is_write_permission: bool = Field(False, alias="isWritePermission")
    persisted_time: int = Field(0, alias="persistedTime")

    def to_entity(self) -> AccessGrant:
        return AccessGrant(
            root_uri=self.root_uri,
            is_read_permission=self.is_read_permission,
            is_write_permission=self.is_write_permission,
            persisted_time=self.persisted_time,
        )


_records_adapter = TypeAdapter(list[GrantRecord])


class JsonGrantStore(GrantStorePort):
    """Grant store that reads grants persisted in a JSON file."""

    def __init__(self, path: str, logger: logging.Logger | None = None):
        """
        Initialize the store.

        Args:
            path: Location of the JSON grants file
            logger: Logger instance to use for logging
        """
        self._path = path
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return self._path

    @override
    def persisted_grants(self) -> list[AccessGrant]:
        """
        Read the grants file.

        Returns:
            Grants in file order; empty if the file does not exist

        Raises:
            GrantStoreError: If the file cannot be read or is malformed
        """
        if not os.path.exists(self._path):
            self._logger.debug(f"No grants file at {self._path}")
            return []

        try:
            with open(self._path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise GrantStoreError(f"Cannot read grants file {self._path}: {e}")

        if not raw.strip():
            return []

        try:
            records = _records_adapter.validate_json(raw)
        except ValidationError as e:
            raise GrantStoreError(f"Malformed grants file {self._path}: {e}")

        return [r.to_entity() for r in records]
