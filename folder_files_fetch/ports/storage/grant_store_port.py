"""
Grant store port interface defining read access to durable access grants.
"""

from abc import ABC, abstractmethod

from folder_files_fetch.entities.grant import AccessGrant


class GrantStorePort(ABC):
    """Port interface for the platform's persisted access grants."""

    @abstractmethod
    def persisted_grants(self) -> list[AccessGrant]:
        """
        Return the grants currently visible to the process.

        Returns:
            Grants in the store's enumeration order

        Raises:
            GrantStoreError: If the store cannot be read
        """
        pass
