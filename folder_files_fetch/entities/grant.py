"""
Access grant domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessGrant:
    """
    A durable authorization to enumerate a storage subtree.

    Grants are issued and persisted by the platform permission store; this
    package only reads them.
    """

    root_uri: str
    is_read_permission: bool = True
    is_write_permission: bool = False
    persisted_time: int = 0

    def __str__(self) -> str:
        return f"AccessGrant(root_uri='{self.root_uri}')"
