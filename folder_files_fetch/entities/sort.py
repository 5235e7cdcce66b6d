"""
Sort request entities.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class _ParsableEnum(str, Enum):
    """String enum whose ``parse`` falls back to ``NONE`` for unknown input."""

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        if value is None:
            return cls("none")
        text = str(value).strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return cls("none")


class SortType(_ParsableEnum):
    """Sort direction."""

    NONE = "none"
    ASC = "asc"
    DESC = "desc"


class SortBy(_ParsableEnum):
    """Field to sort on."""

    NONE = "none"
    NAME = "name"
    DATE = "date"


@dataclass(frozen=True)
class SortSpec:
    """Sort direction and field requested for one listing."""

    sort_type: SortType = SortType.NONE
    sort_by: SortBy = SortBy.NONE

    @classmethod
    def of(cls, sort_type: Any = None, sort_by: Any = None) -> "SortSpec":
        """Build a spec from raw values, mapping anything unknown to ``none``."""
        return cls(SortType.parse(sort_type), SortBy.parse(sort_by))

    @property
    def is_active(self) -> bool:
        """True when both a direction and a field were requested."""
        return self.sort_type is not SortType.NONE and self.sort_by is not SortBy.NONE

    @property
    def descending(self) -> bool:
        return self.sort_type is SortType.DESC
