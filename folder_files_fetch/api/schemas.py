"""
Pydantic models for the fetch request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from folder_files_fetch.entities.sort import SortBy, SortSpec, SortType


class FetchFileUriListRequest(BaseModel):
    """Schema for a folder listing request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    folder_path: str = Field(
        "", alias="folderPath", description="Folder path fragment to look up"
    )
    sort_type: SortType = Field(
        SortType.NONE, alias="sortType", description="Sort direction (none/asc/desc)"
    )
    sort_by: SortBy = Field(
        SortBy.NONE, alias="sortBy", description="Sort field (none/name/date)"
    )

    @field_validator("folder_path", mode="before")
    @classmethod
    def _default_folder_path(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("sort_type", mode="before")
    @classmethod
    def _parse_sort_type(cls, value: Any) -> SortType:
        return SortType.parse(value)

    @field_validator("sort_by", mode="before")
    @classmethod
    def _parse_sort_by(cls, value: Any) -> SortBy:
        return SortBy.parse(value)

    def sort_spec(self) -> SortSpec:
        return SortSpec(self.sort_type, self.sort_by)
