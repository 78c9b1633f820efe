"""
Pydantic models for API requests and responses.
"""

import os
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from docbrowser.entities.directory_entry import DirectoryEntry
from docbrowser.entities.listing import Listing


def json_safe(text: str) -> str:
    """Replace undecodable filename bytes with backslash escapes so the text encodes as UTF-8."""
    return os.fsencode(text).decode("utf-8", "backslashreplace")


class EntryInfo(BaseModel):
    """Schema for one directory entry."""

    name: str = Field(..., description="Entry name")
    path: str = Field(..., description="Full entry path")
    is_dir: bool = Field(..., description="Whether the entry is a directory")
    size: int = Field(..., description="Size in bytes (0 for directories)")
    type: str = Field(..., description="File extension, 'directory' or 'no_extension'")
    modified_at: datetime = Field(..., description="Last modification time")

    @classmethod
    def from_entity(cls, entry: DirectoryEntry) -> "EntryInfo":
        """Create an EntryInfo schema from a DirectoryEntry entity."""
        return cls(
            name=json_safe(entry.name),
            path=json_safe(entry.path),
            is_dir=entry.is_dir,
            size=entry.size_bytes,
            type=json_safe(entry.file_type),
            modified_at=entry.modified_at,
        )


class ListingResponse(BaseModel):
    """Schema for the current listing."""

    current_directory: str = Field(..., description="Directory being listed")
    search_filter: str = Field("", description="Active search filter")
    total: int = Field(..., description="Number of entries before filtering")
    entries: List[EntryInfo] = Field(..., description="Visible entries")

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingResponse":
        return cls(
            current_directory=json_safe(listing.current_directory),
            search_filter=listing.search_filter,
            total=len(listing.entries),
            entries=[EntryInfo.from_entity(e) for e in listing.visible],
        )


class PathRequest(BaseModel):
    """Schema for requests targeting a single entry."""

    path: str = Field(..., description="Entry path, absolute or relative to the root")


class FilterRequest(BaseModel):
    text: str = Field("", description="Case-insensitive name filter")


class WriteContentRequest(BaseModel):
    path: str = Field(..., description="File path, absolute or relative to the root")
    content: str = Field(..., description="Full new text content")


class MoveRequest(BaseModel):
    path: str = Field(..., description="Entry to move")
    destination: Optional[str] = Field(
        None, description="Destination directory (defaults to the root)"
    )


class RenameRequest(BaseModel):
    path: str = Field(..., description="Entry to rename")
    new_name: str = Field(..., description="New leaf name")


class CreateFolderRequest(BaseModel):
    name: Optional[str] = Field(None, description="Folder name (default used if empty)")


class ContentResponse(BaseModel):
    """Schema for file content."""

    path: str = Field(..., description="File path")
    content: str = Field(..., description="Full text content")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
