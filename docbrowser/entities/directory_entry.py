"""
Directory entry domain entity.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from docbrowser.exceptions import ReadError


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One filesystem object (file or directory) as surfaced in a listing.

    Entries are snapshots: they are built fresh on every directory read and
    never updated in place.
    """

    path: str
    name: str
    is_dir: bool
    size_bytes: int
    modified_at: datetime

    @classmethod
    def from_path(cls, path: str) -> "DirectoryEntry":
        """
        Build an entry from the current state of a path on disk.

        Args:
            path: Path to the file or directory

        Returns:
            A DirectoryEntry snapshot

        Raises:
            ReadError: If path is invalid or cannot be stat'ed
        """
        if not path or not isinstance(path, str):
            raise ReadError("Path must be a non-empty string")

        abs_path = os.path.abspath(path)
        try:
            st = os.stat(abs_path)
        except OSError as e:
            if not os.path.islink(abs_path):
                if isinstance(e, FileNotFoundError):
                    raise ReadError(f"Entry does not exist: {abs_path}")
                raise ReadError(f"Cannot stat entry {abs_path}: {e}")
            # Dangling or looping symlink: describe the link itself
            try:
                st = os.lstat(abs_path)
            except OSError as e:
                raise ReadError(f"Cannot stat entry {abs_path}: {e}")

        is_dir = stat.S_ISDIR(st.st_mode)
        return cls(
            path=abs_path,
            name=os.path.basename(abs_path),
            is_dir=is_dir,
            # Do not compute directory size to avoid expensive traversal
            size_bytes=0 if is_dir else int(st.st_size),
            modified_at=datetime.fromtimestamp(st.st_mtime),
        )

    @property
    def file_type(self) -> str:
        """Extension of the entry, or a marker for directories and bare names."""
        if self.is_dir:
            return "directory"
        _, ext = os.path.splitext(self.name)
        return ext.lstrip(".") if ext else "no_extension"

    @property
    def parent(self) -> str:
        return os.path.dirname(self.path)

    def get_details(self) -> dict[str, Any]:
        """
        Get comprehensive entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "is_dir": self.is_dir,
            "size": self.size_bytes,
            "type": self.file_type,
            "modified_at": self.modified_at.isoformat(),
            "directory": self.parent,
        }

    def __str__(self) -> str:
        kind = "dir" if self.is_dir else f"{self.size_bytes} bytes"
        return f"DirectoryEntry(name='{self.name}', {kind})"
