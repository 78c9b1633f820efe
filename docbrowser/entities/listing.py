"""
Listing domain entity: the entries of one directory plus the active search filter.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from docbrowser.entities.directory_entry import DirectoryEntry


def listing_sort_key(entry: DirectoryEntry) -> tuple[str, str]:
    """Case-insensitive name order, exact name as tie-breaker."""
    return (entry.name.lower(), entry.name)


@dataclass(frozen=True)
class Listing:
    current_directory: str
    entries: tuple[DirectoryEntry, ...] = ()
    search_filter: str = ""

    @classmethod
    def of(
        cls,
        current_directory: str,
        entries: Iterable[DirectoryEntry],
        search_filter: str = "",
    ) -> "Listing":
        """Build a listing, ordering entries by the listing convention."""
        ordered = tuple(sorted(entries, key=listing_sort_key))
        return cls(current_directory, ordered, search_filter or "")

    @property
    def visible(self) -> list[DirectoryEntry]:
        """Entries whose name contains the search filter, ignoring case."""
        needle = self.search_filter.lower()
        if not needle:
            return list(self.entries)
        return [e for e in self.entries if needle in e.name.lower()]

    def with_filter(self, text: Optional[str]) -> "Listing":
        return replace(self, search_filter=text or "")

    def find(self, name: str) -> Optional[DirectoryEntry]:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def names(self) -> list[str]:
        return [e.name for e in self.visible]
