"""
Result type returned by FileStore operations.
"""

from dataclasses import dataclass
from typing import Any, Optional

from docbrowser.entities.listing import Listing
from docbrowser.exceptions import FileRepositoryError


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a single FileStore operation.

    On success ``listing`` holds the listing after the operation and ``value``
    any operation-specific payload (file content for reads). On failure
    ``error`` holds the typed error and ``listing`` the unchanged previous
    listing.
    """

    listing: Optional[Listing]
    value: Any = None
    error: Optional[FileRepositoryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    def unwrap(self) -> Any:
        """Return ``value`` (or the listing when there is no value), raising the error on failure."""
        if self.error is not None:
            raise self.error
        return self.value if self.value is not None else self.listing

    @classmethod
    def success(cls, listing: Optional[Listing], value: Any = None) -> "OperationResult":
        return cls(listing=listing, value=value)

    @classmethod
    def failure(
        cls, listing: Optional[Listing], error: FileRepositoryError
    ) -> "OperationResult":
        return cls(listing=listing, error=error)
