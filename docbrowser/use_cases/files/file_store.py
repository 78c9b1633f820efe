"""
FileStore: the single source of truth for what files exist where, and the sole
executor of file-mutating actions.

Every mutation performs exactly one filesystem action and then re-reads the
current directory. When an action fails nothing is reloaded, so the listing the
caller already holds stays valid.
"""

import logging
import os
import threading
from typing import Callable, Optional, Type, Union

from docbrowser.entities.directory_entry import DirectoryEntry
from docbrowser.entities.listing import Listing
from docbrowser.exceptions import (
    FileOperationError,
    FileRepositoryError,
    ReadError,
    WriteError,
)
from docbrowser.ports.files.file_repository_port import FileRepositoryPort
from docbrowser.ports.preview.preview_port import PreviewPort, SharePort
from docbrowser.use_cases.files.operation_result import OperationResult

EntryRef = Union[DirectoryEntry, str]

DEFAULT_FOLDER_NAME = "New Folder"


def copy_name(name: str, attempt: int) -> str:
    """Name used for the n-th copy attempt of an entry: 'Copy of x', 'Copy 2 of x', ..."""
    if attempt <= 1:
        return f"Copy of {name}"
    return f"Copy {attempt} of {name}"


class FileStore:
    """Session-scoped file browser state plus the operations that change it."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        root: str,
        preview: Optional[PreviewPort] = None,
        share: Optional[SharePort] = None,
        enforce_root: bool = True,
        default_folder_name: str = DEFAULT_FOLDER_NAME,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the store.

        Args:
            file_repository: Repository for filesystem primitives
            root: The private document root, the default navigation start
            preview: Optional surface that presents an entry read-only
            share: Optional surface that hands an entry to the platform share mechanism
            enforce_root: Refuse paths that resolve outside the root
            default_folder_name: Name used by create_folder when none is given
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._root = os.path.abspath(os.path.expanduser(root))
        self._preview = preview
        self._share = share
        self._enforce_root = enforce_root
        self._default_folder_name = default_folder_name or DEFAULT_FOLDER_NAME
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._listing = Listing(self._root)

    @property
    def root(self) -> str:
        return self._root

    @property
    def listing(self) -> Listing:
        return self._listing

    @property
    def current_directory(self) -> str:
        return self._listing.current_directory

    # Helpers

    def _resolve(self, ref: EntryRef) -> str:
        """Absolute path for an entry or a path string; relative strings are root-relative."""
        if isinstance(ref, DirectoryEntry):
            return ref.path
        raw = os.path.expanduser(str(ref or "").strip())
        if not os.path.isabs(raw):
            raw = os.path.join(self._root, raw)
        return os.path.abspath(raw)

    def _is_inside_root(self, path: str) -> bool:
        if not self._enforce_root:
            return True
        root = os.path.realpath(self._root)
        target = os.path.realpath(path)
        try:
            return os.path.commonpath([root, target]) == root
        except ValueError:
            return False

    def _guard(self, path: str, error_cls: Type[FileRepositoryError]) -> str:
        if not self._is_inside_root(path):
            raise error_cls(f"Path is outside the document root: {path}")
        return path

    def _guard_not_root(self, path: str) -> None:
        if os.path.realpath(path) == os.path.realpath(self._root):
            raise FileOperationError("The document root cannot be changed")

    def _validate_name(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise FileOperationError("Name must not be empty")
        if name in (".", ".."):
            raise FileOperationError(f"Invalid name: '{name}'")
        separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
        if any(sep in name for sep in separators):
            raise FileOperationError(f"Name must not contain path separators: '{name}'")
        return name

    def _read_directory(self, directory: str) -> Listing:
        entries = self._file_repository.list_directory(directory)
        return Listing.of(directory, entries, self._listing.search_filter)

    def _reload(self) -> Listing:
        """Re-read the current directory, falling back to the root if it disappeared."""
        directory = self._listing.current_directory
        if directory != self._root and not self._file_repository.exists(directory):
            self._logger.warning(
                f"Current directory {directory} no longer exists, returning to root"
            )
            directory = self._root
        self._listing = self._read_directory(directory)
        self._logger.info(
            f"Listing {len(self._listing.entries)} entries in {self._listing.current_directory}"
        )
        return self._listing

    def _run(
        self,
        description: str,
        action: Callable[[], object],
        error_cls: Type[FileRepositoryError],
        reload: bool = True,
    ) -> OperationResult:
        """
        Execute one operation as a single critical section.

        The action's return value becomes the result value. Typed errors are
        logged and returned; the listing is only replaced after the action and
        the reload both succeed. When the action succeeds but the reload does
        not, the change is already on disk: the result is a ReadError that says
        so, and the previous listing is kept.
        """
        with self._lock:
            try:
                self._logger.info(description)
                value = action()
            except FileRepositoryError as e:
                self._logger.error(f"{description} failed: {e}")
                return OperationResult.failure(self._listing, e)
            except Exception as e:
                self._logger.error(f"{description} failed unexpectedly: {e}")
                return OperationResult.failure(
                    self._listing, error_cls(f"{description} failed: {str(e)}")
                )
            if not reload:
                return OperationResult.success(self._listing, value)
            try:
                listing = self._reload()
            except Exception as e:
                self._logger.warning(f"{description} completed but reload failed: {e}")
                return OperationResult.failure(
                    self._listing,
                    ReadError(f"{description} completed, but the listing could not be reloaded: {e}"),
                )
            return OperationResult.success(listing, value)

    # Navigation

    def set_root(self) -> OperationResult:
        """Point the store at the document root, creating it if missing."""

        def action() -> None:
            if not self._file_repository.exists(self._root):
                self._logger.info(f"Creating document root {self._root}")
                try:
                    self._file_repository.ensure_directory(self._root)
                except FileOperationError as e:
                    raise ReadError(f"Cannot create document root {self._root}: {e}")
            self._listing = self._read_directory(self._root)

        return self._run(
            f"Opening document root {self._root}", action, ReadError, reload=False
        )

    def enter(self, entry: EntryRef) -> OperationResult:
        """Make a directory entry the current directory and read it."""
        path = self._resolve(entry)

        def action() -> None:
            self._guard(path, ReadError)
            target = self._file_repository.stat_entry(path)
            if not target.is_dir:
                raise ReadError(f"Not a directory: {path}")
            self._listing = self._read_directory(target.path)

        return self._run(f"Entering directory {path}", action, ReadError, reload=False)

    def refresh(self) -> OperationResult:
        return self._run(
            f"Refreshing {self.current_directory}", lambda: None, ReadError
        )

    def go_up(self) -> OperationResult:
        """Enter the parent of the current directory; at the root this only refreshes."""
        current = self.current_directory
        if os.path.realpath(current) == os.path.realpath(self._root):
            return self.refresh()
        parent = os.path.dirname(current)
        if not self._is_inside_root(parent):
            return self.set_root()
        return self.enter(parent)

    def set_filter(self, text: Optional[str]) -> OperationResult:
        """Update the search filter; the visible set is recomputed without a re-read."""
        with self._lock:
            self._listing = self._listing.with_filter(text)
            self._logger.info(
                f"Filter '{self._listing.search_filter}' matches "
                f"{len(self._listing.visible)} of {len(self._listing.entries)} entries"
            )
            return OperationResult.success(self._listing)

    # Content

    def read(self, entry: EntryRef) -> OperationResult:
        """Return the whole text content of a file entry as the result value."""
        path = self._resolve(entry)

        def action() -> str:
            self._guard(path, ReadError)
            return self._file_repository.read_text(path)

        return self._run(f"Reading {path}", action, ReadError, reload=False)

    def write(self, entry: EntryRef, content: str) -> OperationResult:
        """Replace a file's content as a whole, then re-read the current directory."""
        path = self._resolve(entry)

        def action() -> None:
            self._guard(path, WriteError)
            if isinstance(entry, DirectoryEntry) and entry.is_dir:
                raise WriteError(f"Cannot write to a directory: {path}")
            self._file_repository.write_text(path, content)

        return self._run(f"Writing {path}", action, WriteError)

    # Mutations

    def copy(self, entry: EntryRef) -> OperationResult:
        """Duplicate an entry inside its own parent under a derived 'Copy of' name."""
        path = self._resolve(entry)

        def action() -> str:
            self._guard(path, FileOperationError)
            self._guard_not_root(path)
            parent, name = os.path.split(path)
            attempt = 1
            target = os.path.join(parent, copy_name(name, attempt))
            while self._file_repository.exists(target):
                attempt += 1
                target = os.path.join(parent, copy_name(name, attempt))
            self._file_repository.copy_item(path, target)
            return target

        return self._run(f"Copying {path}", action, FileOperationError)

    def move(self, entry: EntryRef, destination: Optional[EntryRef] = None) -> OperationResult:
        """Relocate an entry into a destination directory (the root by default)."""
        path = self._resolve(entry)
        dest_dir = self._root if destination is None else self._resolve(destination)

        def action() -> str:
            self._guard(path, FileOperationError)
            self._guard(dest_dir, FileOperationError)
            self._guard_not_root(path)
            try:
                dest = self._file_repository.stat_entry(dest_dir)
            except ReadError as e:
                raise FileOperationError(f"Destination is not available: {e}")
            if not dest.is_dir:
                raise FileOperationError(f"Destination is not a directory: {dest_dir}")
            target = os.path.join(dest.path, os.path.basename(path))
            self._file_repository.move_item(path, target)
            return target

        return self._run(f"Moving {path} to {dest_dir}", action, FileOperationError)

    def rename(self, entry: EntryRef, new_name: str) -> OperationResult:
        """Give an entry a new leaf name inside the same parent."""
        path = self._resolve(entry)

        def action() -> str:
            self._guard(path, FileOperationError)
            self._guard_not_root(path)
            name = self._validate_name(new_name)
            target = os.path.join(os.path.dirname(path), name)
            if target == path:
                return target
            self._file_repository.move_item(path, target)
            return target

        return self._run(f"Renaming {path} to '{new_name}'", action, FileOperationError)

    def delete(self, entry: EntryRef) -> OperationResult:
        """Remove an entry permanently, recursively for directories."""
        path = self._resolve(entry)

        def action() -> None:
            self._guard(path, FileOperationError)
            self._guard_not_root(path)
            self._file_repository.remove_item(path)

        return self._run(f"Deleting {path}", action, FileOperationError)

    def create_folder(self, name: Optional[str] = None) -> OperationResult:
        """Create an empty folder in the current directory."""
        folder = (name or "").strip() or self._default_folder_name

        def action() -> str:
            valid = self._validate_name(folder)
            target = os.path.join(self.current_directory, valid)
            self._guard(target, FileOperationError)
            self._file_repository.create_directory(target)
            return target

        return self._run(
            f"Creating folder '{folder}' in {self.current_directory}",
            action,
            FileOperationError,
        )

    # Platform surfaces

    def preview(self, entry: EntryRef) -> OperationResult:
        path = self._resolve(entry)

        def action() -> str:
            if self._preview is None:
                raise FileOperationError("Preview is not available")
            self._guard(path, FileOperationError)
            if not self._file_repository.exists(path):
                raise FileOperationError(f"Entry does not exist: {path}")
            self._preview.present(path)
            return path

        return self._run(f"Previewing {path}", action, FileOperationError, reload=False)

    def share(self, entry: EntryRef) -> OperationResult:
        path = self._resolve(entry)

        def action() -> str:
            if self._share is None:
                raise FileOperationError("Sharing is not available")
            self._guard(path, FileOperationError)
            if not self._file_repository.exists(path):
                raise FileOperationError(f"Entry does not exist: {path}")
            self._share.share(path)
            return path

        return self._run(f"Sharing {path}", action, FileOperationError, reload=False)

    def close(self) -> None:
        """Drop the in-memory listing at the end of a session."""
        with self._lock:
            self._listing = Listing(self._root)
            self._logger.info("File store closed")
