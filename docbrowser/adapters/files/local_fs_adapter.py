"""
Local file system adapter implementation for file operations.
"""

import logging
import os
import shutil
import tempfile

from typing_extensions import override

from docbrowser.entities.directory_entry import DirectoryEntry
from docbrowser.exceptions import (
    DecodeError,
    FileOperationError,
    FileRepositoryError,
    ReadError,
    WriteError,
)
from docbrowser.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            ReadError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise ReadError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise ReadError(f"Path is not a directory: {directory}")

    def _ensure_absent(self, path: str) -> None:
        if os.path.lexists(path):
            raise FileOperationError(f"An item named '{os.path.basename(path)}' already exists")

    def _create_entries(self, paths: list[str]) -> list[DirectoryEntry]:
        """
        Create DirectoryEntry snapshots from a list of paths.

        Args:
            paths: List of paths to convert

        Returns:
            List of DirectoryEntry snapshots
        """
        entries: list[DirectoryEntry] = []
        for path in paths:
            try:
                entries.append(DirectoryEntry.from_path(path))
            except ReadError as e:
                # Entry vanished or is unreadable; skip it and keep the rest
                self._logger.warning(f"Could not process entry {path}: {e}")
                continue

        return entries

    @override
    def list_directory(self, directory: str) -> list[DirectoryEntry]:
        try:
            self._validate_directory(directory)

            paths: list[str] = [
                os.path.join(directory, item) for item in os.listdir(directory)
            ]
            return self._create_entries(paths)

        except FileRepositoryError:
            raise
        except OSError as e:
            raise ReadError(f"Failed to list entries in {directory}: {str(e)}")

    @override
    def stat_entry(self, path: str) -> DirectoryEntry:
        return DirectoryEntry.from_path(path)

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def read_text(self, path: str) -> str:
        if not os.path.exists(path):
            raise ReadError(f"File does not exist: {path}")
        if os.path.isdir(path):
            raise ReadError(f"Path is a directory: {path}")
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise DecodeError(f"File is not valid UTF-8 text: {path} ({e.reason})")
        except OSError as e:
            raise ReadError(f"Failed to read {path}: {str(e)}")

    @override
    def write_text(self, path: str, content: str) -> DirectoryEntry:
        """
        Write content to a temporary file next to the target, then rename it over
        the target. A failure at any step leaves the original file unchanged.
        Symlinks are followed so the file they point to is updated.
        """
        if os.path.isdir(path):
            raise WriteError(f"Path is a directory: {path}")
        target = os.path.realpath(path)
        directory = os.path.dirname(target)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{os.path.basename(target)}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            if os.path.exists(target):
                shutil.copymode(target, tmp_path)
            os.replace(tmp_path, target)
            tmp_path = None
            self._logger.info(f"Wrote {len(content)} characters to {path}")
            return DirectoryEntry.from_path(path)
        except FileRepositoryError:
            raise
        except (OSError, UnicodeEncodeError) as e:
            raise WriteError(f"Failed to write {path}: {str(e)}")
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

    @override
    def copy_item(self, src: str, dst: str) -> DirectoryEntry:
        if not os.path.exists(src):
            raise FileOperationError(f"Source does not exist: {src}")
        self._ensure_absent(dst)
        try:
            if os.path.isdir(src):
                shutil.copytree(src, dst)
            else:
                shutil.copy2(src, dst)
            return DirectoryEntry.from_path(dst)
        except FileRepositoryError:
            raise
        except (OSError, shutil.Error) as e:
            raise FileOperationError(f"Failed to copy {src} to {dst}: {str(e)}")

    @override
    def move_item(self, src: str, dst: str) -> DirectoryEntry:
        if not os.path.lexists(src):
            raise FileOperationError(f"Source does not exist: {src}")
        self._ensure_absent(dst)
        src_abs = os.path.abspath(src)
        dst_abs = os.path.abspath(dst)
        if os.path.isdir(src_abs) and (
            os.path.commonpath([src_abs, dst_abs]) == src_abs
        ):
            raise FileOperationError(f"Cannot move {src} into itself")
        try:
            shutil.move(src, dst)
            return DirectoryEntry.from_path(dst)
        except FileRepositoryError:
            raise
        except (OSError, shutil.Error) as e:
            raise FileOperationError(f"Failed to move {src} to {dst}: {str(e)}")

    @override
    def remove_item(self, path: str) -> None:
        if not os.path.lexists(path):
            raise FileOperationError(f"Entry does not exist: {path}")
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except OSError as e:
            raise FileOperationError(f"Failed to delete {path}: {str(e)}")

    @override
    def create_directory(self, path: str) -> DirectoryEntry:
        self._ensure_absent(path)
        try:
            os.mkdir(path)
            return DirectoryEntry.from_path(path)
        except FileRepositoryError:
            raise
        except OSError as e:
            raise FileOperationError(f"Failed to create folder {path}: {str(e)}")

    @override
    def ensure_directory(self, path: str) -> DirectoryEntry:
        try:
            os.makedirs(path, exist_ok=True)
            return DirectoryEntry.from_path(path)
        except FileRepositoryError:
            raise
        except OSError as e:
            raise FileOperationError(f"Failed to create directory {path}: {str(e)}")
