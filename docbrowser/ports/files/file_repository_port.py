"""
File repository port interface defining the contract for filesystem primitives.
"""

from abc import ABC, abstractmethod

from docbrowser.entities.directory_entry import DirectoryEntry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_directory(self, directory: str) -> list[DirectoryEntry]:
        """
        List every entry (files and directories) of a directory with metadata.

        Args:
            directory: Path to the directory to list

        Returns:
            List of DirectoryEntry snapshots

        Raises:
            ReadError: If the directory is missing or unreadable
        """
        pass

    @abstractmethod
    def stat_entry(self, path: str) -> DirectoryEntry:
        """
        Build a fresh entry for a single path.

        Raises:
            ReadError: If the path does not exist
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if something exists at path."""
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a whole file as UTF-8 text.

        Raises:
            ReadError: If the file is missing or is a directory
            DecodeError: If the content is not valid text
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> DirectoryEntry:
        """
        Replace a file's content atomically: either fully written or left unchanged.

        Args:
            path: Path to the file to write
            content: Text content to write (UTF-8)

        Returns:
            An entry for the written file

        Raises:
            WriteError: If the write fails
        """
        pass

    @abstractmethod
    def copy_item(self, src: str, dst: str) -> DirectoryEntry:
        """
        Copy a file or a directory tree to dst, which must not exist.

        Raises:
            FileOperationError: If the copy fails
        """
        pass

    @abstractmethod
    def move_item(self, src: str, dst: str) -> DirectoryEntry:
        """
        Move a file or directory to dst, which must not exist.

        Raises:
            FileOperationError: If the move fails
        """
        pass

    @abstractmethod
    def remove_item(self, path: str) -> None:
        """
        Remove a file, or a directory recursively.

        Raises:
            FileOperationError: If the removal fails
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> DirectoryEntry:
        """
        Create an empty directory; its parent must exist and path must not.

        Raises:
            FileOperationError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def ensure_directory(self, path: str) -> DirectoryEntry:
        """
        Create a directory and any missing parents; an existing directory is kept.

        Raises:
            FileOperationError: If the directory cannot be created
        """
        pass
