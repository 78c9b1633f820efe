"""
Ports for platform surfaces that consume an entry path: preview and share.
"""

from abc import ABC, abstractmethod


class PreviewPort(ABC):
    @abstractmethod
    def present(self, path: str) -> None:
        """
        Display the file or directory at path, read-only.

        Raises:
            FileOperationError: If the platform cannot present the path
        """
        pass


class SharePort(ABC):
    @abstractmethod
    def share(self, path: str) -> None:
        """
        Hand the raw path to the platform share mechanism.

        Raises:
            FileOperationError: If the platform cannot share the path
        """
        pass
