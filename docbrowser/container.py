"""
Dependency injection container for managing application dependencies.
"""

import logging

from docbrowser.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from docbrowser.adapters.preview.system_preview_adapter import (
    LoggingPreviewAdapter,
    SystemPreviewAdapter,
)
from docbrowser.config.settings import Settings, settings
from docbrowser.ports.files.file_repository_port import FileRepositoryPort
from docbrowser.ports.preview.preview_port import PreviewPort, SharePort
from docbrowser.use_cases.files.file_store import FileStore


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, app_settings: Settings | None = None):
        self._instances = {}
        self._settings = app_settings or settings
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def _get_preview_adapter(self) -> PreviewPort | SharePort:
        if "preview_adapter" not in self._instances:
            if self._settings.preview == "none":
                adapter = LoggingPreviewAdapter(self._logger)
            else:
                adapter = SystemPreviewAdapter(self._logger)
            self._instances["preview_adapter"] = adapter
        return self._instances["preview_adapter"]

    def get_preview(self) -> PreviewPort:
        """
        Get the surface that presents entries read-only.

        Returns:
            PreviewPort implementation
        """
        return self._get_preview_adapter()  # type: ignore[return-value]

    def get_share(self) -> SharePort:
        """
        Get the surface that hands entries to the platform share mechanism.

        Returns:
            SharePort implementation
        """
        return self._get_preview_adapter()  # type: ignore[return-value]

    def get_file_store(self) -> FileStore:
        """
        Get the session file store with injected dependencies.

        The store is opened at the document root on first access.

        Returns:
            Configured FileStore
        """
        if "file_store" not in self._instances:
            store = FileStore(
                self.get_file_repository(),
                root=self._settings.root,
                preview=self.get_preview(),
                share=self.get_share(),
                enforce_root=self._settings.enforce_root,
                default_folder_name=self._settings.default_folder_name,
                logger=self._logger,
            )
            result = store.set_root()
            if not result.ok:
                self._logger.error(f"Could not open document root: {result.message}")
            self._instances["file_store"] = store
        return self._instances["file_store"]

    def reset(self):
        """Close the session store and reset all instances (useful for testing)."""
        store = self._instances.get("file_store")
        if store is not None:
            store.close()
        self._instances.clear()


# Global container instance
container = DependencyContainer()
