"""
Tests for the dependency injection container.
"""

from docbrowser.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from docbrowser.adapters.preview.system_preview_adapter import (
    LoggingPreviewAdapter,
    SystemPreviewAdapter,
)
from docbrowser.config.settings import Settings
from docbrowser.container import DependencyContainer
from docbrowser.use_cases.files.file_store import FileStore


class TestDependencyContainer:
    def test_file_repository_is_cached(self, dependency_container):
        repo = dependency_container.get_file_repository()

        assert isinstance(repo, LocalFileSystemAdapter)
        assert dependency_container.get_file_repository() is repo

    def test_file_store_is_opened_at_root(self, dependency_container, temp_directory):
        store = dependency_container.get_file_store()

        assert isinstance(store, FileStore)
        assert store is dependency_container.get_file_store()
        assert store.root == temp_directory
        assert store.listing.names() == ["a.txt", "docs"]

    def test_preview_mode_none_uses_logging_adapter(self, dependency_container):
        assert isinstance(dependency_container.get_preview(), LoggingPreviewAdapter)
        assert dependency_container.get_share() is dependency_container.get_preview()

    def test_system_preview_adapter(self, monkeypatch, temp_directory):
        monkeypatch.setenv("DOCBROWSER_ROOT", temp_directory)
        monkeypatch.setenv("DOCBROWSER_PREVIEW", "system")
        container = DependencyContainer(Settings())

        assert isinstance(container.get_preview(), SystemPreviewAdapter)

    def test_reset_closes_store(self, dependency_container):
        store = dependency_container.get_file_store()

        dependency_container.reset()

        assert store.listing.entries == ()
        assert dependency_container.get_file_store() is not store
