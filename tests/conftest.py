"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from docbrowser.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from docbrowser.config.settings import Settings
from docbrowser.container import DependencyContainer
from docbrowser.ports.preview.preview_port import PreviewPort, SharePort
from docbrowser.use_cases.files.file_store import FileStore


@pytest.fixture
def temp_directory():
    """
    Create a temporary document root for testing file operations.

    Layout: ``a.txt`` (10 bytes) and ``docs/notes.md``.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "a.txt"), "w") as f:
            f.write("0123456789")

        docs = os.path.join(temp_dir, "docs")
        os.makedirs(docs)

        with open(os.path.join(docs, "notes.md"), "w") as f:
            f.write("# Notes\n\nSome text.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def mock_preview():
    return MagicMock(spec=PreviewPort)


@pytest.fixture
def mock_share():
    return MagicMock(spec=SharePort)


@pytest.fixture
def file_store(temp_directory, mock_logger, mock_preview, mock_share):
    """
    Create a FileStore over the temporary root, already opened at the root.

    Returns:
        FileStore instance
    """
    store = FileStore(
        LocalFileSystemAdapter(mock_logger),
        root=temp_directory,
        preview=mock_preview,
        share=mock_share,
        logger=mock_logger,
    )
    result = store.set_root()
    assert result.ok
    return store


@pytest.fixture
def test_settings(monkeypatch, temp_directory):
    """
    Build settings pointing at the temporary root with headless previews.

    Returns:
        Settings instance
    """
    monkeypatch.setenv("DOCBROWSER_ROOT", temp_directory)
    monkeypatch.setenv("DOCBROWSER_PREVIEW", "none")
    return Settings()


@pytest.fixture
def dependency_container(test_settings, mock_logger):
    """
    Create a dependency container configured for the temporary root.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(test_settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    yield container
    container.reset()
