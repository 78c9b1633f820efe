"""
Tests for the preview and share adapters.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from docbrowser.adapters.preview.system_preview_adapter import (
    LoggingPreviewAdapter,
    SystemPreviewAdapter,
)
from docbrowser.exceptions import FileOperationError

MODULE = "docbrowser.adapters.preview.system_preview_adapter"

pytestmark = pytest.mark.skipif(os.name == "nt", reason="POSIX launch commands")


class TestSystemPreviewAdapter:
    """Test cases for the SystemPreviewAdapter."""

    @patch(f"{MODULE}.subprocess.Popen")
    @patch(f"{MODULE}.shutil.which", return_value="/usr/bin/xdg-open")
    @patch(f"{MODULE}.sys")
    def test_present_uses_xdg_open(
        self, mock_sys, mock_which, mock_popen, temp_directory, mock_logger
    ):
        mock_sys.platform = "linux"
        mock_popen.return_value = MagicMock(pid=42)
        path = os.path.join(temp_directory, "a.txt")

        SystemPreviewAdapter(mock_logger).present(path)

        mock_popen.assert_called_once_with(["/usr/bin/xdg-open", path])
        mock_logger.info.assert_called_once_with(f"Presented {path} (pid=42)")

    @patch(f"{MODULE}.subprocess.Popen")
    @patch(f"{MODULE}.shutil.which", return_value="/usr/bin/open")
    @patch(f"{MODULE}.sys")
    def test_share_reveals_on_macos(
        self, mock_sys, mock_which, mock_popen, temp_directory, mock_logger
    ):
        mock_sys.platform = "darwin"
        path = os.path.join(temp_directory, "a.txt")

        SystemPreviewAdapter(mock_logger).share(path)

        mock_popen.assert_called_once_with(["/usr/bin/open", "-R", path])

    @patch(f"{MODULE}.subprocess.Popen")
    @patch(f"{MODULE}.shutil.which", return_value="/usr/bin/xdg-open")
    @patch(f"{MODULE}.sys")
    def test_share_opens_parent_on_linux(
        self, mock_sys, mock_which, mock_popen, temp_directory, mock_logger
    ):
        mock_sys.platform = "linux"
        path = os.path.join(temp_directory, "docs", "notes.md")

        SystemPreviewAdapter(mock_logger).share(path)

        mock_popen.assert_called_once_with(
            ["/usr/bin/xdg-open", os.path.join(temp_directory, "docs")]
        )

    @patch(f"{MODULE}.shutil.which", return_value=None)
    @patch(f"{MODULE}.sys")
    def test_present_without_handler(self, mock_sys, mock_which, temp_directory, mock_logger):
        mock_sys.platform = "linux"

        with pytest.raises(FileOperationError, match="No handler available"):
            SystemPreviewAdapter(mock_logger).present(os.path.join(temp_directory, "a.txt"))

    @patch(f"{MODULE}.subprocess.Popen")
    @patch(f"{MODULE}.shutil.which", return_value="/usr/bin/xdg-open")
    @patch(f"{MODULE}.sys")
    def test_present_launch_failure(
        self, mock_sys, mock_which, mock_popen, temp_directory, mock_logger
    ):
        mock_sys.platform = "linux"
        mock_popen.side_effect = OSError("exec format error")

        with pytest.raises(FileOperationError, match="Failed to preview .*: exec format error"):
            SystemPreviewAdapter(mock_logger).present(os.path.join(temp_directory, "a.txt"))
        mock_logger.error.assert_called_once()

    def test_present_missing_entry(self, temp_directory, mock_logger):
        with pytest.raises(FileOperationError, match="Cannot preview missing entry"):
            SystemPreviewAdapter(mock_logger).present(os.path.join(temp_directory, "nope"))

    def test_share_missing_entry(self, temp_directory, mock_logger):
        with pytest.raises(FileOperationError, match="Cannot share missing entry"):
            SystemPreviewAdapter(mock_logger).share(os.path.join(temp_directory, "nope"))


class TestLoggingPreviewAdapter:
    def test_only_logs(self, mock_logger):
        adapter = LoggingPreviewAdapter(mock_logger)

        adapter.present("/x/a.txt")
        adapter.share("/x/a.txt")

        mock_logger.info.assert_any_call("Preview requested for /x/a.txt")
        mock_logger.info.assert_any_call("Share requested for /x/a.txt")
