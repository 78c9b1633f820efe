import logging
import os
import shutil
import subprocess
import sys
from typing import Optional

from docbrowser.exceptions import FileOperationError
from docbrowser.ports.preview.preview_port import PreviewPort, SharePort


class SystemPreviewAdapter(PreviewPort, SharePort):
    """Preview and share through the operating system's default handlers."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def _spawn(self, cmd: list[str]) -> int:
        exe = shutil.which(cmd[0])
        if exe is None:
            raise FileOperationError(f"No handler available: '{cmd[0]}' not found")
        proc = subprocess.Popen([exe, *cmd[1:]])
        return proc.pid

    def present(self, path: str) -> None:
        if not os.path.exists(path):
            raise FileOperationError(f"Cannot preview missing entry: {path}")
        try:
            if sys.platform == "darwin":
                pid = self._spawn(["open", path])
            elif os.name == "nt":
                os.startfile(path)  # type: ignore[attr-defined]
                pid = 0
            else:
                pid = self._spawn(["xdg-open", path])
            self._logger.info(f"Presented {path} (pid={pid})")
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Failed to present {path}: {e}")
            raise FileOperationError(f"Failed to preview {path}: {e}")

    def share(self, path: str) -> None:
        if not os.path.exists(path):
            raise FileOperationError(f"Cannot share missing entry: {path}")
        try:
            # Reveal the entry in the file manager; the user shares from there
            if sys.platform == "darwin":
                pid = self._spawn(["open", "-R", path])
            elif os.name == "nt":
                pid = self._spawn(["explorer", f"/select,{path}"])
            else:
                pid = self._spawn(["xdg-open", os.path.dirname(path) or "."])
            self._logger.info(f"Revealed {path} for sharing (pid={pid})")
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Failed to share {path}: {e}")
            raise FileOperationError(f"Failed to share {path}: {e}")


class LoggingPreviewAdapter(PreviewPort, SharePort):
    """Headless stand-in: records the request in the log and does nothing else."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def present(self, path: str) -> None:
        self._logger.info(f"Preview requested for {path}")

    def share(self, path: str) -> None:
        self._logger.info(f"Share requested for {path}")
