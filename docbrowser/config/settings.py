"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from docbrowser.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_THEMES = ("dark", "light")
_PREVIEW_MODES = ("system", "none")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.root: str = self._get_path(
            "DOCBROWSER_ROOT", os.path.join("~", "Documents", "docbrowser")
        )
        self.enforce_root: bool = self._get_bool("DOCBROWSER_ENFORCE_ROOT", True)
        self.default_folder_name: str = (
            self._get_env("DOCBROWSER_DEFAULT_FOLDER_NAME", "New Folder").strip()
            or "New Folder"
        )
        self.log_level: str = self._get_choice(
            "DOCBROWSER_LOG_LEVEL", "INFO", _LOG_LEVELS, upper=True
        )
        self.ui_theme: str = self._get_choice("DOCBROWSER_UI_THEME", "dark", _THEMES)
        self.preview: str = self._get_choice(
            "DOCBROWSER_PREVIEW", "system", _PREVIEW_MODES
        )
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int("PORT", 8000)
        self.reload: bool = self._get_bool("RELOAD", False)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_path(self, key: str, default: str) -> str:
        value = os.path.expanduser(self._get_env(key, default).strip() or default)
        return os.path.abspath(value)

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        return raw.strip().lower() not in ("0", "false", "no", "off")

    def _get_int(self, key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got '{raw}'")

    def _get_choice(
        self, key: str, default: str, choices: tuple[str, ...], upper: bool = False
    ) -> str:
        value = self._get_env(key, default).strip() or default
        value = value.upper() if upper else value.lower()
        if value not in choices:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(choices)}, got '{value}'"
            )
        return value


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )


# Global settings instance
settings = Settings()
