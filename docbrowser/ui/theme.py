from __future__ import annotations

from typing import Literal

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from docbrowser.config.settings import settings

ThemeName = Literal["dark", "light"]

THEMES: tuple[ThemeName, ...] = ("dark", "light")

# role -> (dark, light)
_COLORS: dict[QPalette.ColorRole, tuple[str, str]] = {
    QPalette.ColorRole.Window: ("#1e2124", "#f3f1ec"),
    QPalette.ColorRole.WindowText: ("#e4e2dc", "#2b2a27"),
    QPalette.ColorRole.Base: ("#26292d", "#fffdf8"),
    QPalette.ColorRole.AlternateBase: ("#2c3035", "#f7f4ed"),
    QPalette.ColorRole.ToolTipBase: ("#33373c", "#fffdf8"),
    QPalette.ColorRole.ToolTipText: ("#e4e2dc", "#2b2a27"),
    QPalette.ColorRole.Text: ("#e4e2dc", "#2b2a27"),
    QPalette.ColorRole.Button: ("#33373c", "#e9e5dc"),
    QPalette.ColorRole.ButtonText: ("#e4e2dc", "#2b2a27"),
    QPalette.ColorRole.BrightText: ("#f08a5d", "#b5452a"),
    QPalette.ColorRole.Highlight: ("#d9a441", "#a66f12"),
    QPalette.ColorRole.HighlightedText: ("#1e2124", "#fffdf8"),
}

_DISABLED_TEXT = ("#7d8187", "#9a958a")

# Folder rows share the highlight hue so they stand out from files
_FOLDER_COLORS = ("#e6b85c", "#8c5c0b")


def _index(theme: ThemeName) -> int:
    return 0 if theme == "dark" else 1


def folder_color(theme: ThemeName) -> QColor:
    """Foreground used for folder rows in the entry list."""
    return QColor(_FOLDER_COLORS[_index(theme)])


def build_palette(theme: ThemeName) -> QPalette:
    i = _index(theme)
    pal = QPalette()
    for role, colors in _COLORS.items():
        pal.setColor(role, QColor(colors[i]))
    disabled = QColor(_DISABLED_TEXT[i])
    for role in (QPalette.ColorRole.Text, QPalette.ColorRole.ButtonText, QPalette.ColorRole.WindowText):
        pal.setColor(QPalette.ColorGroup.Disabled, role, disabled)
    return pal


def apply_theme(app: QApplication, theme: ThemeName | None = None) -> ThemeName:
    """Apply the light or dark palette and return the active theme."""
    name = (theme or settings.ui_theme).lower()
    if name not in THEMES:
        name = "dark"

    app.setStyle("Fusion")
    app.setPalette(build_palette(name))  # type: ignore[arg-type]
    app.setProperty("activeTheme", name)
    return name  # type: ignore[return-value]


def toggle_theme(app: QApplication, current: ThemeName) -> ThemeName:
    nxt: ThemeName = "light" if current == "dark" else "dark"
    return apply_theme(app, nxt)
