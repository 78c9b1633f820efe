from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from docbrowser.config.settings import configure_logging
from docbrowser.container import container

from .main_window import MainWindow
from .theme import apply_theme


def main(argv: Optional[list[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv
    configure_logging()

    app = QApplication(argv)
    app.setApplicationName("docbrowser")
    # Theme from DOCBROWSER_UI_THEME ('light' or 'dark')
    apply_theme(app)

    win = MainWindow(container.get_file_store())
    win.show()
    try:
        return app.exec()
    finally:
        container.reset()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
