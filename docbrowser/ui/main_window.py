from __future__ import annotations

import logging
from typing import Optional, cast

from PySide6.QtCore import QPoint, Qt, Slot
from PySide6.QtGui import QAction, QFont, QKeySequence, QPalette
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QDialogButtonBox,
    QInputDialog,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMenu,
    QMessageBox,
    QPlainTextEdit,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from docbrowser.entities.directory_entry import DirectoryEntry
from docbrowser.entities.listing import Listing
from docbrowser.use_cases.files.file_store import FileStore
from docbrowser.use_cases.files.operation_result import OperationResult

from .theme import ThemeName, folder_color, toggle_theme

ENTRY_ROLE = Qt.ItemDataRole.UserRole


def format_size(size: int) -> str:
    value = float(size)
    for unit in ("bytes", "KB", "MB", "GB"):
        if value < 1024.0:
            return f"{int(value)} {unit}" if unit == "bytes" else f"{value:.1f} {unit}"
        value /= 1024.0
    return f"{value:.1f} TB"


class EditorDialog(QDialog):
    """Plain-text editor for one file; the caller saves the content on accept."""

    def __init__(self, entry: DirectoryEntry, content: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"Edit: {entry.name}")
        self.resize(760, 560)

        self.editor = QPlainTextEdit(self)
        self.editor.setPlainText(content)
        mono = QFont("Menlo")
        mono.setStyleHint(QFont.StyleHint.Monospace)
        self.editor.setFont(mono)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel,
            parent=self,
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(entry.path, self))
        layout.addWidget(self.editor)
        layout.addWidget(buttons)

    def content(self) -> str:
        return self.editor.toPlainText()


class MainWindow(QMainWindow):
    def __init__(self, store: FileStore, logger: Optional[logging.Logger] = None) -> None:
        super().__init__()
        self._store = store
        self._logger = logger or logging.getLogger(__name__)
        self.setWindowTitle("docbrowser")
        self.setMinimumSize(720, 520)

        self._build_actions()
        self._build_toolbar()
        self._build_layout()

        app = QApplication.instance()
        prop = app.property("activeTheme") if app else None  # type: ignore[attr-defined]
        if isinstance(prop, str) and prop in ("dark", "light"):
            self._theme: ThemeName = prop  # type: ignore[assignment]
        else:
            win_col = self.palette().color(QPalette.ColorRole.Window)
            self._theme = "dark" if win_col.lightness() < 128 else "light"

        self._render(self._store.listing)

    # UI building
    def _build_actions(self) -> None:
        self.action_up = QAction("Up", self)
        self.action_up.setShortcut(QKeySequence("Alt+Up"))
        self.action_up.triggered.connect(self._on_up_clicked)

        self.action_refresh = QAction("Refresh", self)
        self.action_refresh.setShortcut(QKeySequence.StandardKey.Refresh)
        self.action_refresh.triggered.connect(self._on_refresh_clicked)

        self.action_new_folder = QAction("New Folder…", self)
        self.action_new_folder.setShortcut(QKeySequence("Ctrl+Shift+N"))
        self.action_new_folder.triggered.connect(self._on_new_folder_clicked)

        self.action_edit = QAction("Edit", self)
        self.action_edit.triggered.connect(self._on_edit_clicked)

        self.action_preview = QAction("Preview", self)
        self.action_preview.triggered.connect(self._on_preview_clicked)

        self.action_share = QAction("Share", self)
        self.action_share.triggered.connect(self._on_share_clicked)

        self.action_copy = QAction("Duplicate", self)
        self.action_copy.setShortcut(QKeySequence("Ctrl+D"))
        self.action_copy.triggered.connect(self._on_copy_clicked)

        self.action_move = QAction("Move to Root", self)
        self.action_move.triggered.connect(self._on_move_clicked)

        self.action_rename = QAction("Rename…", self)
        self.action_rename.setShortcut(QKeySequence("F2"))
        self.action_rename.triggered.connect(self._on_rename_clicked)

        self.action_delete = QAction("Delete", self)
        self.action_delete.setShortcut(QKeySequence.StandardKey.Delete)
        self.action_delete.triggered.connect(self._on_delete_clicked)

        self.action_toggle_theme = QAction("Toggle Theme", self)
        self.action_toggle_theme.triggered.connect(self._on_toggle_theme)

        self._entry_actions = [
            self.action_edit,
            self.action_preview,
            self.action_share,
            self.action_copy,
            self.action_move,
            self.action_rename,
            self.action_delete,
        ]

    def _build_toolbar(self) -> None:
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.action_up)
        tb.addAction(self.action_refresh)
        tb.addAction(self.action_new_folder)
        tb.addSeparator()
        for action in self._entry_actions:
            tb.addAction(action)
        tb.addSeparator()
        tb.addAction(self.action_toggle_theme)
        self.addToolBar(tb)

    def _build_layout(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.path_label = QLabel(central)
        self.path_label.setStyleSheet("font-weight: 600; font-size: 12.5pt;")
        self.path_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )

        self.search_edit = QLineEdit(central)
        self.search_edit.setPlaceholderText("Search")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self._on_search_changed)

        self.entry_list = QListWidget(central)
        self.entry_list.setAlternatingRowColors(True)
        self.entry_list.itemActivated.connect(self._on_item_activated)
        self.entry_list.currentItemChanged.connect(self._update_actions)
        self.entry_list.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.entry_list.customContextMenuRequested.connect(self._show_context_menu)

        layout.addWidget(self.path_label)
        layout.addWidget(self.search_edit)
        layout.addWidget(self.entry_list)

        self.status_label = QLabel(self)
        self.statusBar().addPermanentWidget(self.status_label)

    # Rendering
    def _render(self, listing: Listing) -> None:
        self.path_label.setText(listing.current_directory)
        self.entry_list.clear()
        color = folder_color(self._theme)
        for entry in listing.visible:
            if entry.is_dir:
                text = f"{entry.name}/"
            else:
                text = f"{entry.name}    {format_size(entry.size_bytes)}"
            item = QListWidgetItem(text, self.entry_list)
            item.setData(ENTRY_ROLE, entry)
            item.setToolTip(
                f"{entry.path}\nModified {entry.modified_at:%Y-%m-%d %H:%M}"
            )
            if entry.is_dir:
                item.setForeground(color)
        self.status_label.setText(
            f"{len(listing.visible)} of {len(listing.entries)} items"
        )
        self.action_up.setEnabled(listing.current_directory != self._store.root)
        self._update_actions()

    def _apply(self, result: OperationResult, title: str) -> bool:
        """Render the listing of a successful result, or report its error."""
        if not result.ok:
            self._logger.warning(f"{title}: {result.message}")
            QMessageBox.warning(self, title, result.message)
            self._render(self._store.listing)
            return False
        if result.listing is not None:
            self._render(result.listing)
        return True

    def _selected_entry(self) -> Optional[DirectoryEntry]:
        item = self.entry_list.currentItem()
        if item is None:
            return None
        return cast(DirectoryEntry, item.data(ENTRY_ROLE))

    def _update_actions(self, *_args) -> None:
        entry = self._selected_entry()
        for action in self._entry_actions:
            action.setEnabled(entry is not None)
        if entry is not None and entry.is_dir:
            self.action_edit.setEnabled(False)

    # Slots
    @Slot()
    def _on_toggle_theme(self) -> None:
        app = QApplication.instance()
        if app is None:
            return
        self._theme = toggle_theme(cast(QApplication, app), self._theme)
        self._render(self._store.listing)

    @Slot(str)
    def _on_search_changed(self, text: str) -> None:
        self._apply(self._store.set_filter(text), "Search")

    @Slot(QListWidgetItem)
    def _on_item_activated(self, item: QListWidgetItem) -> None:
        entry = cast(DirectoryEntry, item.data(ENTRY_ROLE))
        if entry.is_dir:
            self._apply(self._store.enter(entry), "Open Folder")
        else:
            self._on_edit_clicked()

    @Slot(QPoint)
    def _show_context_menu(self, pos: QPoint) -> None:
        if self.entry_list.itemAt(pos) is None:
            return
        menu = QMenu(self)
        for action in self._entry_actions:
            menu.addAction(action)
        menu.exec(self.entry_list.viewport().mapToGlobal(pos))

    @Slot()
    def _on_up_clicked(self) -> None:
        self._apply(self._store.go_up(), "Up")

    @Slot()
    def _on_refresh_clicked(self) -> None:
        self._apply(self._store.refresh(), "Refresh")

    @Slot()
    def _on_new_folder_clicked(self) -> None:
        name, ok = QInputDialog.getText(self, "New Folder", "Folder name:")
        if not ok:
            return
        self._apply(self._store.create_folder(name), "New Folder")

    @Slot()
    def _on_edit_clicked(self) -> None:
        entry = self._selected_entry()
        if entry is None or entry.is_dir:
            return
        result = self._store.read(entry)
        if not result.ok:
            QMessageBox.warning(self, "Edit", result.message)
            return
        dlg = EditorDialog(entry, result.value, self)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            self._apply(self._store.write(entry, dlg.content()), "Save")

    @Slot()
    def _on_preview_clicked(self) -> None:
        entry = self._selected_entry()
        if entry is not None:
            self._apply(self._store.preview(entry), "Preview")

    @Slot()
    def _on_share_clicked(self) -> None:
        entry = self._selected_entry()
        if entry is not None:
            self._apply(self._store.share(entry), "Share")

    @Slot()
    def _on_copy_clicked(self) -> None:
        entry = self._selected_entry()
        if entry is not None:
            self._apply(self._store.copy(entry), "Duplicate")

    @Slot()
    def _on_move_clicked(self) -> None:
        entry = self._selected_entry()
        if entry is not None:
            self._apply(self._store.move(entry), "Move")

    @Slot()
    def _on_rename_clicked(self) -> None:
        entry = self._selected_entry()
        if entry is None:
            return
        name, ok = QInputDialog.getText(
            self, "Rename", "New name:", QLineEdit.EchoMode.Normal, entry.name
        )
        if not ok:
            return
        self._apply(self._store.rename(entry, name), "Rename")

    @Slot()
    def _on_delete_clicked(self) -> None:
        entry = self._selected_entry()
        if entry is None:
            return
        what = "folder and everything in it" if entry.is_dir else "file"
        answer = QMessageBox.question(
            self,
            "Delete",
            f"Permanently delete the {what} '{entry.name}'?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if answer == QMessageBox.StandardButton.Yes:
            self._apply(self._store.delete(entry), "Delete")
