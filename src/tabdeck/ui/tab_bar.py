# ui/tab_bar.py
from __future__ import annotations

from typing import Dict, Optional, TYPE_CHECKING

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from tabdeck.core.tabs import Tab, truncate_label

if TYPE_CHECKING:
    from tabdeck.core.tabs import TabManager

PATH_ROLE = Qt.UserRole + 1


class RenameEdit(QLineEdit):
    """Inline label editor; Escape cancels, Enter or focus-out commits."""

    cancelled = Signal()

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key_Escape:
            self.cancelled.emit()
            return
        super().keyPressEvent(event)


class TabRow(QWidget):
    """One entry of the tab bar."""

    def __init__(self, tab: Tab, active: bool, expanded: bool, max_length: int, parent=None):
        super().__init__(parent)
        self.path = tab.path

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 2, 2, 2)
        layout.setSpacing(2)

        text = truncate_label(tab.label, max_length) if expanded else tab.label[:1]
        self.label = QLabel(text, self)
        font = QFont(self.label.font())
        font.setBold(active)
        self.label.setFont(font)
        layout.addWidget(self.label, 1)
        self.setToolTip(tab.label)

        self.refresh_button: Optional[QToolButton] = None
        self.duplicate_button: Optional[QToolButton] = None
        self.close_button: Optional[QToolButton] = None

        if expanded:
            self.refresh_button = self._tool_button("⟳", "Refresh")
            self.duplicate_button = self._tool_button("+", "Duplicate")
            self.close_button = self._tool_button("×", "Close")
            for button in (self.refresh_button, self.duplicate_button, self.close_button):
                layout.addWidget(button)
        else:
            self.label.setAlignment(Qt.AlignCenter)

    def _tool_button(self, text: str, tip: str) -> QToolButton:
        button = QToolButton(self)
        button.setText(text)
        button.setToolTip(tip)
        button.setAutoRaise(True)
        return button


class TabBar(QWidget):
    """
    Collapsible sidebar listing the open tabs.

    Collapsed: first letter of each label, full label as tooltip.
    Expanded: truncated label (full label as tooltip) plus Refresh / Duplicate / Close, and
    double-click to rename in place.
    """

    WIDTH_OPEN = 240
    WIDTH_CLOSED = 56

    def __init__(
        self,
        tab_manager: "TabManager",
        expanded: bool = False,
        label_max_length: int = 18,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.tab_manager = tab_manager
        self.expanded = expanded
        self.label_max_length = label_max_length
        self.rows: Dict[str, TabRow] = {}

        self.editing_path: Optional[str] = None
        self.editor: Optional[RenameEdit] = None

        self.toggle_button = QToolButton(self)
        self.toggle_button.clicked.connect(self.toggle)

        self.title = QLabel("<b>My Tabs</b>", self)
        self.title.setTextFormat(Qt.RichText)

        self.list = QListWidget(self)
        self.list.itemClicked.connect(self._on_item_clicked)
        self.list.itemDoubleClicked.connect(self._on_item_double_clicked)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self.toggle_button, 0, Qt.AlignLeft)
        root.addWidget(self.title)
        root.addWidget(self.list, 1)

        tab_manager.tabsChanged.connect(lambda _tabs: self.rebuild())
        tab_manager.activeTabChanged.connect(lambda _path: self.rebuild())

        self._apply_width()
        self.rebuild()

    # ------------------------------------------------------------------
    def toggle(self) -> None:
        self.set_expanded(not self.expanded)

    def set_expanded(self, expanded: bool) -> None:
        if expanded == self.expanded:
            return
        self.cancel_rename()
        self.expanded = expanded
        self._apply_width()
        self.rebuild()

    def _apply_width(self) -> None:
        self.setFixedWidth(self.WIDTH_OPEN if self.expanded else self.WIDTH_CLOSED)
        self.toggle_button.setText("›" if self.expanded else "‹")
        self.title.setVisible(self.expanded)

    def rebuild(self) -> None:
        """Recreate one row per open tab."""
        self.editing_path = None
        self.editor = None
        self.rows.clear()
        self.list.clear()

        active = self.tab_manager.active_tab
        for tab in self.tab_manager.tabs:
            item = QListWidgetItem(self.list)
            item.setData(PATH_ROLE, tab.path)
            row = TabRow(tab, tab.path == active, self.expanded, self.label_max_length)
            item.setSizeHint(row.sizeHint())
            self.list.setItemWidget(item, row)
            if tab.path == active:
                item.setSelected(True)
            self._wire_row(row)
            self.rows[tab.path] = row

    def _wire_row(self, row: TabRow) -> None:
        path = row.path
        if row.refresh_button is not None:
            row.refresh_button.clicked.connect(lambda: self.tab_manager.refresh_tab(path))
        if row.duplicate_button is not None:
            row.duplicate_button.clicked.connect(lambda: self.tab_manager.duplicate_tab(path))
        if row.close_button is not None:
            row.close_button.clicked.connect(lambda: self.tab_manager.close_tab(path))

    # ------------------------------------------------------------------
    # Inline editing
    def begin_rename(self, path: str) -> None:
        tab = self.tab_manager.find(path)
        row = self.rows.get(path)
        if tab is None or row is None or not self.expanded:
            return
        self.cancel_rename()

        editor = RenameEdit(row)
        editor.setText(tab.label)
        editor.selectAll()
        editor.editingFinished.connect(self.commit_rename)
        editor.cancelled.connect(self.cancel_rename)
        row.layout().replaceWidget(row.label, editor)
        row.label.hide()
        editor.show()
        editor.setFocus()

        self.editing_path = path
        self.editor = editor

    def commit_rename(self) -> None:
        if self.editing_path is None or self.editor is None:
            return
        path, text = self.editing_path, self.editor.text()
        self.editing_path = None
        # renaming rebuilds the rows, which drops the editor
        self.tab_manager.rename_tab(path, text)

    def cancel_rename(self) -> None:
        if self.editing_path is None or self.editor is None:
            return
        row = self.rows.get(self.editing_path)
        editor = self.editor
        self.editing_path = None
        self.editor = None
        if row is not None:
            row.layout().replaceWidget(editor, row.label)
            row.label.show()
        editor.hide()
        editor.deleteLater()

    # ------------------------------------------------------------------
    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        path = item.data(PATH_ROLE)
        if path and path != self.editing_path:
            self.tab_manager.switch_tab(path)

    def _on_item_double_clicked(self, item: QListWidgetItem) -> None:
        path = item.data(PATH_ROLE)
        if path:
            self.begin_rename(path)
