# ui/nav_drawer.py
from __future__ import annotations

from typing import Callable, List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QTreeWidget, QTreeWidgetItem, QWidget

from tabdeck.menu_items import MENU_GROUPS, MenuGroup

URL_ROLE = Qt.UserRole + 1


class NavDrawer(QTreeWidget):
    """
    Navigation drawer: menu groups with their pages.

    Activating a page hands its url to `on_navigate` (the router), the
    same way a sidebar link changes the location.
    """

    def __init__(
        self,
        on_navigate: Callable[[str], None],
        groups: List[MenuGroup] | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._on_navigate = on_navigate
        self.setHeaderHidden(True)
        self.setMinimumWidth(200)

        for group in groups if groups is not None else MENU_GROUPS:
            group_item = QTreeWidgetItem(self, [group.title])
            group_item.setFlags(Qt.ItemIsEnabled)
            for entry in group.children:
                child = QTreeWidgetItem(group_item, [entry.title])
                child.setData(0, URL_ROLE, entry.url)
        self.expandAll()

        self.itemClicked.connect(self._on_item_activated)

    def _on_item_activated(self, item: QTreeWidgetItem, _column: int = 0):
        url = item.data(0, URL_ROLE)
        if url:
            self._on_navigate(url)
