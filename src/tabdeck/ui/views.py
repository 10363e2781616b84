# ui/views.py
from __future__ import annotations

from itertools import count

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from tabdeck.core.routing import split_location
from tabdeck.core.tabs import derive_label
from tabdeck.menu_items import find_item

_instances = count(1)


class PageView(QWidget):
    """
    Stand-in for a business page.

    Shows which route it was mounted for and an instance number, which
    makes keep-alive reuse (same number) and force reloads (new number)
    visible.
    """

    def __init__(self, path: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.path = path
        self.instance_id = next(_instances)

        pathname, query = split_location(path)
        item = find_item(pathname)
        title = item.title if item else derive_label(pathname)

        self.title_label = QLabel(f"<h2>{title}</h2>", self)
        self.title_label.setTextFormat(Qt.RichText)
        self.route_label = QLabel(f"Route: {pathname}", self)
        self.query_label = QLabel(f"Query: {query or '-'}", self)
        self.instance_label = QLabel(f"View instance #{self.instance_id}", self)

        layout = QVBoxLayout(self)
        layout.addWidget(self.title_label)
        layout.addWidget(self.route_label)
        layout.addWidget(self.query_label)
        layout.addWidget(self.instance_label)
        layout.addStretch(1)


class HomeView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        label = QLabel("No open tabs. Pick a page from the menu.", self)
        label.setAlignment(Qt.AlignCenter)
        layout = QVBoxLayout(self)
        layout.addWidget(label)


def create_page_view(path: str) -> QWidget:
    return PageView(path)
