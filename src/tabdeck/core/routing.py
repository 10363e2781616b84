# core/routing.py
from __future__ import annotations

from typing import List, Optional, Tuple, TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from .safe_settings import SafeSettings

if TYPE_CHECKING:
    from .tabs import TabManager


def split_location(path: str) -> Tuple[str, str]:
    """Split a location into (pathname, query) without the '?'."""
    pathname, _, query = (path or "").partition("?")
    return pathname or "/", query


class Router(QObject):
    """
    In-memory location + history for the shell.

    The router is the source of truth for "where the user is"; the tab
    manager only asks it to move.
    """

    locationChanged = Signal(str)

    def __init__(self, initial: str = "/", settings_manager=None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.settings = SafeSettings(settings_manager)
        self._entries: List[str] = [initial]
        self._index = 0

    @property
    def location(self) -> str:
        return self._entries[self._index]

    @property
    def history(self) -> List[str]:
        return list(self._entries)

    def navigate(self, path: str, replace: bool = False) -> None:
        """
        Move to `path`.

        Args:
            path: Target location (pathname plus optional query)
            replace: Overwrite the current history entry instead of pushing
        """
        if not path:
            self.settings.log_error("Router", "navigate() called with an empty path")
            return
        if path == self.location:
            return
        if replace:
            self._entries[self._index] = path
        else:
            # pushing drops any forward entries
            del self._entries[self._index + 1:]
            self._entries.append(path)
            self._index += 1
        self.locationChanged.emit(path)

    def can_go_back(self) -> bool:
        return self._index > 0

    def can_go_forward(self) -> bool:
        return self._index < len(self._entries) - 1

    def back(self) -> None:
        if self.can_go_back():
            self._index -= 1
            self.locationChanged.emit(self.location)

    def forward(self) -> None:
        if self.can_go_forward():
            self._index += 1
            self.locationChanged.emit(self.location)


def bind_location(tab_manager: "TabManager", router: Router) -> None:
    """Let every location change ensure a tab exists for it."""
    router.locationChanged.connect(tab_manager.sync_location)
