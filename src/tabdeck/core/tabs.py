# core/tabs.py
from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from .safe_settings import SafeSettings

# Query parameter used to make repeated opens of one route distinct tabs
SUFFIX_PARAM = "_ts"
COPY_MARKER = "(copy)"
HOME_LABEL = "Home"


def base_route(path: str) -> str:
    """Return `path` without its query string."""
    return (path or "").split("?", 1)[0]


def derive_label(path: str) -> str:
    """
    Build a human readable label from a route.

    "/" -> "Home", "/invoice/list?_ts=1" -> "Invoice list"
    """
    if not path or path == "/":
        return HOME_LABEL
    segments = [s for s in base_route(path).split("/") if s]
    if not segments:
        return HOME_LABEL
    first = segments[0][:1].upper() + segments[0][1:].lower()
    rest = " ".join(segments[1:]).lower()
    return f"{first} {rest}" if rest else first


def truncate_label(label: str, max_length: int = 18) -> str:
    if len(label) <= max_length:
        return label
    return label[:max_length] + "..."


@dataclass(frozen=True)
class Tab:
    path: str
    label: str

    @property
    def base_route(self) -> str:
        return base_route(self.path)


NavigateFn = Callable[..., None]


class TabManager(QObject):
    """
    Owns the ordered set of open tabs and the active tab.

    Handles:
    - Opening, switching, closing, renaming, refreshing and duplicating tabs
    - Generating unique path keys for repeated opens of one route
    - Driving the navigation port so the location follows the active tab
    - Adopting locations reached without the manager (links, deep links)

    Every operation finishes its state change before any signal is emitted
    or navigation is requested.
    """

    tabsChanged = Signal(list)          # list[Tab]
    activeTabChanged = Signal(object)   # str | None
    tabRenamed = Signal(str, str)       # path, label
    tabRefreshed = Signal(str, str)     # old path, new path
    tabClosed = Signal(str)             # path

    def __init__(
        self,
        navigate: NavigateFn,
        settings_manager=None,
        clock: Optional[Callable[[], int]] = None,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize tab manager.

        Args:
            navigate: Callable ``navigate(path, replace=False)`` that moves the location
            settings_manager: Optional SettingsManager used for home path and logging
            clock: Millisecond clock used for path suffixes (defaults to wall time)
            parent: Qt parent object
        """
        super().__init__(parent)
        self._navigate_fn = navigate
        self.settings = SafeSettings(settings_manager)
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._last_stamp = 0
        self._navigating = False

        self._tabs: List[Tab] = []
        self._active: Optional[str] = None

    # ------------------------------------------------------------------
    # Read access
    @property
    def tabs(self) -> List[Tab]:
        return list(self._tabs)

    @property
    def active_tab(self) -> Optional[str]:
        return self._active

    def paths(self) -> List[str]:
        return [t.path for t in self._tabs]

    def find(self, path: str) -> Optional[Tab]:
        for tab in self._tabs:
            if tab.path == path:
                return tab
        return None

    def __len__(self) -> int:
        return len(self._tabs)

    def __contains__(self, path: object) -> bool:
        return any(t.path == path for t in self._tabs)

    def home_path(self) -> str:
        return self.settings.get("home_path", "/")


    # ------------------------------------------------------------------
    # Operations
    def open_tab(self, path: str, label: Optional[str] = None) -> str:
        """
        Open a tab for `path`, or activate it if that exact path is open.

        A path without a query string gets a fresh ``?_ts=`` suffix, so
        opening the same route twice yields two tabs.

        Args:
            path: Route, optionally with its own query string
            label: Display label (derived from the path when empty)

        Returns:
            The path key of the opened or activated tab
        """
        previous = self._active
        resolved = path if "?" in path else self._fresh_path(path)

        added = self.find(resolved) is None
        if added:
            self._tabs.append(Tab(resolved, label or derive_label(resolved)))
            self.settings.log_tab_action("Opened", resolved)
        self._active = resolved

        self._publish(added, previous)
        self._navigate(resolved)
        return resolved

    def switch_tab(self, path: str) -> None:
        """Activate an open tab and navigate to it."""
        if self.find(path) is None:
            self._ignore("switch_tab", path)
            return
        previous = self._active
        self._active = path
        self._publish(False, previous)
        self._navigate(path)

    def close_tab(self, path: str) -> None:
        """
        Close the tab at `path`.

        Closing the active tab falls back to the first remaining tab, or to
        the home path when nothing is left open.
        """
        index = self._index_of(path)
        if index is None:
            self._ignore("close_tab", path)
            return

        previous = self._active
        was_active = path == previous
        del self._tabs[index]
        if was_active:
            self._active = self._tabs[0].path if self._tabs else None

        self.settings.log_tab_action("Closed", path)
        self._publish(True, previous)
        self.tabClosed.emit(path)

        if was_active:
            self._navigate(self._active if self._active is not None else self.home_path())

    def rename_tab(self, path: str, new_label: str) -> None:
        index = self._index_of(path)
        if index is None:
            self._ignore("rename_tab", path)
            return
        self._tabs[index] = replace(self._tabs[index], label=new_label)
        self.settings.log_tab_action("Renamed", path, f"label={new_label!r}")
        self._publish(True, self._active)
        self.tabRenamed.emit(path, new_label)

    def refresh_tab(self, path: str) -> Optional[str]:
        """
        Give the tab a new path key so its view is rebuilt in place.

        Navigation replaces the current history entry instead of pushing one.

        Returns:
            The new path, or None if `path` is not open
        """
        index = self._index_of(path)
        if index is None:
            self._ignore("refresh_tab", path)
            return None

        previous = self._active
        new_path = self._fresh_path(base_route(path))
        self._tabs[index] = replace(self._tabs[index], path=new_path)
        self._active = new_path

        self.settings.log_tab_action("Refreshed", path, f"-> {new_path}")
        self._publish(True, previous)
        self.tabRefreshed.emit(path, new_path)
        self._navigate(new_path, replace=True)
        return new_path

    def duplicate_tab(self, path: str) -> Optional[str]:
        """Open a second, independent tab on the same route as `path`."""
        if self.find(path) is None:
            self._ignore("duplicate_tab", path)
            return None
        new_path = self._fresh_path(base_route(path))
        return self.open_tab(new_path, f"{derive_label(new_path)} {COPY_MARKER}")

    def sync_location(self, location: str) -> None:
        """
        Make sure the current location has a tab.

        Called for every location change. Changes caused by this manager's
        own navigation are skipped. The home path never gets a tab; reaching
        it while tabs are open (e.g. Back onto the first history entry)
        sends the location back to the active tab.
        """
        if self._navigating or not location:
            return
        if base_route(location) in ("", self.home_path()):
            if self._active is not None:
                self._navigate(self._active, replace=True)
            return

        previous = self._active
        # bare route from a link: give it a key and rewrite the location
        rewrite = "?" not in location
        resolved = self._fresh_path(location) if rewrite else location

        added = self.find(resolved) is None
        if added:
            self._tabs.append(Tab(resolved, derive_label(resolved)))
            self.settings.log_tab_action("Adopted", resolved, f"from {location}")
        self._active = resolved

        self._publish(added, previous)
        if rewrite:
            self._navigate(resolved, replace=True)

    def clear(self) -> None:
        """Drop every tab without navigating."""
        if not self._tabs and self._active is None:
            return
        previous = self._active
        self._tabs = []
        self._active = None
        self.settings.log_tab_action("Cleared all tabs")
        self._publish(True, previous)

    # ------------------------------------------------------------------
    # Internals
    def _index_of(self, path: str) -> Optional[int]:
        for i, tab in enumerate(self._tabs):
            if tab.path == path:
                return i
        return None

    def _next_stamp(self) -> int:
        stamp = int(self._clock())
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return stamp

    def _fresh_path(self, route: str) -> str:
        route = base_route(route)
        while True:
            candidate = f"{route}?{SUFFIX_PARAM}={self._next_stamp()}"
            if self.find(candidate) is None:
                return candidate

    def _publish(self, tabs_changed: bool, previous_active: Optional[str]) -> None:
        if tabs_changed:
            self.tabsChanged.emit(list(self._tabs))
        if self._active != previous_active:
            self.activeTabChanged.emit(self._active)

    def _navigate(self, path: str, replace: bool = False) -> None:
        self.settings.log_navigation(path, replace)
        self._navigating = True
        try:
            self._navigate_fn(path, replace=replace)
        finally:
            self._navigating = False

    def _ignore(self, op: str, path: str) -> None:
        self.settings.log_debug("TabManager", f"{op}: no open tab for {path!r}")
