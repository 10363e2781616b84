# core/view_cache.py
from __future__ import annotations

import uuid
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QWidget

from .safe_settings import SafeSettings
from .tabs import base_route

ViewFactory = Callable[[str], QWidget]


class ViewCache(QObject):
    """
    Keep-alive cache of mounted views keyed by tab path.

    Coming back to a tab reuses its view. Routes matching one of the
    force-reload substrings get a randomized key on every visit, so their
    view is rebuilt each time.
    """

    viewEvicted = Signal(str)   # key

    def __init__(
        self,
        factory: ViewFactory,
        force_reload_routes: Sequence[str] = (),
        settings_manager=None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._factory = factory
        self.force_reload_routes: List[str] = list(force_reload_routes)
        self.settings = SafeSettings(settings_manager)
        self._views: Dict[str, QWidget] = {}
        # tab path -> randomized key currently mounted for it
        self._volatile: Dict[str, str] = {}

    def is_force_reload(self, path: str) -> bool:
        route = base_route(path)
        return any(marker in route for marker in self.force_reload_routes)

    def activate(self, path: str) -> QWidget:
        """
        Return the view to show for `path`, building it when needed.

        Args:
            path: Tab path (pathname plus query)

        Returns:
            The mounted view widget
        """
        if self.is_force_reload(path):
            self.evict(path)
            key = f"{path}#{uuid.uuid4().hex}"
            self._volatile[path] = key
        else:
            key = path
            view = self._views.get(key)
            if view is not None:
                return view

        view = self._factory(path)
        self._views[key] = view
        self.settings.log_debug("ViewCache", f"mounted {key}")
        return view

    def view_for(self, path: str) -> Optional[QWidget]:
        return self._views.get(self._volatile.get(path, path))

    def evict(self, path: str) -> None:
        key = self._volatile.pop(path, path)
        view = self._views.pop(key, None)
        if view is None:
            return
        view.deleteLater()
        self.settings.log_debug("ViewCache", f"evicted {key}")
        self.viewEvicted.emit(key)

    def prune(self, open_paths: Iterable[str]) -> None:
        """Evict views whose tab is no longer open."""
        keep = set(open_paths)
        stale = [p for p in self._paths() if p not in keep]
        for path in stale:
            self.evict(path)

    def keys(self) -> List[str]:
        return list(self._views)

    def _paths(self) -> List[str]:
        volatile_keys = set(self._volatile.values())
        plain = [k for k in self._views if k not in volatile_keys]
        return plain + list(self._volatile)

    def __contains__(self, path: object) -> bool:
        return path in self._views or path in self._volatile

    def __len__(self) -> int:
        return len(self._views)
