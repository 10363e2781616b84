from .context import AppContext
from .routing import Router, bind_location, split_location
from .tabs import Tab, TabManager, base_route, derive_label, truncate_label
from .view_cache import ViewCache

__all__ = [
    "AppContext",
    "Router",
    "bind_location",
    "split_location",
    "Tab",
    "TabManager",
    "base_route",
    "derive_label",
    "truncate_label",
    "ViewCache",
]
