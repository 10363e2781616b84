# tabdeck/core/context.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from tabdeck.core.routing import Router, bind_location
from tabdeck.core.settings import SettingsManager
from tabdeck.core.tabs import TabManager
from tabdeck.core.view_cache import ViewCache, ViewFactory


@dataclass
class AppContext:
    """
    Application context for TabDeck.

    Holds references to the shared services; `create()` wires them.
    """

    # Optional reference to the Qt application instance
    qt_app: Optional[Any] = None

    settings_manager: Optional[SettingsManager] = None
    router: Optional[Router] = None
    tab_manager: Optional[TabManager] = None
    view_cache: Optional[ViewCache] = None

    @classmethod
    def create(
        cls,
        view_factory: ViewFactory,
        qt_app: Any | None = None,
        settings_manager: SettingsManager | None = None,
    ) -> "AppContext":
        """
        Build the router, tab manager and view cache around one
        SettingsManager and connect them:

        - the tab manager navigates through the router
        - every router location change ensures a tab exists
        - closed or refreshed tabs drop their cached views
        """
        settings_manager = settings_manager or SettingsManager()
        router = Router(settings_manager.home_path(), settings_manager=settings_manager)
        tab_manager = TabManager(router.navigate, settings_manager=settings_manager)
        view_cache = ViewCache(
            view_factory,
            force_reload_routes=settings_manager.force_reload_routes(),
            settings_manager=settings_manager,
        )

        bind_location(tab_manager, router)
        tab_manager.tabsChanged.connect(
            lambda tabs: view_cache.prune(t.path for t in tabs)
        )

        return cls(
            qt_app=qt_app,
            settings_manager=settings_manager,
            router=router,
            tab_manager=tab_manager,
            view_cache=view_cache,
        )
