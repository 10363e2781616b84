# tabdeck/ui/main_window.py
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QStackedWidget,
    QStatusBar,
    QWidget,
)

from tabdeck.app_info import APP_NAME, APP_VERSION
from tabdeck.core.context import AppContext
from tabdeck.core.tabs import base_route
from .about_dialog import AboutDialog
from .menu_builder import MenuBuilder
from .nav_drawer import NavDrawer
from .tab_bar import TabBar
from .views import HomeView


class ShellWindow(QMainWindow):
    """
    Main application window.

    Design:
      - Router location is the source of truth; every change shows
        view_cache.activate(location) in the central stack
      - TabManager owns the tab set; TabBar renders it
      - NavDrawer clicks only navigate, the location binding opens tabs
    """

    def __init__(self, ctx: AppContext, parent=None):
        super().__init__(parent)

        self.ctx = ctx
        self.settings_manager = ctx.settings_manager
        self.router = ctx.router
        self.tab_manager = ctx.tab_manager
        self.view_cache = ctx.view_cache

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.resize(
            int(self.settings_manager.get("window_width", 1280)),
            int(self.settings_manager.get("window_height", 800)),
        )

        self._setup_ui()

        self.menu_builder = MenuBuilder(self)
        self.menu_builder.build_menu_bar()

        self.router.locationChanged.connect(self._show_location)
        self.tab_manager.activeTabChanged.connect(self._update_title)
        self.tab_manager.tabRenamed.connect(lambda _path, _label: self._update_title())

        self._show_location(self.router.location)
        self.log_info("Shell window ready")

    def _setup_ui(self):
        self.nav_drawer = NavDrawer(self.router.navigate, parent=self)

        self.stack = QStackedWidget(self)
        self.home_view = HomeView(self.stack)
        self.stack.addWidget(self.home_view)

        self.tab_bar = TabBar(
            self.tab_manager,
            expanded=bool(self.settings_manager.get("tab_bar_expanded", False)),
            label_max_length=self.settings_manager.label_max_length(),
            parent=self,
        )

        central = QWidget(self)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.nav_drawer)
        layout.addWidget(self.stack, 1)
        layout.addWidget(self.tab_bar)
        self.setCentralWidget(central)

        self.setStatusBar(QStatusBar(self))

    # ------------------------------------------------------------------
    # Location -> view
    def _show_location(self, location: str):
        # nested navigation (e.g. a link rewritten to its tab key) may have
        # moved the router on already
        if location != self.router.location:
            return

        if base_route(location) == self.settings_manager.home_path() or location not in self.tab_manager:
            self.stack.setCurrentWidget(self.home_view)
            return

        view = self.view_cache.activate(location)
        if self.stack.indexOf(view) < 0:
            self.stack.addWidget(view)
        self.stack.setCurrentWidget(view)
        self.statusBar().showMessage(location)

    def _update_title(self, _path: Optional[str] = None):
        active = self.tab_manager.active_tab
        tab = self.tab_manager.find(active) if active else None
        suffix = f" - {tab.label}" if tab else ""
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}{suffix}")

    # ------------------------------------------------------------------
    # Menu actions
    def open_start_tab(self):
        self.tab_manager.open_tab(self.settings_manager.start_path())

    def close_current_tab(self):
        if self.tab_manager.active_tab:
            self.tab_manager.close_tab(self.tab_manager.active_tab)

    def close_all_tabs(self):
        self.tab_manager.clear()
        self.router.navigate(self.settings_manager.home_path())

    def refresh_current_tab(self):
        if self.tab_manager.active_tab:
            self.tab_manager.refresh_tab(self.tab_manager.active_tab)

    def duplicate_current_tab(self):
        if self.tab_manager.active_tab:
            self.tab_manager.duplicate_tab(self.tab_manager.active_tab)

    def rename_current_tab(self):
        if self.tab_manager.active_tab:
            self.tab_bar.set_expanded(True)
            self.tab_bar.begin_rename(self.tab_manager.active_tab)

    def go_back(self):
        self.router.back()

    def go_forward(self):
        self.router.forward()

    def show_about_dialog(self):
        dlg = AboutDialog(self.settings_manager, self)
        dlg.exec()

    # ------------------------------------------------------------------
    def log_info(self, message: str):
        self.settings_manager.log_system_event("ShellWindow", message)

    def closeEvent(self, event):
        self.settings_manager.set("window_width", self.width())
        self.settings_manager.set("window_height", self.height())
        self.settings_manager.set("tab_bar_expanded", self.tab_bar.expanded)
        self.settings_manager.save_settings()
        self.log_info("Shell window closed")
        super().closeEvent(event)
