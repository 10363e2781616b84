# ui/menu_builder.py
from PySide6.QtWidgets import QMenuBar
from PySide6.QtGui import QAction, QKeySequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .main_window import ShellWindow


class MenuBuilder:
    """
    Builds menu bar for ShellWindow.

    Keeps UI construction out of the window's tab logic.
    """

    def __init__(self, window: 'ShellWindow'):
        """
        Initialize menu builder.

        Args:
            window: Parent ShellWindow instance
        """
        self.window = window
        self.actions = {}

    def build_menu_bar(self) -> QMenuBar:
        """
        Build and return the complete menu bar.

        Returns:
            Configured menu bar
        """
        menubar = self.window.menuBar()

        self._create_file_menu(menubar)
        self._create_tabs_menu(menubar)
        self._create_help_menu(menubar)

        return menubar

    def _add(self, menu, key: str, text: str, slot, shortcut=None) -> QAction:
        action = QAction(text, self.window)
        if shortcut is not None:
            action.setShortcut(shortcut)
        action.triggered.connect(slot)
        menu.addAction(action)
        self.actions[key] = action
        return action

    def _create_file_menu(self, menubar: QMenuBar):
        """Create File menu with actions."""
        file_menu = menubar.addMenu("&File")

        self._add(file_menu, "new_tab", "New &Tab", self.window.open_start_tab, QKeySequence.AddTab)
        self._add(file_menu, "close_tab", "&Close Tab", self.window.close_current_tab, QKeySequence.Close)
        self._add(file_menu, "close_all", "Close &All Tabs", self.window.close_all_tabs)

        file_menu.addSeparator()

        self._add(file_menu, "exit", "E&xit", self.window.close, QKeySequence.Quit)

    def _create_tabs_menu(self, menubar: QMenuBar):
        """Create Tabs menu."""
        tabs_menu = menubar.addMenu("&Tabs")

        self._add(tabs_menu, "refresh", "&Refresh Tab", self.window.refresh_current_tab, QKeySequence.Refresh)
        self._add(tabs_menu, "duplicate", "&Duplicate Tab", self.window.duplicate_current_tab)
        self._add(tabs_menu, "rename", "Re&name Tab...", self.window.rename_current_tab)

        tabs_menu.addSeparator()

        self._add(tabs_menu, "back", "&Back", self.window.go_back, QKeySequence.Back)
        self._add(tabs_menu, "forward", "&Forward", self.window.go_forward, QKeySequence.Forward)

        tabs_menu.addSeparator()

        self._add(tabs_menu, "toggle_bar", "Toggle Tab &Bar", self.window.tab_bar.toggle)

    def _create_help_menu(self, menubar: QMenuBar):
        """Create Help menu."""
        help_menu = menubar.addMenu("&Help")

        self._add(help_menu, "about", "&About", self.window.show_about_dialog)
