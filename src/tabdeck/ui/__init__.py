"""
UI components for the TabDeck shell window.
"""

from .menu_builder import MenuBuilder
from .nav_drawer import NavDrawer
from .tab_bar import TabBar
from .main_window import ShellWindow

__all__ = [
    'MenuBuilder',
    'NavDrawer',
    'TabBar',
    'ShellWindow',
]
