# src/tabdeck/app_info.py
# A dependency-free module that owns app metadata + standard paths.

from __future__ import annotations

from pathlib import Path
from PySide6.QtCore import QStandardPaths

from . import __version__ as APP_VERSION

# ---- App identity ---------------------------------------------------------
APP_ORG  = "tabdeck.dev"
APP_NAME = "TabDeck"

# ---- Standard locations (cross-platform) ----------------------------------
def app_dir(kind: QStandardPaths.StandardLocation) -> Path:
    """
    Returns a writable per-user directory for the app, e.g.
    - Windows: %APPDATA%/TabDeck/tabdeck.dev
    - macOS:   ~/Library/Application Support/TabDeck/tabdeck.dev
    - Linux:   ~/.local/share/TabDeck/tabdeck.dev
    """
    base = Path(QStandardPaths.writableLocation(kind))
    path = base / APP_NAME / APP_ORG
    path.mkdir(parents=True, exist_ok=True)
    return path


def data_dir() -> Path:
    return app_dir(QStandardPaths.AppLocalDataLocation)


def settings_path() -> Path:
    return data_dir() / "settings.json"


def log_dir() -> Path:
    return data_dir() / "logs"
