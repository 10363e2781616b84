from __future__ import annotations

from pathlib import Path
import json
import os
from typing import Any, Dict, List, Optional

from tabdeck.app_info import settings_path as default_settings_path, log_dir as default_log_dir
from .log_manager import LogManager


class SettingsManager:
    """
    App settings (JSON on disk, merged over defaults) + the LogManager.

    Everything else in the app logs through the shims below so that a
    disabled or broken logger never stops the UI.
    """

    def __init__(
        self,
        settings_path: Path | None = None,
        log_dir: Path | None = None,
    ) -> None:
        # ----- paths -------------------------------------------------------
        self.settings_path: Path = Path(settings_path) if settings_path else default_settings_path()
        self.logs_dir: Path = Path(log_dir) if log_dir else default_log_dir()

        # ----- Defaults ----------------------------------------------------
        self.default_settings: Dict[str, Any] = {
            "start_path": "/dashboard/default",
            "home_path": "/",
            "label_max_length": 18,
            "tab_bar_expanded": False,
            # substrings of a base route that defeat the view cache
            "force_reload_routes": ["list", "report", "details", "update"],

            "window_width": 1280,
            "window_height": 800,

            "logging_enabled": True,
            "log_navigation": True,
            "log_tab_actions": True,
            "log_errors": True,
        }

        # ----- Load settings JSON, merged with defaults --------------------
        self.settings: Dict[str, Any] = self._load_settings()

        # ----- Logging -----------------------------------------------------
        self.log_manager: Optional[LogManager] = None
        if self.settings.get("logging_enabled", True):
            try:
                self.log_manager = LogManager(self.logs_dir)
            except OSError:
                self.log_manager = None  # don't crash if logger fails

    # ----------------------------------------------------------------------
    # Generic access
    def get(self, key: str, default: Any = None) -> Any:
        if default is None:
            default = self.default_settings.get(key)
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    # ----------------------------------------------------------------------
    # Public getters
    def start_path(self) -> str:
        return self.settings.get("start_path") or "/"

    def home_path(self) -> str:
        return self.settings.get("home_path") or "/"

    def label_max_length(self) -> int:
        try:
            return max(1, int(self.settings.get("label_max_length", 18)))
        except (TypeError, ValueError):
            return 18

    def force_reload_routes(self) -> List[str]:
        routes = self.settings.get("force_reload_routes") or []
        return [str(r) for r in routes if r]

    # ----------------------------------------------------------------------
    # Logging shims (so existing calls work even if LogManager is None)
    def log_tab_action(self, action: str, path: Any = None, note: str = "") -> None:
        if self.log_manager and self.settings.get("log_tab_actions", True):
            self.log_manager.log_tab_action(action, path, note)

    def log_navigation(self, path: str, replace: bool = False) -> None:
        if self.log_manager and self.settings.get("log_navigation", True):
            self.log_manager.log_navigation(path, replace)

    def log_debug(self, where: str, message: str) -> None:
        if self.log_manager:
            self.log_manager.log_debug(where, message)

    def log_error(self, where: str, message: str) -> None:
        if self.log_manager and self.settings.get("log_errors", True):
            self.log_manager.log_error(message, where)

    def log_system_event(self, where: str, message: str) -> None:
        if self.log_manager:
            self.log_manager.log_system_event(f"[{where}] {message}")

    def get_log_file_path(self) -> Path:
        """Return the current log file path (or the conventional one)."""
        if self.log_manager:
            return Path(self.log_manager.get_log_file_path())
        return self.logs_dir / "tabdeck.log"

    # ----------------------------------------------------------------------
    # Settings IO
    def _load_settings(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.settings_path.exists():
            try:
                data = json.loads(self.settings_path.read_text(encoding="utf-8"))
            except (OSError, ValueError):
                data = {}
            if not isinstance(data, dict):
                data = {}

        # shallow merge + one-level nested dicts
        merged = dict(self.default_settings)
        for k, v in data.items():
            if isinstance(v, dict) and isinstance(merged.get(k), dict):
                merged[k] = {**merged[k], **v}
            else:
                merged[k] = v
        return merged

    def save_settings(self) -> bool:
        """Persist settings atomically; verify; return True on success."""
        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.settings_path.with_suffix(".tmp")

            # 1) write tmp
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2)
                f.flush()
                os.fsync(f.fileno())

            # 2) replace
            tmp_path.replace(self.settings_path)

            # 3) verify read-back
            loaded = json.loads(self.settings_path.read_text(encoding="utf-8"))
            if not isinstance(loaded, dict):
                self.log_error("SettingsManager", "Settings saved but verification failed: invalid JSON structure")
                return False

            return True

        except (OSError, ValueError) as e:
            self.log_error("SettingsManager", f"Failed to save settings to file: {e}")
            return False

    def reset_to_defaults(self) -> bool:
        self.settings = dict(self.default_settings)
        return self.save_settings()
