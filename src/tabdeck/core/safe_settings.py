# ---------------------------------------------------------------------------
# Safe settings shim
# ---------------------------------------------------------------------------
class SafeSettings:
    """
    Wraps an optional SettingsManager so core objects can read settings and
    log without caring whether one was supplied.
    """
    def __init__(self, backing=None):
        self._b = backing

    # reads
    def get(self, key, default=None):
        if self._b is None:
            return default
        value = self._b.get(key, default)
        return default if value is None else value

    # logging helpers
    def log_tab_action(self, action, path=None, details=""):
        if self._b is not None:
            self._b.log_tab_action(action, path, details)

    def log_navigation(self, path, replace=False):
        if self._b is not None:
            self._b.log_navigation(path, replace)

    def log_debug(self, where, message):
        if self._b is not None:
            self._b.log_debug(where, message)

    def log_error(self, where, message):
        if self._b is not None:
            self._b.log_error(where, message)

    def log_system_event(self, where, message):
        if self._b is not None:
            self._b.log_system_event(where, message)
