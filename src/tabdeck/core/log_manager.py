import logging
from datetime import datetime
from pathlib import Path


class CustomFileHandler(logging.Handler):
    """Custom logging handler that opens and closes file for each write"""
    def __init__(self, log_file: Path):
        super().__init__()
        self.log_file = Path(log_file)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(msg + '\n')
                f.flush()
        except OSError:
            self.handleError(record)


class TabDeckFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%H%M%S.%f")[:-3]  # hhmmss.fff
        return f"{timestamp}: {record.getMessage()}"


class LogManager:
    # level tag -> prefix written in front of INFO messages
    TAGS = {
        "SYSTEM": "[SYSTEM]",
        "NAV": "[NAVIGATION]",
        "TAB": "[TAB]",
    }

    def __init__(self, log_dir: Path, app_name: str = "tabdeck"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        today = datetime.now().strftime("%Y%m%d")
        self.log_file = self.log_dir / f"{today}_{app_name}.log"

        self._setup_logging()
        self.log("Application starting", "SYSTEM")

    def _setup_logging(self) -> None:
        self.logger = logging.getLogger('tabdeck')
        self.logger.setLevel(logging.DEBUG)

        # Remove existing handlers (use a copy of the list!)
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        file_handler = CustomFileHandler(self.log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(TabDeckFormatter())

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(TabDeckFormatter())

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def log(self, message: str, level: str = "INFO") -> None:
        if level in self.TAGS:
            self.logger.info(f"{self.TAGS[level]} {message}")
            return
        numeric = logging.getLevelName(level)
        if not isinstance(numeric, int):
            numeric = logging.INFO
        self.logger.log(numeric, message)

    def log_navigation(self, path: str, replace: bool = False) -> None:
        mode = " (replace)" if replace else ""
        self.log(f"Navigated to: {path}{mode}", "NAV")

    def log_tab_action(self, action: str, path=None, details: str = "") -> None:
        tab_info = f"Tab[{path}] " if path else ""
        self.log(f"{tab_info}{action} {details}".strip(), "TAB")

    def log_debug(self, where: str, message: str) -> None:
        self.log(f"[{where}] {message}", "DEBUG")

    def log_error(self, error_msg: str, context: str = "") -> None:
        full_msg = f"{error_msg}"
        if context:
            full_msg += f" | Context: {context}"
        self.log(full_msg, "ERROR")

    def log_system_event(self, event: str, details: str = "") -> None:
        full_msg = f"{event}"
        if details:
            full_msg += f" | {details}"
        self.log(full_msg, "SYSTEM")

    def get_log_file_path(self) -> str:
        return str(self.log_file)
