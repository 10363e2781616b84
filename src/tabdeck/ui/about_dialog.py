# src/tabdeck/ui/about_dialog.py
from __future__ import annotations
import platform
import sys

from PySide6 import __version__ as PYSIDE_VERSION
from PySide6.QtCore import Qt, qVersion
from PySide6.QtGui import QTextOption
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QLabel, QVBoxLayout, QPlainTextEdit, QWidget

from tabdeck.app_info import APP_NAME, APP_VERSION


class AboutDialog(QDialog):
    def __init__(self, settings_manager=None, parent: QWidget | None = None):
        super().__init__(parent)
        self.settings_manager = settings_manager
        self.setWindowTitle(f"About {APP_NAME}")
        self.setWindowModality(Qt.ApplicationModal)
        self.setMinimumWidth(480)

        title = QLabel(f"<b>{APP_NAME}</b><br>Version {APP_VERSION}", self)
        title.setTextFormat(Qt.RichText)

        details = QPlainTextEdit(self)
        details.setReadOnly(True)
        details.setPlainText(self._system_info_text())
        details.setWordWrapMode(QTextOption.WordWrap)

        buttons = QDialogButtonBox(QDialogButtonBox.Close, parent=self)
        buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addWidget(title)
        root.addWidget(details, 1)
        root.addWidget(buttons)

    def _system_info_text(self) -> str:
        lines = [
            f"Python:  {sys.version.split()[0]}",
            f"PySide6: {PYSIDE_VERSION}",
            f"Qt:      {qVersion()}",
            f"OS:      {platform.system()} {platform.release()}",
        ]
        if self.settings_manager is not None:
            lines.append(f"Settings: {self.settings_manager.settings_path}")
            lines.append(f"Log file: {self.settings_manager.get_log_file_path()}")
        return "\n".join(lines)
