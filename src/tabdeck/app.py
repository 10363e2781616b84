import sys

from PySide6.QtWidgets import QApplication

from tabdeck.app_info import APP_NAME, APP_ORG
from tabdeck.core import AppContext
from tabdeck.ui.main_window import ShellWindow
from tabdeck.ui.views import create_page_view


def main() -> None:
    """Application entry point."""
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORG)

    ctx = AppContext.create(create_page_view, qt_app=app)
    settings_manager = ctx.settings_manager

    window = ShellWindow(ctx)
    window.show()

    # first location change opens the start tab through the location binding
    ctx.router.navigate(settings_manager.start_path())

    # --- Event loop + crash logging -----------------------------------------
    try:
        sys.exit(app.exec())
    except Exception as e:
        settings_manager.log_error("App", f"Application crashed: {e}")
        raise


if __name__ == "__main__":
    main()
