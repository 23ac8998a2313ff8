"""
Application Initialization
==========================
Loads the configuration, sets up logging, builds the main window and starts
the Qt event loop.
"""
import sys

from PySide6.QtWidgets import QApplication

from .config import load_config
from .errors import ConfigError
from .logging_config import setup_logging
from .ui.main_window import MainWindow


def main() -> None:
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(level=config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Bezier Sketch")

    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
