"""EyeScan: eye disease screening client.

Entry point for the desktop application.
"""

import logging
import os
import sys

from dotenv import load_dotenv
from PyQt6.QtWidgets import QApplication, QMessageBox

import i18n
from core.config import load_config
from core.errors import ConfigurationError
from core.workflow import WorkflowController


def _setup_logging():
    level = os.environ.get("EYESCAN_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Application entry point."""
    # Handle PyInstaller frozen app
    if getattr(sys, "frozen", False):
        os.chdir(os.path.dirname(sys.executable))

    load_dotenv()
    _setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("EyeScan")
    app.setApplicationVersion("1.0.0")
    app.setOrganizationName(i18n.ORGANIZATION)

    # Initialize i18n before any UI
    i18n.init()

    # The endpoint is required: fail before any window exists
    try:
        config = load_config()
    except ConfigurationError as e:
        logging.getLogger(__name__).critical("%s", e)
        QMessageBox.critical(None, i18n.t("errors.configuration"), str(e))
        sys.exit(2)

    # Import UI after config (avoids building widgets if startup fails)
    from ui.main_window import MainWindow
    from workers.task_worker import QtTaskRunner

    runner = QtTaskRunner()
    controller = WorkflowController(config, runner=runner)

    window = MainWindow(controller, runner)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
