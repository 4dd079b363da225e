"""Main application window."""

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QApplication, QMainWindow, QMessageBox

from core.workflow import WorkflowController
from i18n import LANGUAGES, get_current_language, set_language, t
from ui.eye_widget import EyeWidget
from workers.task_worker import QtTaskRunner


class MainWindow(QMainWindow):
    """Hosts the screening screen and the menu bar."""

    def __init__(self, controller: WorkflowController, runner: QtTaskRunner):
        super().__init__()
        self.setWindowTitle(t("app.title"))
        self.setMinimumSize(960, 680)
        self.resize(1180, 780)
        self.setStyleSheet("QMainWindow { background: #EEF2FF; }")

        self._eye_widget = EyeWidget(controller, runner)
        self.setCentralWidget(self._eye_widget)
        self._setup_menu_bar()

    def _setup_menu_bar(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu(t("menu.file"))
        quit_action = QAction(t("menu.quit"), self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        language_menu = menu_bar.addMenu(t("menu.language"))
        group = QActionGroup(self)
        for code, info in LANGUAGES.items():
            action = QAction(info["native_name"], self, checkable=True)
            action.setChecked(code == get_current_language())
            action.triggered.connect(lambda checked, c=code: self._change_language(c))
            group.addAction(action)
            language_menu.addAction(action)

    def _change_language(self, code: str):
        set_language(code)
        QMessageBox.information(self, t("menu.language"), t("menu.language_restart"))

    def closeEvent(self, event):
        """Wait for outstanding workers before closing."""
        self._eye_widget.cleanup()
        QApplication.processEvents()
        event.accept()
