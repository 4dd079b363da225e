"""Eye disease screening screen."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from core.image_preprocessor import load_selection
from core.utils import WorkflowState
from core.workflow import WorkflowController
from i18n import t
from ui.components.disease_cards import DiseaseCards
from ui.components.image_drop_zone import ImageDropZone
from ui.components.result_card import ResultCard
from workers.task_worker import QtTaskRunner


class EyeWidget(QWidget):
    """Upload panel, result panel, and condition cards.

    Holds no workflow state: every render reads the controller.
    """

    def __init__(self, controller: WorkflowController, runner: QtTaskRunner, parent=None):
        super().__init__(parent)
        self._controller = controller
        self._runner = runner
        self._shown_view_model = None
        self._setup_ui()
        self._connect_signals()
        self._unsubscribe = controller.subscribe(self._render)
        self._render(controller)

    def _setup_ui(self):
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(20)

        # Header
        title = QLabel(f"\U0001f441  {t('app.title')}")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 30px; font-weight: bold; color: #1F2937;")
        subtitle = QLabel(t("app.subtitle"))
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setStyleSheet("font-size: 15px; color: #4B5563;")

        panels = QHBoxLayout()
        panels.setSpacing(20)
        panels.addWidget(self._build_upload_panel(), 1)
        panels.addWidget(self._build_result_panel(), 1)

        layout.addWidget(title)
        layout.addWidget(subtitle)
        layout.addLayout(panels)
        layout.addWidget(DiseaseCards())
        layout.addStretch()

        scroll.setWidget(container)
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(scroll)

    def _build_upload_panel(self) -> QWidget:
        panel = self._panel(t("upload.title"))
        layout = panel.layout()

        self._drop_zone = ImageDropZone()

        buttons = QHBoxLayout()
        self._analyze_btn = QPushButton(t("actions.analyze"))
        self._analyze_btn.setObjectName("primaryButton")
        self._analyze_btn.setMinimumHeight(40)
        self._reset_btn = QPushButton(t("actions.reset"))
        self._reset_btn.setMinimumHeight(40)
        buttons.addWidget(self._analyze_btn, 1)
        buttons.addWidget(self._reset_btn)

        self._error_label = QLabel("")
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(
            "background: #FEF2F2; border: 1px solid #FECACA; border-radius: 10px;"
            "color: #B91C1C; padding: 10px;"
        )

        layout.addWidget(self._drop_zone)
        layout.addLayout(buttons)
        layout.addWidget(self._error_label)
        layout.addStretch()
        return panel

    def _build_result_panel(self) -> QWidget:
        panel = self._panel(t("results.title"))
        layout = panel.layout()

        self._placeholder = QLabel(t("results.placeholder"))
        self._placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._placeholder.setStyleSheet("font-size: 15px; color: #9CA3AF; padding: 60px 0;")

        self._busy = QWidget()
        busy_layout = QVBoxLayout(self._busy)
        busy_bar = QProgressBar()
        busy_bar.setRange(0, 0)
        busy_bar.setTextVisible(False)
        busy_bar.setFixedHeight(6)
        busy_label = QLabel(t("results.loading"))
        busy_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        busy_layout.addWidget(busy_bar)
        busy_layout.addWidget(busy_label)

        self._result_card = ResultCard()

        layout.addWidget(self._placeholder)
        layout.addWidget(self._busy)
        layout.addWidget(self._result_card)
        layout.addStretch()
        return panel

    @staticmethod
    def _panel(title: str) -> QWidget:
        panel = QWidget()
        panel.setObjectName("panel")
        panel.setStyleSheet("#panel { background: white; border-radius: 16px; }")
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(14)
        heading = QLabel(title)
        heading.setStyleSheet("font-size: 20px; font-weight: 600; color: #1F2937;")
        layout.addWidget(heading)
        return panel

    def _connect_signals(self):
        self._drop_zone.file_selected.connect(self._on_file_selected)
        self._analyze_btn.clicked.connect(self._controller.analyze)
        self._reset_btn.clicked.connect(self._controller.reset)

    def _on_file_selected(self, path: str):
        try:
            selection = load_selection(path)
        except OSError as e:
            QMessageBox.warning(
                self, t("common.error"), t("upload.read_failed", filename=path, reason=e)
            )
            return
        self._controller.select_image(selection)

    def _render(self, controller: WorkflowController):
        state = controller.state
        loading = state == WorkflowState.ANALYZING

        if controller.selection is not None:
            self._drop_zone.show_selection(controller.selection, controller.preview)
        else:
            self._drop_zone.clear()
        self._drop_zone.set_input_enabled(not loading)

        self._analyze_btn.setEnabled(controller.selection is not None and not loading)
        self._analyze_btn.setText(t("actions.analyzing") if loading else t("actions.analyze"))
        self._reset_btn.setVisible(
            controller.selection is not None or controller.result is not None
        )

        message = controller.error_message
        self._error_label.setText(message or "")
        self._error_label.setVisible(message is not None)

        self._busy.setVisible(loading)
        view_model = controller.view_model
        # Only redraw on change so the gauge does not re-animate
        if view_model != self._shown_view_model:
            if view_model is not None:
                self._result_card.show_result(view_model)
            else:
                self._result_card.reset()
            self._shown_view_model = view_model
        self._placeholder.setVisible(view_model is None and not loading)

    def cleanup(self):
        self._unsubscribe()
        self._runner.wait_all()
        self._controller.close()
