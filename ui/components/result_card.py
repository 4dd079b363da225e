"""Result card: predicted condition, confidence, and guidance text."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QVBoxLayout, QWidget

from core.utils import ColorGradient, ViewModel
from i18n import t
from ui.components.confidence_gauge import ConfidenceGauge
from ui.components.disclaimer_banner import DisclaimerBanner


def gradient_style(color: ColorGradient) -> str:
    """Qt stylesheet fragment for a left-to-right two-stop gradient."""
    start, end = color
    return (
        "qlineargradient(x1:0, y1:0, x2:1, y2:0, "
        f"stop:0 {start}, stop:1 {end})"
    )


class ResultCard(QWidget):
    """Displays a ViewModel."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("resultCard")
        self._setup_ui()
        self.hide()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        # Prediction badge
        self._badge = QWidget()
        self._badge.setObjectName("predictionBadge")
        badge_layout = QHBoxLayout(self._badge)
        badge_layout.setContentsMargins(20, 16, 20, 16)

        badge_text = QVBoxLayout()
        caption = QLabel(t("results.prediction"))
        caption.setStyleSheet("color: white; font-size: 12px;")
        self._label = QLabel("")
        self._label.setStyleSheet("color: white; font-size: 26px; font-weight: bold;")
        self._confidence_label = QLabel("")
        self._confidence_label.setStyleSheet("color: white; font-size: 12px;")
        badge_text.addWidget(caption)
        badge_text.addWidget(self._label)
        badge_text.addWidget(self._confidence_label)

        self._gauge = ConfidenceGauge(size=96)

        badge_layout.addLayout(badge_text, 1)
        badge_layout.addWidget(self._gauge)

        # Confidence bar
        bar_header = QHBoxLayout()
        bar_header.addWidget(QLabel(t("results.accuracy")))
        bar_header.addStretch()
        self._bar_value = QLabel("")
        self._bar_value.setStyleSheet("font-weight: 600;")
        bar_header.addWidget(self._bar_value)

        self._bar = QProgressBar()
        self._bar.setRange(0, 1000)
        self._bar.setTextVisible(False)
        self._bar.setFixedHeight(10)

        # Description and recommendation
        self._description = self._text_block(t("results.description"), "#F9FAFB", "#1F2937")
        self._recommendation = self._text_block(t("results.recommendation"), "#EFF6FF", "#1E3A8A")

        layout.addWidget(self._badge)
        layout.addLayout(bar_header)
        layout.addWidget(self._bar)
        layout.addWidget(self._description)
        layout.addWidget(self._recommendation)
        layout.addWidget(DisclaimerBanner())

    @staticmethod
    def _text_block(title: str, background: str, foreground: str) -> QWidget:
        block = QWidget()
        block.setStyleSheet(f"background: {background}; border-radius: 10px;")
        block_layout = QVBoxLayout(block)
        block_layout.setContentsMargins(14, 12, 14, 12)
        heading = QLabel(title)
        heading.setStyleSheet(f"font-weight: 600; color: {foreground};")
        body = QLabel("")
        body.setObjectName("body")
        body.setWordWrap(True)
        body.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        body.setStyleSheet(f"color: {foreground};")
        block_layout.addWidget(heading)
        block_layout.addWidget(body)
        return block

    def show_result(self, view_model: ViewModel):
        """Display a derived view model."""
        gradient = gradient_style(view_model.color_token)

        self._badge.setStyleSheet(
            f"#predictionBadge {{ background: {gradient}; border-radius: 16px; }}"
        )
        self._label.setText(view_model.label)
        self._confidence_label.setText(
            t("results.confidence", percentage=view_model.percentage_text)
        )
        self._gauge.set_score(view_model.confidence, view_model.color_token[1])

        self._bar_value.setText(view_model.percentage_text)
        self._bar.setValue(int(round(view_model.confidence * 1000)))
        self._bar.setStyleSheet(
            "QProgressBar { background: #E5E7EB; border: none; border-radius: 5px; }"
            f"QProgressBar::chunk {{ background: {gradient}; border-radius: 5px; }}"
        )

        self._description.findChild(QLabel, "body").setText(view_model.description)
        self._recommendation.findChild(QLabel, "body").setText(view_model.recommendation)
        self.show()

    def reset(self):
        """Clear results and hide."""
        self._gauge.reset()
        self._bar.setValue(0)
        self.hide()
