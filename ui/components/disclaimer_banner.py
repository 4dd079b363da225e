"""Medical disclaimer shown under every analysis result."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from i18n import t


class DisclaimerBanner(QWidget):
    """Small italic note: the prediction is a first reference, not a diagnosis."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("disclaimerBanner")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 12, 0, 0)

        text_label = QLabel(f"* {t('disclaimer.banner')}")
        text_label.setWordWrap(True)
        text_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        text_label.setStyleSheet("font-size: 11px; font-style: italic; color: #6B7280;")
        layout.addWidget(text_label)
