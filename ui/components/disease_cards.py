"""Row of info cards, one per recognized condition."""

from PyQt6.QtWidgets import QGridLayout, QLabel, QVBoxLayout, QWidget

from core.disease_info import all_entries
from core.utils import DiseaseEntry
from ui.components.result_card import gradient_style


class DiseaseCard(QWidget):
    """Color dot, name, and the first line of the description."""

    def __init__(self, entry: DiseaseEntry, parent=None):
        super().__init__(parent)
        self.setObjectName("diseaseCard")
        self.setStyleSheet("#diseaseCard { background: white; border-radius: 12px; }")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 12, 14, 12)
        layout.setSpacing(4)

        dot = QLabel()
        dot.setFixedSize(12, 12)
        dot.setStyleSheet(f"background: {gradient_style(entry.color)}; border-radius: 6px;")

        name = QLabel(entry.label.value)
        name.setStyleSheet("font-weight: 600; font-size: 13px; color: #1F2937;")

        description = QLabel(entry.description)
        description.setWordWrap(True)
        description.setStyleSheet("font-size: 11px; color: #4B5563;")
        description.setMaximumHeight(34)

        layout.addWidget(dot)
        layout.addWidget(name)
        layout.addWidget(description)
        layout.addStretch()


class DiseaseCards(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(12)
        for column, entry in enumerate(all_entries()):
            grid.addWidget(DiseaseCard(entry), 0, column)
