"""Image drag-and-drop zone with preview for eye photos."""

from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QDragEnterEvent, QDropEvent, QPainter, QPen, QPixmap
from PyQt6.QtWidgets import QFileDialog, QLabel, QVBoxLayout, QWidget

from core.image_preprocessor import decode_data_uri
from core.utils import SUPPORTED_IMAGE_EXTENSIONS, Selection, format_file_size, is_supported_image
from i18n import t


class ImageDropZone(QWidget):
    """Drop zone that reports picked files and renders the controller's preview.

    The zone never holds selection state of its own: it emits
    ``file_selected`` and waits for show_selection()/clear() calls.
    """

    file_selected = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._has_selection = False
        self._drag_over = False
        self._enabled_for_input = True
        self.setAcceptDrops(True)
        self.setObjectName("imageDropZone")
        self.setMinimumHeight(220)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._icon_label = QLabel("\U0001f5bc")
        self._icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._icon_label.setStyleSheet("font-size: 40px; color: #9CA3AF;")

        self._text_label = QLabel(t("upload.drop_text"))
        self._text_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._text_label.setWordWrap(True)
        self._text_label.setStyleSheet("font-size: 15px; font-weight: 500;")

        self._formats_label = QLabel(t("upload.formats"))
        self._formats_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._formats_label.setStyleSheet("font-size: 11px; color: #6B7280;")

        self._preview_label = QLabel()
        self._preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._preview_label.setMinimumHeight(160)
        self._preview_label.hide()

        self._file_info_label = QLabel()
        self._file_info_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._file_info_label.setStyleSheet("font-size: 12px; color: #4B5563;")
        self._file_info_label.hide()

        layout.addWidget(self._icon_label)
        layout.addWidget(self._text_label)
        layout.addWidget(self._formats_label)
        layout.addWidget(self._preview_label)
        layout.addWidget(self._file_info_label)

    def show_selection(self, selection: Selection, preview: Optional[str]):
        """Show the selected file name and, once derived, its preview."""
        self._has_selection = True
        self._file_info_label.setText(
            f"{selection.filename} ({format_file_size(selection.size_bytes)})"
        )
        self._file_info_label.show()

        pixmap = QPixmap()
        if preview:
            try:
                pixmap.loadFromData(decode_data_uri(preview))
            except ValueError:
                pixmap = QPixmap()
        if not pixmap.isNull():
            self._preview_label.setPixmap(
                pixmap.scaled(
                    280, 200,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation,
                )
            )
            self._preview_label.show()
        else:
            self._preview_label.clear()
            self._preview_label.hide()

        self._icon_label.hide()
        self._text_label.hide()
        self._formats_label.hide()
        self.update()

    def clear(self):
        """Back to the placeholder."""
        self._has_selection = False
        self._preview_label.clear()
        self._preview_label.hide()
        self._file_info_label.hide()
        self._icon_label.show()
        self._text_label.show()
        self._formats_label.show()
        self._drag_over = False
        self.update()

    def set_input_enabled(self, enabled: bool):
        self._enabled_for_input = enabled

    def _browse_file(self):
        ext_filter = " ".join(f"*{e}" for e in sorted(SUPPORTED_IMAGE_EXTENSIONS))
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            t("upload.browse"),
            "",
            f"Images ({ext_filter})",
        )
        if is_supported_image(file_path):
            self.file_selected.emit(file_path)

    # --- Drag and drop ---

    def dragEnterEvent(self, event: QDragEnterEvent):
        if not self._enabled_for_input or not event.mimeData().hasUrls():
            return
        urls = event.mimeData().urls()
        if urls and is_supported_image(urls[0].toLocalFile()):
            event.acceptProposedAction()
            self._drag_over = True
            self.update()

    def dragLeaveEvent(self, event):
        self._drag_over = False
        self.update()

    def dropEvent(self, event: QDropEvent):
        self._drag_over = False
        urls = event.mimeData().urls()
        if urls:
            file_path = urls[0].toLocalFile()
            if is_supported_image(file_path) and Path(file_path).is_file():
                self.file_selected.emit(file_path)
        self.update()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self._enabled_for_input:
            self._browse_file()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        if self._drag_over:
            pen = QPen(QColor("#6366F1"), 2, Qt.PenStyle.DashLine)
        elif self._has_selection:
            pen = QPen(QColor("#6366F1"), 2, Qt.PenStyle.SolidLine)
        else:
            pen = QPen(QColor("#D1D5DB"), 2, Qt.PenStyle.DashLine)

        pen.setDashPattern([8, 4])
        painter.setPen(pen)
        painter.drawRoundedRect(self.rect().adjusted(1, 1, -1, -1), 12, 12)
        painter.end()
