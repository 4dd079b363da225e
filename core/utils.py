"""Shared dataclasses, enums, and formatting helpers."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple


# --- Type aliases ---

SuccessCallback = Callable[[object], None]
ErrorCallback = Callable[[Exception], None]
ColorGradient = Tuple[str, str]  # (start, end) hex colors


# --- Enums ---

class DiseaseLabel(Enum):
    CATARACT = "Cataract"
    DIABETIC_RETINOPATHY = "Diabetic Retinopathy"
    GLAUCOMA = "Glaucoma"
    NORMAL = "Normal"


class WorkflowState(Enum):
    IDLE = "idle"
    IMAGE_SELECTED = "image_selected"
    ANALYZING = "analyzing"
    RESULT_READY = "result_ready"
    FAILED = "failed"


# --- Dataclasses ---

@dataclass(frozen=True)
class Selection:
    """An image picked by the user, ready to upload."""
    filename: str
    data: bytes
    mime_type: str = "application/octet-stream"
    source_path: str = ""

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return (
            f"Selection(filename={self.filename!r}, mime_type={self.mime_type!r}, "
            f"size={format_file_size(self.size_bytes)})"
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Normalized prediction returned by the inference service."""
    disease_label: DiseaseLabel
    confidence: float  # 0.0 - 1.0


@dataclass(frozen=True)
class DiseaseEntry:
    """Static guidance text for one recognized condition."""
    label: DiseaseLabel
    color: ColorGradient
    description: str
    recommendation: str


@dataclass(frozen=True)
class ViewModel:
    """Everything the rendering layer needs to show a result."""
    label: str
    percentage_text: str
    color_token: ColorGradient
    description: str
    recommendation: str
    confidence: float = 0.0


# --- Image files ---

SUPPORTED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".webp", ".tiff", ".tif"}


def is_supported_image(file_path: Optional[str]) -> bool:
    """Check the extension filter applied by the file picker."""
    if not file_path:
        return False
    return Path(file_path).suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS


# --- Formatting ---

def format_file_size(size_bytes: int) -> str:
    """Format byte count as human-readable string."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"


def format_percentage(fraction: float) -> str:
    """Format a 0-1 fraction as a percentage with one decimal place."""
    return f"{fraction * 100:.1f}%"
