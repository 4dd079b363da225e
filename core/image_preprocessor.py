"""Loading picked eye images and deriving their preview encoding."""

import base64
import binascii
import io
import mimetypes
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from core.errors import PreviewError
from core.utils import Selection

PREVIEW_SIZE = (320, 320)


def load_selection(image_path: str) -> Selection:
    """Read an image file into a Selection.

    No size or type check is made here; the file picker's extension filter
    is the only gate.
    """
    path = Path(image_path)
    mime_type, _ = mimetypes.guess_type(path.name)
    return Selection(
        filename=path.name,
        data=path.read_bytes(),
        mime_type=mime_type or "application/octet-stream",
        source_path=str(path),
    )


def create_preview(selection: Selection, size: Tuple[int, int] = PREVIEW_SIZE) -> str:
    """Create a PNG thumbnail of the selection and return it as a data URI."""
    try:
        with Image.open(io.BytesIO(selection.data)) as img:
            img = ImageOps.exif_transpose(img)
            img.thumbnail(size, Image.Resampling.LANCZOS)
            if img.mode not in ("RGB", "RGBA"):
                img = img.convert("RGB")
            buffer = io.BytesIO()
            img.save(buffer, format="PNG")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise PreviewError(f"Cannot preview {selection.filename}: {e}") from e

    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def decode_data_uri(uri: str) -> bytes:
    """Get the binary payload of a base64 data URI."""
    header, sep, payload = uri.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URI")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
