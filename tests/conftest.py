"""Shared test fixtures for EyeScan."""

import os
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import numpy as np
import pytest
import requests
from PIL import Image

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from core.config import AppConfig  # noqa: E402
from core.image_preprocessor import load_selection  # noqa: E402
from core.utils import Selection  # noqa: E402


class DeferredRunner:
    """Task runner that holds tasks until the test resolves them."""

    def __init__(self):
        self.pending = []

    def submit(self, task, on_success, on_error):
        self.pending.append((task, on_success, on_error))

    def run_next(self):
        task, on_success, on_error = self.pending.pop(0)
        try:
            value = task()
        except Exception as e:
            on_error(e)
        else:
            on_success(value)

    def run_all(self):
        while self.pending:
            self.run_next()

    def drop_all(self):
        self.pending.clear()


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def sample_rgb_image(tmp_dir):
    """Create a sample 640x480 RGB image (simulates an eye photo)."""
    img = Image.fromarray(np.random.randint(0, 255, (480, 640, 3), dtype=np.uint8))
    path = tmp_dir / "eye.png"
    img.save(path)
    return str(path)


@pytest.fixture
def sample_jpeg_image(tmp_dir):
    img = Image.fromarray(np.random.randint(0, 255, (64, 64, 3), dtype=np.uint8))
    path = tmp_dir / "fundus.jpg"
    img.save(path, format="JPEG")
    return str(path)


@pytest.fixture
def sample_selection(sample_rgb_image):
    return load_selection(sample_rgb_image)


@pytest.fixture
def broken_selection():
    """Bytes that are not an image at all."""
    return Selection(filename="notes.png", data=b"definitely not a png", mime_type="image/png")


@pytest.fixture
def config():
    return AppConfig(api_url="http://inference.test:8000")


@pytest.fixture
def deferred_runner():
    return DeferredRunner()


def make_response(status_code=200, payload=None, json_error=None, reason="OK"):
    """Build a stand-in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def fake_session():
    """A requests.Session whose post() returns a successful prediction."""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_response(
        payload={"status": "success", "result": {"disease": "Normal", "confidence": 98.2}}
    )
    return session


@pytest.fixture(autouse=True)
def _init_i18n():
    """Initialize i18n in English for all tests."""
    import i18n
    i18n.init("en")


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture(scope="session")
def qapp():
    """A headless QApplication shared by the Qt tests."""
    return QApplication.instance() or QApplication([])
