"""Shared fixtures: a headless QApplication and a body image on disk."""

import os
import time

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication, Qt
from PySide6.QtGui import QImage
from PySide6.QtWidgets import QApplication

from jointcount.constants import BASE_IMAGE_HEIGHT, BASE_IMAGE_WIDTH


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def body_image_path(tmp_path):
    """Opaque white stand-in for the body diagram at full base size."""
    image = QImage(BASE_IMAGE_WIDTH, BASE_IMAGE_HEIGHT, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.white)
    path = tmp_path / "body.png"
    assert image.save(str(path))
    return path


def wait_until(predicate, timeout: float = 2.0) -> bool:
    """Pump the Qt event loop until ``predicate()`` is true or time runs out."""
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def wait():
    return wait_until
