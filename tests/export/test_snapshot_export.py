"""Tests for snapshot export."""

import pytest
from PIL import Image
from PySide6.QtGui import QColor, QImage

from jointcount.core.state import AssessmentState
from jointcount.export.snapshot_export import (
    export_snapshot, qimage_to_pil, read_snapshot_metadata,
)


@pytest.fixture
def surface(qapp):
    image = QImage(30, 20, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(QColor(255, 0, 0))
    image.setPixelColor(0, 0, QColor(0, 0, 255))
    return image


def test_qimage_to_pil(surface):
    img = qimage_to_pil(surface)
    assert img.mode == "RGBA"
    assert img.size == (30, 20)
    assert img.getpixel((0, 0)) == (0, 0, 255, 255)
    assert img.getpixel((5, 5)) == (255, 0, 0, 255)


def test_png_carries_selection(surface, tmp_path):
    state = AssessmentState.create("tjc", "3;9")
    path = export_snapshot(surface, tmp_path / "out" / "tjc.png", state)
    assert path.exists()
    meta = read_snapshot_metadata(path)
    assert meta["assessment"] == "tjc"
    assert meta["selected"] == "3;9"
    assert meta["count"] == "TJC 2 / 68"


def test_jpeg_is_flattened(surface, tmp_path):
    path = export_snapshot(surface, tmp_path / "snap.jpg")
    with Image.open(path) as img:
        assert img.mode == "RGB"
        assert img.size == (30, 20)


def test_unsupported_format(surface, tmp_path):
    with pytest.raises(ValueError):
        export_snapshot(surface, tmp_path / "snap.tiff")
    with pytest.raises(ValueError):
        export_snapshot(surface, tmp_path / "snap")
