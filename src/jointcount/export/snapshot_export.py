"""Image export of a rendered assessment canvas.

Converts the canvas ``QImage`` surface to a Pillow image and writes it to
disk. PNG snapshots carry the assessment type and selected joint ids as
text chunks so a saved image can be traced back to its results.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image
from PIL.PngImagePlugin import PngInfo
from PySide6.QtGui import QImage

from jointcount.core.state import AssessmentState

logger = logging.getLogger(__name__)

# extension -> (Pillow format, supports alpha)
_FORMATS = {
    ".png": ("PNG", True),
    ".jpg": ("JPEG", False),
    ".jpeg": ("JPEG", False),
    ".bmp": ("BMP", False),
    ".gif": ("GIF", False),
}


def qimage_to_pil(qimg: QImage) -> Image.Image:
    """Copy a QImage into a new RGBA Pillow image."""
    qimg = qimg.convertToFormat(QImage.Format.Format_RGBA8888)
    raw = bytes(qimg.constBits())
    return Image.frombytes("RGBA", (qimg.width(), qimg.height()), raw,
                           "raw", "RGBA", qimg.bytesPerLine())


def snapshot_metadata(state: AssessmentState) -> dict[str, str]:
    return {
        "assessment": state.type.value,
        "selected": state.selection_string(),
        "count": state.status_text(),
    }


def export_snapshot(
    surface: QImage,
    path: Path | str,
    state: Optional[AssessmentState] = None,
    background: str = "white",
) -> Path:
    """Save ``surface`` to ``path``; the format follows the file extension.

    Formats without alpha are flattened onto ``background``.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in _FORMATS:
        raise ValueError(f"unsupported snapshot format: {path.suffix or '(none)'}")
    fmt, has_alpha = _FORMATS[suffix]

    img = qimage_to_pil(surface)
    save_kwargs = {}
    if not has_alpha:
        flat = Image.new("RGB", img.size, background)
        flat.paste(img, mask=img.getchannel("A"))
        img = flat
    elif state is not None:
        info = PngInfo()
        for key, value in snapshot_metadata(state).items():
            info.add_text(key, value)
        save_kwargs["pnginfo"] = info

    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, fmt, **save_kwargs)
    logger.info("Saved snapshot to %s", path)
    return path


def read_snapshot_metadata(path: Path | str) -> dict[str, str]:
    """Text chunks written by :func:`export_snapshot` (PNG only)."""
    with Image.open(path) as img:
        return dict(getattr(img, "text", {}))
