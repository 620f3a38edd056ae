"""Asynchronous loading of the body-diagram background image."""

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtGui import QImage, QImageReader

from jointcount.core.errors import AssetLoadError

logger = logging.getLogger(__name__)


def load_image(path: Path | str) -> QImage:
    """Read an image file, raising AssetLoadError if it cannot be decoded."""
    path = Path(path)
    if not path.is_file():
        raise AssetLoadError(path, "file not found")
    reader = QImageReader(str(path))
    image = reader.read()
    if image.isNull():
        raise AssetLoadError(path, reader.errorString())
    return image


class BackgroundLoader(QObject):
    """Loads one image on the next event-loop turn.

    Signals
    -------
    loaded(QImage)
        Emitted with the decoded image.
    failed(object)
        Emitted with the AssetLoadError when the image cannot be read.
    """

    loaded = Signal(QImage)
    failed = Signal(object)

    def __init__(self, path: Path | str, parent: QObject | None = None):
        super().__init__(parent)
        self.path = Path(path)
        self._started = False

    def start(self) -> None:
        """Schedule the load; completion is always reported asynchronously."""
        if self._started:
            return
        self._started = True
        QTimer.singleShot(0, self._load)

    def _load(self) -> None:
        try:
            image = load_image(self.path)
        except AssetLoadError as e:
            logger.error("Background image failed to load: %s", e)
            self.failed.emit(e)
            return
        logger.info("Loaded background %s (%dx%d)", self.path.name, image.width(), image.height())
        self.loaded.emit(image)
