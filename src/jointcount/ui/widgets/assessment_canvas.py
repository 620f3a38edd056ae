"""Clickable body diagram recording one tender or swollen joint count."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Mapping, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QImage, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from jointcount.anatomy.joint_catalog import AssessmentType
from jointcount.anatomy.joint_locations import LocationModel, validate_scale
from jointcount.constants import BASE_IMAGE_HEIGHT, BASE_IMAGE_WIDTH
from jointcount.core.config_loader import WidgetConfig
from jointcount.core.errors import AssetLoadError
from jointcount.core.events import EventBus, EventType
from jointcount.core.geometry import round_half_away
from jointcount.core.state import AssessmentState, Selection
from jointcount.interaction.audio import AudioCuePlayer, load_sound_effects
from jointcount.interaction.controller import InteractionController
from jointcount.rendering.background import BackgroundLoader
from jointcount.rendering.render_engine import MarkerColors, RenderEngine, new_surface

logger = logging.getLogger(__name__)


class AssessmentCanvas(QWidget):
    """Body diagram with one marker per joint of a TJC or SJC assessment.

    The background image loads asynchronously; markers are drawn and mouse
    handling is enabled only once it has loaded. Read results from
    :attr:`state`.

    Signals
    -------
    joint_toggled(int, bool)
        A joint was clicked; carries the id and its new selected flag.
    count_changed(int, int)
        Selected and total joint counts after a click that toggled joints.
    ready()
        Background and markers are drawn and clicks are accepted.
    load_failed(object)
        The background image could not be loaded (AssetLoadError).
    """

    joint_toggled = Signal(int, bool)
    count_changed = Signal(int, int)
    ready = Signal()
    load_failed = Signal(object)

    def __init__(
        self,
        assessment_type: AssessmentType | str,
        colors: MarkerColors | Mapping[str, str] | None = None,
        scale: Optional[float] = None,
        preselected: Selection = (),
        event_bus: Optional[EventBus] = None,
        image_path: Optional[Path] = None,
        sound_paths: Optional[Iterable[Path]] = None,
        rng: Optional[random.Random] = None,
        play_sound: Optional[bool] = None,
        config: Optional[WidgetConfig] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        config = config or WidgetConfig()
        if colors is None:
            colors = config.colors
        if not isinstance(colors, MarkerColors):
            colors = MarkerColors.from_mapping(colors)

        # Validation errors surface here, before any Qt work is scheduled
        self.scale = validate_scale(config.scale if scale is None else scale)
        self.state = AssessmentState.create(assessment_type, preselected)
        self.colors = colors
        self.event_bus = event_bus or EventBus()
        self.image_path = Path(image_path or config.image_path)
        self.load_error: Optional[AssetLoadError] = None

        self._location_model = LocationModel()
        self.locations = self._location_model.build(self.scale)
        self.engine = RenderEngine(colors, self.scale)
        self.surface: QImage = new_surface(
            round_half_away(BASE_IMAGE_WIDTH * self.scale),
            round_half_away(BASE_IMAGE_HEIGHT * self.scale),
        )

        play = config.play_sound if play_sound is None else play_sound
        clips = load_sound_effects(
            config.sound_paths if sound_paths is None else sound_paths, self,
        ) if play else []
        self.audio = AudioCuePlayer(clips, rng=rng, enabled=play)
        self.controller = InteractionController(
            self.state, self.locations, self.engine,
            audio=self.audio, event_bus=self.event_bus,
        )

        self.setMouseTracking(True)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self._loader = BackgroundLoader(self.image_path, self)
        self._loader.loaded.connect(self._on_background_loaded)
        self._loader.failed.connect(self._on_background_failed)
        self._loader.start()
        logger.info("Created %s canvas (%d joints, scale %.2f)",
                    self.state.type.label, self.state.total_count(), self.scale)

    # ── Public API ──

    @property
    def assessment_type(self) -> AssessmentType:
        return self.state.type

    @property
    def is_ready(self) -> bool:
        return self.controller.active

    def raise_for_load_error(self) -> None:
        """Re-raise the background load failure, if there was one."""
        if self.load_error is not None:
            raise self.load_error

    def set_colors(self, colors: MarkerColors | Mapping[str, str]) -> None:
        """Switch marker colours and repaint every marker with them."""
        if not isinstance(colors, MarkerColors):
            colors = MarkerColors.from_mapping(colors)
        self.colors = colors
        self.engine.colors = colors
        if not self.is_ready:
            return
        self.engine.render_all(self.surface, self.state, self.locations)
        self.update()

    def click_at(self, x: float, y: float) -> list[int]:
        """Apply a click at surface coordinates; used by mouse handling and tests."""
        toggled = self.controller.handle_click(x, y)
        for joint_id in toggled:
            self.joint_toggled.emit(joint_id, self.state.is_selected(joint_id))
        if toggled:
            self.count_changed.emit(self.state.selected_count(), self.state.total_count())
        if self.is_ready:
            self.update()
        return toggled

    def hover_at(self, x: float, y: float) -> Optional[int]:
        joint_id = self.controller.handle_move(x, y)
        if self.is_ready:
            self.update()
        return joint_id

    # ── Background loading ──

    def _on_background_loaded(self, image: QImage) -> None:
        self.surface = self.engine.render_background(image)
        self.engine.render_all(self.surface, self.state, self.locations)
        self.controller.activate(self.surface)
        self.setFixedSize(self.surface.size())
        self.updateGeometry()
        self.update()
        self.event_bus.publish(EventType.BACKGROUND_LOADED, path=str(self.image_path),
                               width=self.surface.width(), height=self.surface.height())
        self.ready.emit()

    def _on_background_failed(self, error: AssetLoadError) -> None:
        self.load_error = error
        self.event_bus.publish(EventType.BACKGROUND_FAILED, path=str(self.image_path),
                               error=error)
        self.load_failed.emit(error)

    # ── Qt overrides ──

    def sizeHint(self) -> QSize:
        return self.surface.size()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self.surface)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self.click_at(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self.hover_at(pos.x(), pos.y())
