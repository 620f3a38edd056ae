"""QPainter drawing of the body diagram, joint markers and status lines.

Everything here paints into a ``QImage`` surface owned by the caller. All
geometry handed to the engine is already scaled; the engine only uses the
scale factor for status-line boxes and font size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QColor, QFont, QImage, QPainter, QPen

from jointcount.constants import (
    COUNT_BOX, HOVER_BOX, STATUS_BACKGROUND, STATUS_BASELINE_OFFSET,
    STATUS_FONT_PT, STATUS_FOREGROUND, STATUS_TEXT_INSET,
)
from jointcount.core.geometry import Location, Point, Rect, round_half_away, scale_rect
from jointcount.core.state import AssessmentState


@dataclass(frozen=True)
class MarkerColors:
    """Stroke and fill colours for joint markers (any QColor name)."""
    border: str
    selected: str
    unselected: str

    def __post_init__(self):
        for role in ("border", "selected", "unselected"):
            value = getattr(self, role)
            if not QColor(value).isValid():
                raise ValueError(f"invalid {role} colour: {value!r}")

    @classmethod
    def from_mapping(cls, colors: Mapping[str, str]) -> "MarkerColors":
        missing = [k for k in ("border", "selected", "unselected") if k not in colors]
        if missing:
            raise ValueError(f"missing marker colour(s): {', '.join(missing)}")
        return cls(colors["border"], colors["selected"], colors["unselected"])

    def fill_for(self, selected: bool) -> str:
        return self.selected if selected else self.unselected


def new_surface(width: int, height: int) -> QImage:
    surface = QImage(max(1, width), max(1, height), QImage.Format.Format_ARGB32_Premultiplied)
    surface.fill(Qt.GlobalColor.transparent)
    return surface


def text_origin(base_box: Rect, scale: float) -> Point:
    """Scaled text position for a status box given in base image coordinates."""
    x, y = base_box[:2]
    return (round_half_away((x + STATUS_TEXT_INSET) * scale),
            round_half_away((y + STATUS_BASELINE_OFFSET) * scale))


class RenderEngine:
    """Draws markers and status lines for one canvas."""

    def __init__(self, colors: MarkerColors, scale: float):
        self.colors = colors
        self.scale = scale
        self.hover_box: Rect = scale_rect(HOVER_BOX, scale)
        self.count_box: Rect = scale_rect(COUNT_BOX, scale)
        self._font = QFont("sans-serif")
        self._font.setStyleHint(QFont.StyleHint.SansSerif)
        self._font.setPointSize(max(1, round_half_away(STATUS_FONT_PT * scale)))
        self.hover_origin: Point = text_origin(HOVER_BOX, scale)
        self.count_origin: Point = text_origin(COUNT_BOX, scale)

    # ── Background ──

    def render_background(self, image: QImage) -> QImage:
        """Return a new surface sized ``image * scale`` with the image drawn on it.

        The returned surface replaces the caller's previous one. Only call
        this once the image has finished loading.
        """
        width = round_half_away(image.width() * self.scale)
        height = round_half_away(image.height() * self.scale)
        surface = new_surface(width, height)
        painter = QPainter(surface)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.drawImage(QRect(0, 0, surface.width(), surface.height()), image)
        painter.end()
        return surface

    # ── Markers ──

    def draw_marker(self, surface: QImage, location: Location, color: str) -> None:
        """Filled circle with a ``border`` stroke, clipped to its bounding box."""
        x, y, r = location.x, location.y, location.radius
        painter = QPainter(surface)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        # The 1px stroke straddles the radius, so allow one extra pixel.
        painter.setClipRect(QRect(x - r - 1, y - r - 1, 2 * r + 2, 2 * r + 2))
        painter.setPen(QPen(QColor(self.colors.border), 1))
        painter.setBrush(QColor(color))
        painter.drawEllipse(x - r, y - r, 2 * r, 2 * r)
        painter.end()

    def draw_joint(self, surface: QImage, location: Location, selected: bool) -> None:
        self.draw_marker(surface, location, self.colors.fill_for(selected))

    # ── Status lines ──

    def draw_status_line(
        self,
        surface: QImage,
        text: str,
        box: Rect,
        origin: Optional[Point] = None,
    ) -> None:
        """Clear ``box`` and draw ``text`` inside it when non-empty.

        ``origin`` is the text baseline start; it defaults to the inset and
        baseline offset scaled relative to the box corner.
        """
        x, y, w, h = box
        if origin is None:
            origin = (x + round_half_away(STATUS_TEXT_INSET * self.scale),
                      y + round_half_away(STATUS_BASELINE_OFFSET * self.scale))
        painter = QPainter(surface)
        painter.fillRect(QRect(x, y, w, h), QColor(STATUS_BACKGROUND))
        if text:
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            painter.setClipRect(QRect(x, y, w, h))
            painter.setFont(self._font)
            painter.setPen(QColor(STATUS_FOREGROUND))
            painter.drawText(origin[0], origin[1], text)
        painter.end()

    def draw_count(self, surface: QImage, state: AssessmentState) -> None:
        self.draw_status_line(surface, state.status_text(), self.count_box, self.count_origin)

    def draw_hover(self, surface: QImage, text: str) -> None:
        self.draw_status_line(surface, text, self.hover_box, self.hover_origin)

    def render_all(
        self,
        surface: QImage,
        state: AssessmentState,
        locations: Mapping[int, Location],
    ) -> None:
        """Draw every joint marker and the running count."""
        for joint in state.joints():
            self.draw_joint(surface, locations[joint.id], joint.selected)
        self.draw_count(surface, state)
