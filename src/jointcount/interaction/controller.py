"""Pointer handling for an assessment canvas.

The controller turns surface-local click and move positions into joint
toggles and hover labels. It owns no Qt objects: the canvas widget forwards
mouse events and repaints after each handled event.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from PySide6.QtGui import QImage

from jointcount.core.events import EventBus, EventType
from jointcount.core.geometry import Location, Point, all_hits, circle_array, first_hit
from jointcount.core.state import AssessmentState
from jointcount.interaction.audio import AudioCuePlayer
from jointcount.rendering.render_engine import RenderEngine

logger = logging.getLogger(__name__)


class InteractionController:
    """Hit-tests pointer events and applies them to state and surface.

    Click: every joint whose circle contains the point is toggled (in
    catalog order), then the count line is redrawn.
    Move: the first joint containing the point has its name shown; no hit
    clears the hover line.

    Events are ignored until :meth:`activate` is called, which the canvas
    does once the background and markers have been drawn.
    """

    def __init__(
        self,
        state: AssessmentState,
        locations: Mapping[int, Location],
        engine: RenderEngine,
        surface: Optional[QImage] = None,
        audio: Optional[AudioCuePlayer] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.state = state
        self.locations = locations
        self.engine = engine
        self.surface = surface
        self.audio = audio or AudioCuePlayer(enabled=False)
        self.event_bus = event_bus
        self.active = False
        self.hovered: Optional[int] = None

        self._ids = state.ids()
        self._circles = circle_array(locations[i] for i in self._ids)

    def activate(self, surface: Optional[QImage] = None) -> None:
        if surface is not None:
            self.surface = surface
        if self.surface is None:
            raise RuntimeError("cannot activate controller without a surface")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    # ── Event handlers ──

    def handle_click(self, x: float, y: float) -> list[int]:
        """Toggle every joint under (x, y); return the toggled ids."""
        if not self.active:
            logger.debug("Click at (%.0f, %.0f) ignored before first render", x, y)
            return []

        point: Point = (x, y)
        toggled = []
        for index in all_hits(point, self._circles):
            joint_id = self._ids[index]
            selected = self.state.toggle(joint_id)
            self.engine.draw_joint(self.surface, self.locations[joint_id], selected)
            toggled.append(joint_id)
            logger.debug("%s joint %d (%s) -> %s", self.state.type.label, joint_id,
                         self.state.name(joint_id), "selected" if selected else "cleared")
            if selected:
                played = self.audio.maybe_play()
                if played is not None:
                    self._publish(EventType.SOUND_PLAYED, index=played)
            self._publish(EventType.JOINT_TOGGLED, joint_id=joint_id, selected=selected,
                          assessment_type=self.state.type.value)

        self.engine.draw_count(self.surface, self.state)
        if toggled:
            self._publish(EventType.COUNT_CHANGED, selected=self.state.selected_count(),
                          total=self.state.total_count(),
                          assessment_type=self.state.type.value)
        return toggled

    def handle_move(self, x: float, y: float) -> Optional[int]:
        """Show the name of the first joint under (x, y), or clear the line."""
        if not self.active:
            return None

        index = first_hit((x, y), self._circles)
        if index < 0:
            joint_id = None
            self.engine.draw_hover(self.surface, "")
        else:
            joint_id = self._ids[index]
            self.engine.draw_hover(self.surface, self.state.name(joint_id))

        if joint_id != self.hovered:
            self.hovered = joint_id
            self._publish(EventType.HOVER_CHANGED, joint_id=joint_id,
                          name=self.state.name(joint_id) if joint_id is not None else "")
        return joint_id

    def _publish(self, event_type: EventType, **data) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event_type, **data)
