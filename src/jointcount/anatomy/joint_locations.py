"""Marker positions of every catalog joint on the body diagram.

Base coordinates are pixels on the full-size body image
(``BASE_IMAGE_WIDTH`` wide). A :class:`LocationModel` scales them to the
size the diagram is actually drawn at.
"""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Mapping

from jointcount.anatomy.joint_catalog import JOINT_IDS
from jointcount.constants import BASE_JOINT_RADIUS
from jointcount.core.errors import InvalidScaleError
from jointcount.core.geometry import Location, round_half_away

logger = logging.getLogger(__name__)


# id -> (x, y) centre on the base image
BASE_CENTERS: dict[int, tuple[int, int]] = {
    1: (320, 80), 2: (420, 80),
    3: (270, 170), 4: (298, 155), 5: (356, 150), 6: (389, 150),
    7: (442, 155), 8: (470, 170),
    9: (267, 320), 10: (477, 320),
    11: (222, 425), 12: (298, 410), 13: (447, 410), 14: (522, 425),
    15: (267, 625), 16: (340, 610), 17: (405, 610), 18: (472, 625),
    19: (105, 625), 20: (127, 650), 21: (155, 685), 22: (190, 700),
    23: (278, 690), 24: (464, 690),
    25: (552, 700), 26: (587, 685), 27: (615, 650), 28: (637, 625),
    29: (75, 660), 30: (105, 690), 31: (141, 720), 32: (183, 745),
    33: (339, 760), 34: (405, 760),
    35: (560, 745), 36: (602, 720), 37: (638, 690), 38: (668, 660),
    39: (50, 695), 40: (72, 730), 41: (117, 770), 42: (170, 780),
    43: (573, 780), 44: (626, 770), 45: (671, 730), 46: (693, 695),
    47: (300, 850), 48: (444, 850),
    49: (215, 900), 50: (247, 913), 51: (279, 927), 52: (311, 940), 53: (347, 955),
    54: (397, 955), 55: (433, 940), 56: (465, 927), 57: (497, 913), 58: (529, 900),
    59: (210, 940), 60: (242, 953), 61: (272, 967), 62: (304, 980), 63: (340, 995),
    64: (404, 995), 65: (440, 980), 66: (472, 967), 67: (504, 953), 68: (536, 940),
}

BASE_RADII: dict[int, int] = {joint_id: BASE_JOINT_RADIUS for joint_id in JOINT_IDS}


def validate_scale(scale: float) -> float:
    """Return ``scale`` as a float, or raise InvalidScaleError."""
    if isinstance(scale, bool):
        raise InvalidScaleError(f"scale must be a number, got {scale!r}")
    try:
        value = float(scale)
    except (TypeError, ValueError):
        raise InvalidScaleError(f"scale must be a number, got {scale!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidScaleError(f"scale must be positive, got {scale!r}")
    return value


def scale_location(joint_id: int, scale: float) -> Location:
    x, y = BASE_CENTERS[joint_id]
    return Location(
        x=round_half_away(x * scale),
        y=round_half_away(y * scale),
        radius=round_half_away(BASE_RADII[joint_id] * scale),
    )


class LocationModel:
    """Scaled joint locations, cached per scale value.

    One model belongs to one canvas; nothing is shared between canvases.
    """

    def __init__(self):
        self._cache: dict[float, Mapping[int, Location]] = {}

    def build(self, scale: float) -> Mapping[int, Location]:
        """Return ``{joint_id: Location}`` for every catalog joint at ``scale``."""
        value = validate_scale(scale)
        if value not in self._cache:
            self._cache[value] = MappingProxyType({
                joint_id: scale_location(joint_id, value) for joint_id in JOINT_IDS
            })
            logger.debug("Built %d joint locations at scale %.3f",
                         len(self._cache[value]), value)
        return self._cache[value]

    @property
    def cached_scales(self) -> list[float]:
        return list(self._cache)

    def clear(self) -> None:
        self._cache.clear()
