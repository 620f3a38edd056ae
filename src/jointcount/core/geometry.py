"""Pixel geometry: scaled rounding and circle hit-testing.

Circles are stored as (N, 3) float arrays of ``[x, y, radius]`` rows so that
a pointer position can be tested against every joint in one pass.
"""

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray


Point = tuple[float, float]
Rect = tuple[int, int, int, int]  # x, y, width, height


@dataclass(frozen=True)
class Location:
    """Scaled centre and hit radius of one joint marker, in surface pixels."""
    x: int
    y: int
    radius: int

    @property
    def bounds(self) -> Rect:
        return (self.x - self.radius, self.y - self.radius,
                2 * self.radius, 2 * self.radius)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3).

    Python's built-in round() is banker's rounding, which would turn the
    base coordinate 105 at scale 0.5 into 52 instead of 53.
    """
    magnitude = math.floor(abs(value) + 0.5)
    return int(magnitude) if value >= 0 else -int(magnitude)


def scale_rect(rect: Rect, scale: float) -> Rect:
    return tuple(round_half_away(v * scale) for v in rect)


def hit_test(point: Point, location: Location) -> bool:
    """True if the point lies strictly inside the marker circle."""
    return math.hypot(point[0] - location.x, point[1] - location.y) < location.radius


def circle_array(locations: Iterable[Location]) -> NDArray[np.float64]:
    """Pack locations into an (N, 3) array of [x, y, radius]."""
    rows = [(loc.x, loc.y, loc.radius) for loc in locations]
    if not rows:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def hit_mask(point: Point, circles: NDArray[np.float64]) -> NDArray[np.bool_]:
    """Boolean mask of circles strictly containing the point."""
    if len(circles) == 0:
        return np.zeros(0, dtype=bool)
    dists = np.hypot(circles[:, 0] - point[0], circles[:, 1] - point[1])
    return dists < circles[:, 2]


def all_hits(point: Point, circles: NDArray[np.float64]) -> list[int]:
    """Indices of every circle containing the point, in array order."""
    return np.flatnonzero(hit_mask(point, circles)).tolist()


def first_hit(point: Point, circles: NDArray[np.float64]) -> int:
    """Index of the first circle containing the point, or -1."""
    hits = np.flatnonzero(hit_mask(point, circles))
    return int(hits[0]) if len(hits) else -1
