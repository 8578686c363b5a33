"""
Point-to-segment distance helpers.

The simplifier measures how far each interior point of a polyline
strays from the segment joining the current anchor points.  The
distance is measured to the closed segment rather than the infinite
line through it, so points whose projection falls beyond either end
are measured to the nearest endpoint instead.  Degenerate segments
(start == end) are handled by falling back to the plain Euclidean
distance to the shared point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Segment:
    """Ordered pair of points bounding a closed line segment.

    Attributes:
        start: First endpoint of the segment.
        end: Second endpoint of the segment.  May equal ``start``.
    """

    start: Point
    end: Point

    @property
    def length_squared(self) -> float:
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return dx * dx + dy * dy


def perpendicular_distance(point: Point, segment: Segment) -> float:
    """Return the shortest distance from ``point`` to ``segment``.

    The point is projected onto the line through the segment and the
    projection parameter is clamped to ``[0, 1]`` so the closest
    position always lies on the segment itself.

    Args:
        point: The ``(x, y)`` point being measured.
        segment: The reference segment.

    Returns:
        A non-negative float.  Zero when the point coincides with
        either endpoint or lies on the segment.
    """
    dist = _clamped_distance(point, segment)
    if math.isfinite(dist):
        return dist
    # Squared terms overflowed.  Rescale by a power of two, which is
    # exact, so every coordinate lies in [-2, 2].
    values = (point[0], point[1], *segment.start, *segment.end)
    scale = math.ldexp(1.0, math.frexp(max(abs(v) for v in values))[1] - 1)
    scaled_segment = Segment(
        (segment.start[0] / scale, segment.start[1] / scale),
        (segment.end[0] / scale, segment.end[1] / scale),
    )
    return _clamped_distance((point[0] / scale, point[1] / scale), scaled_segment) * scale


def _clamped_distance(point: Point, segment: Segment) -> float:
    """Direct evaluation; returns ``inf`` when an intermediate overflows."""
    px, py = point
    x1, y1 = segment.start
    x2, y2 = segment.end
    dx = x2 - x1
    dy = y2 - y1
    len_sq = segment.length_squared
    if len_sq == 0.0:
        return math.hypot(px - x1, py - y1)
    dot = (px - x1) * dx + (py - y1) * dy
    if not (math.isfinite(len_sq) and math.isfinite(dot)):
        return math.inf
    # Keep the projection on the segment, not its extension
    t = max(0.0, min(1.0, dot / len_sq))
    return math.hypot(px - (x1 + t * dx), py - (y1 + t * dy))
