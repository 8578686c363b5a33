"""
Ramer–Douglas–Peucker simplification for open 2D polylines.

``simplify_polyline`` reduces an ordered list of ``(x, y)`` points to
an order-preserving subsequence whose dropped points all lie within
``epsilon`` of the segment joining the retained points that bracket
them.  The first and last points are always kept.

The search over index ranges uses an explicit worklist of ``(lo, hi)``
pairs instead of native recursion, so near-straight input with a
single far outlier cannot exhaust the interpreter stack.  Each range
is measured against the segment from ``points[lo]`` to ``points[hi]``
and, on a tie for the maximum deviation, the lowest index wins.

Input is validated in a single pass before any work is done.  A
negative, NaN or infinite tolerance raises :class:`InvalidTolerance`;
a point with a NaN or infinite coordinate raises :class:`InvalidPoint`.
Debug logging of each call can be enabled with the ``SIMPLIFY_DEBUG``
environment variable.
"""

from __future__ import annotations

import logging
import math
import numbers
import os
from typing import List, Sequence, Tuple

from .distance import Point, Segment, perpendicular_distance

logger = logging.getLogger(__name__)


class SimplificationError(ValueError):
    """Base class for rejected simplification input."""


class InvalidTolerance(SimplificationError):
    """Raised when ``epsilon`` is negative, NaN, infinite or not a number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Tolerance must be a finite, non-negative number; got {value!r}")


class InvalidPoint(SimplificationError):
    """Raised when a point is not a pair of finite numbers."""

    def __init__(self, index: int, value: object) -> None:
        self.index = index
        self.value = value
        super().__init__(f"Point {index} must be a pair of finite numbers; got {value!r}")


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def validate_tolerance(epsilon: object) -> float:
    """Check ``epsilon`` and return it as a float.

    Raises:
        InvalidTolerance: If ``epsilon`` is not a finite number >= 0.
    """
    if not _is_finite_number(epsilon) or epsilon < 0:
        raise InvalidTolerance(epsilon)
    return float(epsilon)


def validate_points(points: Sequence[Point]) -> None:
    """Check that every point is an ``(x, y)`` pair of finite numbers.

    Raises:
        InvalidPoint: For the first offending point.
    """
    for idx, p in enumerate(points):
        try:
            if len(p) != 2:
                raise InvalidPoint(idx, p)
        except TypeError:
            raise InvalidPoint(idx, p) from None
        if not (_is_finite_number(p[0]) and _is_finite_number(p[1])):
            raise InvalidPoint(idx, p)


def _farthest_point(points: Sequence[Point], lo: int, hi: int) -> Tuple[int, float]:
    """Return ``(index, distance)`` of the interior point farthest from lo–hi.

    Only a strictly greater distance replaces the current maximum, so
    the lowest index wins ties.  Returns ``(-1, 0.0)`` for an empty
    interior.
    """
    segment = Segment(points[lo], points[hi])
    max_dist = 0.0
    index = -1
    for i in range(lo + 1, hi):
        dist = perpendicular_distance(points[i], segment)
        if index == -1 or dist > max_dist:
            max_dist = dist
            index = i
    return index, max_dist


def simplify_polyline(points: Sequence[Point], epsilon: float) -> List[Point]:
    """Simplify an open polyline with the Ramer–Douglas–Peucker algorithm.

    Args:
        points: Ordered ``(x, y)`` points.  Any length is accepted,
            including zero and one.  Repeated points are allowed.
        epsilon: Maximum perpendicular deviation allowed for a dropped
            point.  With ``0`` only exactly collinear runs collapse.

    Returns:
        A new list holding a subsequence of ``points`` in the original
        order.  The elements are the input objects themselves.

    Raises:
        InvalidTolerance: If ``epsilon`` is negative, NaN or infinite.
        InvalidPoint: If any coordinate is NaN or infinite.
    """
    tol = validate_tolerance(epsilon)
    validate_points(points)
    n = len(points)
    if n <= 2:
        return list(points)

    keep = [False] * n
    keep[0] = True
    keep[-1] = True
    worklist: List[Tuple[int, int]] = [(0, n - 1)]
    while worklist:
        lo, hi = worklist.pop()
        if hi - lo < 2:
            continue
        index, max_dist = _farthest_point(points, lo, hi)
        if max_dist > tol:
            keep[index] = True
            worklist.append((index, hi))
            worklist.append((lo, index))
        # Otherwise the range collapses to its anchors, which are already kept

    simplified = [points[i] for i in range(n) if keep[i]]
    if os.getenv("SIMPLIFY_DEBUG"):
        logger.debug(
            "simplify_polyline: epsilon=%s input=%d output=%d",
            tol,
            n,
            len(simplified),
        )
    return simplified


def choose_simplification_tolerance(points: Sequence[Point]) -> float:
    """Choose a default RDP tolerance based on the scale of the polyline.

    Computes the axis-aligned bounding box of the polyline and returns
    1% of the maximum extent.  A minimum value is enforced to avoid
    extremely small tolerances.

    Args:
        points: Polyline points used to compute extents.

    Returns:
        A float tolerance value.
    """
    if not points:
        return 0.0
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    # Scale before subtracting so extents near the float limit stay finite
    width = 0.01 * max(xs) - 0.01 * min(xs)
    height = 0.01 * max(ys) - 0.01 * min(ys)
    tol = max(width, height)
    return max(tol, 1e-6)
