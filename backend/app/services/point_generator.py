"""
Random demo data for the simplification charts.

The demo page plots a randomly generated polyline next to its
simplified version.  Points are generated with distinct integer x
values sorted in ascending order so the x values double as chart
labels, and independent integer y values.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .distance import Point

logger = logging.getLogger(__name__)

DEFAULT_NUM_POINTS: int = 100
DEFAULT_X_CEILING: int = 100
DEFAULT_Y_CEILING: int = 100


def generate_random_points(
    num_points: int = DEFAULT_NUM_POINTS,
    x_ceiling: int = DEFAULT_X_CEILING,
    y_ceiling: int = DEFAULT_Y_CEILING,
    seed: Optional[int] = None,
) -> Tuple[List[float], List[Point]]:
    """Generate ``num_points`` random points with distinct, sorted x values.

    If ``num_points`` is smaller than ``x_ceiling`` it is raised to
    ``x_ceiling`` so the x axis is densely populated.  x values are
    drawn without replacement from ``[0, x_ceiling]`` and y values
    from ``[0, y_ceiling]``, both inclusive.

    Args:
        num_points: Requested number of points.
        x_ceiling: Largest x value that may be generated.
        y_ceiling: Largest y value that may be generated.
        seed: Optional seed for reproducible output.

    Returns:
        A tuple ``(labels, points)`` where ``labels`` are the sorted x
        values and ``points`` the matching ``(x, y)`` pairs.

    Raises:
        ValueError: If a ceiling is negative or more points are
            requested than there are distinct x values available.
    """
    if x_ceiling < 0 or y_ceiling < 0:
        raise ValueError("Ceilings must be non-negative")
    if num_points < x_ceiling:
        num_points = x_ceiling
    if num_points > x_ceiling + 1:
        raise ValueError(
            f"Cannot draw {num_points} distinct x values from [0, {x_ceiling}]"
        )

    rng = np.random.default_rng(seed)
    xs = np.sort(rng.choice(x_ceiling + 1, size=num_points, replace=False))
    ys = rng.integers(0, y_ceiling, size=num_points, endpoint=True)
    labels = [float(x) for x in xs]
    points: List[Point] = [(float(x), float(y)) for x, y in zip(xs, ys)]
    logger.debug(
        "Generated %d demo points (x_ceiling=%d, y_ceiling=%d)",
        num_points,
        x_ceiling,
        y_ceiling,
    )
    return labels, points
