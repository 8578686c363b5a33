"""
Chart payloads for the simplification demo.

The front end draws two line charts: the raw random polyline and the
same data after simplification.  This module builds the chart
configuration objects it consumes and owns the clamping applied to
the user-adjustable tolerance control.  The core simplifier never
clamps; out-of-range tolerances are only tamed here, at the UI edge.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .distance import Point
from .simplify import simplify_polyline

ORIGINAL_CHART_LABEL = "Without RDP Tolerance"
SIMPLIFIED_CHART_LABEL = "With RDP Tolerance"
ORIGINAL_CHART_COLOR = "rgb(255, 99, 132)"
SIMPLIFIED_CHART_COLOR = "#2e51c7"

# Range of the tolerance slider
MIN_DEMO_EPSILON: float = 0.1
MAX_DEMO_EPSILON: float = 100.0


def clamp_demo_epsilon(value: float) -> float:
    """Round a slider value to one decimal and clamp it to the slider range."""
    value = round(float(value), 1)
    if value < MIN_DEMO_EPSILON:
        return MIN_DEMO_EPSILON
    if value > MAX_DEMO_EPSILON:
        return MAX_DEMO_EPSILON
    return value


def build_chart_config(
    labels: Sequence[float],
    points: Sequence[Point],
    label: str,
    color: str = ORIGINAL_CHART_COLOR,
) -> Dict[str, Any]:
    """Return a line-chart configuration for a single polyline.

    Point markers are hidden and animation disabled so that redrawing
    on every slider change stays cheap.
    """
    return {
        "type": "line",
        "data": {
            "labels": list(labels),
            "datasets": [
                {
                    "label": label,
                    "backgroundColor": color,
                    "borderColor": color,
                    "data": [[x, y] for x, y in points],
                }
            ],
        },
        "options": {
            "elements": {"point": {"radius": 0}},
            "animation": {"duration": 0},
            "maintainAspectRatio": False,
        },
    }


def build_demo_charts(
    labels: Sequence[float],
    points: Sequence[Point],
    epsilon: float,
) -> List[Dict[str, Any]]:
    """Build the original and simplified chart configurations.

    Args:
        labels: x-axis labels shared by both charts.
        points: The unsimplified polyline.
        epsilon: Tolerance passed to the simplifier unchanged.

    Returns:
        ``[original_chart, simplified_chart]``.
    """
    simplified = simplify_polyline(points, epsilon)
    return [
        build_chart_config(labels, points, ORIGINAL_CHART_LABEL, ORIGINAL_CHART_COLOR),
        build_chart_config(labels, simplified, SIMPLIFIED_CHART_LABEL, SIMPLIFIED_CHART_COLOR),
    ]
