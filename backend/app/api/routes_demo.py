"""
Routes backing the interactive simplification demo.

The demo page lets a user choose how many random points to plot and a
tolerance, then shows the raw and simplified polylines side by side.
These endpoints supply the random data and the ready-to-draw chart
configurations; drawing itself is left to the front end.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from .models import DemoChartsRequest, DemoChartsResponse, RandomPointsResponse
from ..services.charts import build_demo_charts, clamp_demo_epsilon
from ..services.point_generator import (
    DEFAULT_NUM_POINTS,
    DEFAULT_X_CEILING,
    DEFAULT_Y_CEILING,
    generate_random_points,
)


router = APIRouter()


@router.get("/demo/points", response_model=RandomPointsResponse)
async def random_points(
    numPoints: int = Query(default=DEFAULT_NUM_POINTS, ge=2, le=10000),
    xCeiling: int = Query(default=DEFAULT_X_CEILING, ge=0),
    yCeiling: int = Query(default=DEFAULT_Y_CEILING, ge=0),
    seed: int | None = Query(default=None),
) -> RandomPointsResponse:
    """Generate random demo points with distinct, sorted x values.

    Raises:
        HTTPException: 400 if more points are requested than distinct
            x values exist below ``xCeiling``.
    """
    try:
        labels, points = generate_random_points(numPoints, xCeiling, yCeiling, seed=seed)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return RandomPointsResponse(labels=labels, points=points)


@router.post("/demo/charts", response_model=DemoChartsResponse)
async def demo_charts(body: DemoChartsRequest) -> DemoChartsResponse:
    """Generate random data and return the original and simplified charts.

    Without ``numPoints`` the default 100 points over a 100x100 grid
    are used; otherwise ``numPoints`` points spread over an x range of
    the same size.  The tolerance is clamped to the slider range before
    being handed to the simplifier.
    """
    if body.numPoints is None:
        labels, points = generate_random_points(seed=body.seed)
    else:
        labels, points = generate_random_points(
            body.numPoints, body.numPoints, DEFAULT_Y_CEILING, seed=body.seed
        )
    epsilon = clamp_demo_epsilon(body.epsilon)
    charts = build_demo_charts(labels, points, epsilon)
    return DemoChartsResponse(epsilon=epsilon, charts=charts)
