"""
Route for simplifying an ad-hoc polyline.

The client posts an ordered list of ``[x, y]`` points and an optional
tolerance.  Invalid tolerances or non-finite coordinates are rejected
with HTTP 400 and nothing is returned; the simplifier never clamps or
repairs input.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from fastapi import APIRouter, HTTPException

from .models import SimplifyRequest, SimplifyResponse
from ..services.distance import Point
from ..services.simplify import (
    SimplificationError,
    choose_simplification_tolerance,
    simplify_polyline,
    validate_points,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def simplify_to_response(points: Sequence[Point], epsilon: Optional[float]) -> SimplifyResponse:
    """Run the simplifier and wrap the result with summary metadata.

    Raises:
        HTTPException: 400 when the tolerance or a point is invalid.
    """
    try:
        # Points are checked before an automatic tolerance is derived from them
        validate_points(points)
        if epsilon is None:
            epsilon = choose_simplification_tolerance(points)
        simplified = simplify_polyline(points, epsilon)
    except SimplificationError as exc:
        logger.warning("Rejected simplification request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    original_count = len(points)
    simplified_count = len(simplified)
    ratio = simplified_count / original_count if original_count else 0.0
    return SimplifyResponse(
        points=simplified,
        metadata={
            "epsilon": epsilon,
            "originalCount": original_count,
            "simplifiedCount": simplified_count,
            "reductionRatio": ratio,
        },
    )


@router.post("/simplify", response_model=SimplifyResponse)
async def simplify(body: SimplifyRequest) -> SimplifyResponse:
    """Simplify the posted polyline.

    Args:
        body: Points and optional epsilon.  When epsilon is omitted a
            tolerance of 1% of the polyline's largest extent is used.

    Returns:
        SimplifyResponse: The retained points and summary metadata.
    """
    return simplify_to_response(body.points, body.epsilon)
