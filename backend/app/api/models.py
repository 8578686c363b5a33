"""
Pydantic data models for the polyline simplification API.

These models define the shapes of requests and responses used by the
backend.  Points travel as ``[x, y]`` pairs so payloads can be fed
straight into chart datasets.  Finite-ness of coordinates is checked
by the simplifier rather than here, so that rejected input produces a
single error naming the offending point.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field


class SimplifyRequest(BaseModel):
    """Request body for simplifying an ad-hoc polyline."""

    points: List[Tuple[float, float]] = Field(
        ..., description="Ordered list of [x, y] points describing an open polyline"
    )
    epsilon: float | None = Field(
        default=None,
        description=(
            "Maximum perpendicular deviation for dropped points.  When omitted "
            "1% of the polyline's largest extent is used."
        ),
    )


class SimplifyResponse(BaseModel):
    """Simplified polyline together with summary metadata."""

    points: List[Tuple[float, float]] = Field(
        ..., description="Retained points, a subsequence of the input in the original order"
    )
    metadata: Dict[str, Any] = Field(
        ..., description="Epsilon used, point counts and reduction ratio"
    )


class PolylineCreateRequest(BaseModel):
    """Request body for storing a polyline."""

    name: str = Field(..., description="Human readable label for the polyline")
    points: List[Tuple[float, float]] = Field(
        ..., description="Ordered list of [x, y] points"
    )


class PolylineInfo(BaseModel):
    """Summary of a stored polyline."""

    polylineId: str = Field(..., description="Unique identifier for the polyline")
    name: str = Field(..., description="Label supplied when the polyline was stored")
    pointCount: int = Field(..., description="Number of points in the stored polyline")
    createdAt: datetime = Field(..., description="Timestamp of when the polyline was stored")


class PolylineResponse(BaseModel):
    """A stored polyline including its points."""

    polylineId: str = Field(..., description="Unique identifier for the polyline")
    name: str = Field(..., description="Label supplied when the polyline was stored")
    points: List[Tuple[float, float]] = Field(
        ..., description="Ordered list of [x, y] points"
    )


class RandomPointsResponse(BaseModel):
    """Randomly generated demo data."""

    labels: List[float] = Field(..., description="Sorted x values, usable as chart labels")
    points: List[Tuple[float, float]] = Field(
        ..., description="Generated [x, y] points ordered by x"
    )


class DemoChartsRequest(BaseModel):
    """Request body for the side-by-side demo charts."""

    numPoints: int | None = Field(
        default=None,
        ge=2,
        le=10000,
        description="Number of random points to generate (2–10000).  Defaults to 100.",
    )
    epsilon: float = Field(
        ...,
        allow_inf_nan=False,
        description="Slider tolerance; rounded to one decimal and clamped to 0.1–100",
    )
    seed: int | None = Field(
        default=None, description="Optional seed for reproducible demo data"
    )


class DemoChartsResponse(BaseModel):
    """Chart configurations for the original and simplified polylines."""

    epsilon: float = Field(..., description="Tolerance actually applied after clamping")
    charts: List[Dict[str, Any]] = Field(
        ..., description="Line-chart configurations: [original, simplified]"
    )
