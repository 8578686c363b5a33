"""
Routes for storing, listing and simplifying saved polylines.

These endpoints are a thin passthrough over the relational store:
rows go in and come back out in order.  The only logic is the
validation applied before a polyline is written and the reuse of the
simplifier for the ``/simplified`` view.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from .models import (
    PolylineCreateRequest,
    PolylineInfo,
    PolylineResponse,
    SimplifyResponse,
)
from .routes_simplify import simplify_to_response
from ..services.polylines_store import (
    PolylineRecord,
    create_polyline as create_polyline_record,
    delete_polyline as delete_polyline_record,
    get_polyline,
    get_polyline_points,
    list_polylines as list_polyline_records,
)
from ..services.simplify import InvalidPoint, validate_points


router = APIRouter()


def _to_info(record: PolylineRecord) -> PolylineInfo:
    return PolylineInfo(
        polylineId=record.polyline_id,
        name=record.name,
        pointCount=record.point_count,
        createdAt=record.created_at,
    )


def _require_polyline(polyline_id: str) -> PolylineRecord:
    record = get_polyline(polyline_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Polyline not found")
    return record


@router.post("/polylines", response_model=PolylineInfo, status_code=201)
async def create_polyline(body: PolylineCreateRequest) -> PolylineInfo:
    """Store a polyline.

    Raises:
        HTTPException: 400 if any point has a non-finite coordinate.
    """
    try:
        validate_points(body.points)
    except InvalidPoint as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    record = create_polyline_record(body.name, body.points)
    return _to_info(record)


@router.get("/polylines", response_model=list[PolylineInfo])
async def list_polylines() -> list[PolylineInfo]:
    """Return summaries of all stored polylines."""
    return [_to_info(r) for r in list_polyline_records()]


@router.get("/polylines/{polyline_id}", response_model=PolylineResponse)
async def get_polyline_detail(polyline_id: str) -> PolylineResponse:
    """Return a stored polyline with its points in order.

    Raises:
        HTTPException: If the polyline does not exist.
    """
    record = _require_polyline(polyline_id)
    return PolylineResponse(
        polylineId=record.polyline_id,
        name=record.name,
        points=get_polyline_points(polyline_id),
    )


@router.get("/polylines/{polyline_id}/simplified", response_model=SimplifyResponse)
async def get_simplified_polyline(
    polyline_id: str,
    epsilon: float | None = Query(
        default=None, description="Tolerance; defaults to 1% of the largest extent"
    ),
) -> SimplifyResponse:
    """Simplify a stored polyline without modifying it."""
    _require_polyline(polyline_id)
    return simplify_to_response(get_polyline_points(polyline_id), epsilon)


@router.delete("/polylines/{polyline_id}", status_code=204)
async def delete_polyline(polyline_id: str) -> None:
    """Delete a polyline.  Deleting an unknown identifier is not an error."""
    delete_polyline_record(polyline_id)
    return None
