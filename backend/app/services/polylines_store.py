"""
Persistence for stored polylines.

A ``PolylineRecord`` names a polyline and records when it was saved;
its points live in ``PolylinePointRecord`` rows keyed by the polyline
identifier and a sequence number.  Points are always read back ordered
by ``seq`` so the stored order is the polyline order.  The functions
here are a thin passthrough over the database with no business logic;
validation happens in the API layer before anything is written.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlmodel import SQLModel, Field, select

from .db import create_db_and_tables, get_session
from .distance import Point

logger = logging.getLogger(__name__)


class PolylineRecord(SQLModel, table=True):
    """Database model representing a named, stored polyline."""

    polyline_id: str = Field(primary_key=True)
    name: str
    point_count: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PolylinePointRecord(SQLModel, table=True):
    """A single vertex of a stored polyline.

    ``seq`` is the zero-based position of the point within its
    polyline.  Duplicate coordinates are allowed.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    polyline_id: str = Field(foreign_key="polylinerecord.polyline_id", index=True)
    seq: int
    x: float
    y: float


def init_db() -> None:
    """Initialise the database and create tables if they do not exist."""
    create_db_and_tables()


def create_polyline(name: str, points: Sequence[Point]) -> PolylineRecord:
    """Persist a polyline and its points in a single transaction.

    Args:
        name: Human readable label for the polyline.
        points: Ordered ``(x, y)`` points.

    Returns:
        The persisted ``PolylineRecord``.
    """
    record = PolylineRecord(
        polyline_id=uuid.uuid4().hex,
        name=name,
        point_count=len(points),
    )
    with get_session() as session:
        session.add(record)
        for seq, (x, y) in enumerate(points):
            session.add(
                PolylinePointRecord(
                    polyline_id=record.polyline_id, seq=seq, x=float(x), y=float(y)
                )
            )
        session.commit()
        session.refresh(record)
    logger.info("Stored polyline %s (%d points)", record.polyline_id, record.point_count)
    return record


def get_polyline(polyline_id: str) -> Optional[PolylineRecord]:
    """Retrieve a ``PolylineRecord`` by identifier, or ``None``."""
    with get_session() as session:
        return session.get(PolylineRecord, polyline_id)


def list_polylines() -> List[PolylineRecord]:
    """Return all polyline records, oldest first."""
    with get_session() as session:
        statement = select(PolylineRecord).order_by(PolylineRecord.created_at)
        return list(session.exec(statement))


def get_polyline_points(polyline_id: str) -> List[Point]:
    """Return the points of a polyline in their stored order."""
    with get_session() as session:
        statement = (
            select(PolylinePointRecord)
            .where(PolylinePointRecord.polyline_id == polyline_id)
            .order_by(PolylinePointRecord.seq)
        )
        return [(row.x, row.y) for row in session.exec(statement)]


def delete_polyline(polyline_id: str) -> None:
    """Delete a polyline and its points.  Missing identifiers are ignored."""
    with get_session() as session:
        record = session.get(PolylineRecord, polyline_id)
        if record is None:
            return
        statement = select(PolylinePointRecord).where(
            PolylinePointRecord.polyline_id == polyline_id
        )
        for row in session.exec(statement):
            session.delete(row)
        session.delete(record)
        session.commit()
    logger.info("Deleted polyline %s", polyline_id)
