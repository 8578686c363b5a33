"""
Database configuration and session management for the polyline backend.

This module defines a SQLModel engine targeting a SQLite database stored
in the project's ``storage`` directory.  The directory can be moved with
the ``POLYLINE_STORAGE_DIR`` environment variable, and any other
relational store (for example MariaDB) can be selected by setting
``POLYLINE_DATABASE_URL`` to a full SQLAlchemy URL.  Helper functions
initialise the schema and hand out session objects.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sqlmodel import SQLModel, create_engine, Session

logger = logging.getLogger(__name__)

# Default storage lives at the repository root, beside ``backend``.
STORAGE_DIR = Path(
    os.getenv("POLYLINE_STORAGE_DIR")
    or Path(__file__).resolve().parents[3] / "storage"
)

DATABASE_URL = os.getenv("POLYLINE_DATABASE_URL") or (
    f"sqlite:///{(STORAGE_DIR / 'polylines.db').as_posix()}"
)

if DATABASE_URL.startswith("sqlite"):
    STORAGE_DIR.mkdir(parents=True, exist_ok=True)
    # Sessions are opened from FastAPI's worker threads
    _connect_args = {"check_same_thread": False}
else:
    _connect_args = {}

engine = create_engine(DATABASE_URL, echo=False, connect_args=_connect_args)


def create_db_and_tables() -> None:
    """Create all tables in the database.

    This should be called once on application startup.  If the
    database file does not exist it will be created automatically.
    """
    logger.info("Initialising database at %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    """Return a new SQLModel session bound to the engine.

    Sessions returned by this function should be managed with a
    context manager (``with get_session() as session: ...``) to
    ensure that connections are properly closed.
    """
    return Session(engine)
