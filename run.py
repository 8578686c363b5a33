"""
Entry point for the polyline simplification service.

Running this script with ``python run.py`` will start the FastAPI
server defined in ``backend/app/main.py``.  The bind address can be
changed with the ``HOST`` and ``PORT`` environment variables.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import logging
import uvicorn

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main() -> None:
    """Run the Uvicorn server hosting the simplification API."""
    # Ensure the repository root is importable so ``backend`` resolves
    # when the script is launched from elsewhere.
    repo_root = Path(__file__).resolve().parent
    if str(repo_root) not in sys.path:
        sys.path.append(str(repo_root))

    # Import inside main() to avoid modifying sys.path at import time.
    from backend.app.main import app  # type: ignore

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
