"""
Main application module for the polyline simplification backend.

This file sets up the FastAPI application, configures CORS so the
demo front end can make cross-origin requests, mounts the static
frontend files when they exist, and exposes a simple health check
endpoint.

Routers for simplification, stored polylines and the demo are
included under the `/api` namespace.
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.routes_demo import router as demo_router
from .api.routes_polylines import router as polylines_router
from .api.routes_simplify import router as simplify_router

# init_db creates the polyline tables if they do not already exist.
from .services.polylines_store import init_db  # type: ignore


def create_app() -> FastAPI:
    """Factory to create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance.
    """
    app = FastAPI(title="Polyline simplifier")

    # The schema must exist before any request touches the store.
    # init_db is idempotent.
    @app.on_event("startup")  # type: ignore[misc]
    async def startup_event() -> None:
        init_db()

    # The demo front end may be served from anywhere.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    # Health check endpoint for monitoring and deployment probes.
    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(simplify_router, prefix="/api", tags=["simplify"])
    app.include_router(polylines_router, prefix="/api", tags=["polylines"])
    app.include_router(demo_router, prefix="/api", tags=["demo"])

    # Serve a compiled demo front end from ``frontend`` at the
    # repository root when one is present.
    frontend_dir = Path(__file__).resolve().parents[2] / "frontend"
    if frontend_dir.exists():
        app.mount(
            "/",
            StaticFiles(directory=str(frontend_dir), html=True),
            name="frontend",
        )

    return app


# Create the application instance.  Uvicorn will import this when
# running `uvicorn app.main:app` from within the backend directory.
app = create_app()
