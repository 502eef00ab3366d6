"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .root import router as root_router
from .config import router as config_router
from .curate import router as curate_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(config_router, prefix="/api/config", tags=["config"])
    app.include_router(curate_router, prefix="/api", tags=["curate"])
