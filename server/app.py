"""
Content Curator API — FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from curator import __version__

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Content Curator API",
        description="Personalized, diversity-capped learning content recommendations",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup_state():
        ok, errors = config.validate()
        for error in errors:
            logger.warning("[startup] CONFIG_INVALID %s", error)
        state = get_state()
        logger.info(
            "[startup] Content Curator API ready (cache ttl=%ss, max_entries=%s, valid_config=%s)",
            state.cache.ttl_seconds, state.cache.max_entries, ok,
        )

    return app


app = create_app()
