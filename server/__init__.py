"""
Content Curator API Server

Usage: uvicorn server:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .state import AppState, get_state, reset_state

__all__ = [
    "app",
    "create_app",
    "AppState",
    "ServerConfig",
    "get_config",
    "get_state",
    "reload_config",
    "reset_state",
]
