"""Application state: curation config and the shared curation cache."""

import json
import logging
from typing import Optional

from curator import CurationConfig, DEFAULT_CONFIG, TTLCache

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)


def load_curation_config(config: ServerConfig) -> CurationConfig:
    """CurationConfig from the JSON file named in the server config, else defaults."""
    if config.curation_config_path is None:
        return DEFAULT_CONFIG
    with open(config.curation_config_path) as f:
        data = json.load(f)
    return CurationConfig.from_dict(data)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig):
        self.config = config
        self.curation_config = load_curation_config(config)
        self.cache = TTLCache(
            ttl_seconds=config.cache_ttl_seconds or self.curation_config.cache_ttl_seconds,
            max_entries=config.cache_max_entries or self.curation_config.cache_max_entries,
        )
        logger.info(
            "[startup] Curation config: %s",
            config.curation_config_path or "defaults",
        )


# Global state instance
_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def reset_state() -> None:
    """Drop the global state so the next get_state() rebuilds it (config reloads, tests)."""
    global _state
    _state = None
