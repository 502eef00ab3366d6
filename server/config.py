"""
Curator server settings

Host, port, log level, the optional curation config document and cache sizing,
read from the environment (a root .env is loaded first via python-dotenv).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Process-level settings for the curation API."""

    # Listener
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Optional JSON document merged into CurationConfig defaults
    curation_config_path: Optional[Path] = None

    # Curation cache
    cache_ttl_seconds: Optional[int] = None
    cache_max_entries: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        def _int_env(key: str) -> Optional[int]:
            v = os.getenv(key, "").strip()
            return int(v) if v else None

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            curation_config_path=_path_env("CURATION_CONFIG_PATH"),
            cache_ttl_seconds=_int_env("CACHE_TTL_SECONDS"),
            cache_max_entries=_int_env("CACHE_MAX_ENTRIES"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Check paths and cache sizing.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.curation_config_path is not None and not self.curation_config_path.exists():
            errors.append(f"Curation config not found: {self.curation_config_path}")

        if self.cache_ttl_seconds is not None and self.cache_ttl_seconds <= 0:
            errors.append(f"CACHE_TTL_SECONDS must be positive, got {self.cache_ttl_seconds}")

        if self.cache_max_entries is not None and self.cache_max_entries <= 0:
            errors.append(f"CACHE_MAX_ENTRIES must be positive, got {self.cache_max_entries}")

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
