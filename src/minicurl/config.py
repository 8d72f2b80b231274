"""
Configuration management for minicurl.

Loads transport defaults from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv

from minicurl import __version__


ENV_LOCATIONS = [
    Path.home() / ".minicurl" / ".env",
    Path.home() / ".config" / "minicurl" / ".env",
    Path.cwd() / ".env",
]


def load_env_file(locations: list[Path] | None = None) -> Path | None:
    """Load the first .env file found. Returns its path, if any."""
    for env_path in locations or ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """HTTP transport and output settings."""

    timeout: float = 30.0
    verify_ssl: bool = True
    follow_redirects: bool = True
    max_redirects: int = 10
    user_agent: str = f"minicurl/{__version__}"

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        load_env_file()
        return cls(
            timeout=float(os.getenv("MINICURL_TIMEOUT", "30.0")),
            verify_ssl=_env_bool("MINICURL_VERIFY_SSL", True),
            follow_redirects=_env_bool("MINICURL_FOLLOW_REDIRECTS", True),
            max_redirects=int(os.getenv("MINICURL_MAX_REDIRECTS", "10")),
            log_level=os.getenv("MINICURL_LOG_LEVEL", "WARNING").upper(),
        )


# Global config instance
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config


def set_config(config: ClientConfig | None) -> None:
    """Set the global configuration instance (None resets it)."""
    global _config
    _config = config
