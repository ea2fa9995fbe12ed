"""
Configuration for mdcover.
Contains all constants, settings, and process-wide parameters.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .exceptions import ConfigurationError

# Project Information
PROJECT_NAME = "mdcover"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "MiniDisc cover creator backend - search MusicBrainz releases and track listings"

# MusicBrainz Configuration
MUSICBRAINZ_CONFIG = {
    "BASE_URL": "https://musicbrainz.org/ws/2",
    # MusicBrainz rejects or throttles clients without a descriptive User-Agent
    "USER_AGENT": "MiniDiscCoverCreator/1.0.0 ( contact@example.com )",
    "TIMEOUT": 10,
}

# Server Configuration
SERVER_CONFIG = {
    "HOST": "0.0.0.0",
    "DEFAULT_PORT": 8080,
    "STATIC_DIR": "web/dist",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": "INFO",
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error messages returned to HTTP clients
ERROR_MESSAGES = {
    "MISSING_QUERY": "missing query parameter 'q'",
    "MISSING_RELEASE_ID": "missing release id",
    "SEARCH_FAILED": "search failed",
    "RELEASE_FAILED": "failed to get release",
}


@dataclass(frozen=True)
class MusicBrainzConfig:
    """Settings shared by every MusicBrainz request."""
    base_url: str = MUSICBRAINZ_CONFIG["BASE_URL"]
    user_agent: str = MUSICBRAINZ_CONFIG["USER_AGENT"]
    timeout: float = MUSICBRAINZ_CONFIG["TIMEOUT"]

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "MusicBrainzConfig":
        return cls(
            base_url=config["BASE_URL"].rstrip("/"),
            user_agent=config["USER_AGENT"],
            timeout=config["TIMEOUT"],
        )


@dataclass(frozen=True)
class ServerConfig:
    """Listening address and static asset location."""
    host: str = SERVER_CONFIG["HOST"]
    port: int = SERVER_CONFIG["DEFAULT_PORT"]
    static_dir: Path = Path(SERVER_CONFIG["STATIC_DIR"])

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """
        Build the server config from the environment.

        Only PORT is read; an unset or empty value means the default port.

        Raises:
            ConfigurationError: If PORT is not a valid TCP port number
        """
        environ = os.environ if environ is None else environ
        return cls(port=parse_port(environ.get("PORT", "")))


def parse_port(value: Optional[str]) -> int:
    """Parse a PORT value, falling back to the default when empty."""
    if not value:
        return SERVER_CONFIG["DEFAULT_PORT"]
    try:
        port = int(value)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {value!r}") from None
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT must be between 1 and 65535, got {port}")
    return port


def as_dict(config: Any) -> Dict[str, Any]:
    """Return a plain dict view of a config dataclass, for logging."""
    return {name: getattr(config, name) for name in config.__dataclass_fields__}
