"""
Request parameter and configuration validation.
"""

import logging
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from .config import (
    MUSICBRAINZ_CONFIG,
    SERVER_CONFIG,
    LOGGING_CONFIG,
    ERROR_MESSAGES,
    parse_port,
)
from .exceptions import ConfigurationError, ValidationError


def require_param(value: Optional[str], message: str) -> str:
    """
    Return a required request parameter, rejecting missing or empty values.

    The value is returned untouched: whitespace is the caller's business
    and is forwarded upstream as-is.

    Raises:
        ValidationError: If value is None or empty
    """
    if not value:
        raise ValidationError(message)
    return value


def validate_search_query(query: Optional[str]) -> str:
    """Validate the `q` parameter of a search request."""
    return require_param(query, ERROR_MESSAGES["MISSING_QUERY"])


def validate_release_id(release_id: Optional[str]) -> str:
    """Validate the id suffix of a release request."""
    return require_param(release_id, ERROR_MESSAGES["MISSING_RELEASE_ID"])


def validate_configuration(port: Optional[str] = None) -> Tuple[bool, List[str]]:
    """
    Validate application configuration.
    
    Args:
        port: Raw PORT value to check, if any
        
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    base_url = urlparse(MUSICBRAINZ_CONFIG["BASE_URL"])
    if base_url.scheme not in ("http", "https") or not base_url.netloc:
        errors.append("MusicBrainz BASE_URL must be an absolute http(s) URL")
    
    if not MUSICBRAINZ_CONFIG["USER_AGENT"].strip():
        errors.append("MusicBrainz USER_AGENT must not be empty")
    
    if MUSICBRAINZ_CONFIG["TIMEOUT"] <= 0:
        errors.append("MusicBrainz TIMEOUT must be > 0")
    
    try:
        parse_port(port)
    except ConfigurationError as e:
        errors.append(str(e))
    
    if not SERVER_CONFIG["STATIC_DIR"]:
        errors.append("STATIC_DIR must not be empty")
    
    if not isinstance(getattr(logging, LOGGING_CONFIG["LEVEL"], None), int):
        errors.append(f"LOG_LEVEL must be a standard logging level, got {LOGGING_CONFIG['LEVEL']}")
    
    return len(errors) == 0, errors


def validate_and_raise(port: Optional[str] = None):
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration(port)
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
