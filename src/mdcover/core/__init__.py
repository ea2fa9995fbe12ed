"""
Core module for mdcover.
Contains configuration, exceptions, logging setup, and validation.
"""

from .config import MusicBrainzConfig, ServerConfig
from .exceptions import *
from .logger import setup_logging, get_logger
from .validation import validate_configuration, validate_and_raise

__all__ = [
    'MusicBrainzConfig',
    'ServerConfig',
    'setup_logging',
    'get_logger',
    'validate_configuration',
    'validate_and_raise',
    'MdCoverError',
    'ValidationError',
    'ConfigurationError',
    'APIError',
    'UpstreamUnreachable',
    'UpstreamError',
    'UpstreamMalformedResponse',
]
