"""
Client modules for external APIs.
"""

from .musicbrainz import MusicBrainzClient
from .transport import HttpTransport, RequestsTransport, TransportResponse

__all__ = [
    'MusicBrainzClient',
    'HttpTransport',
    'RequestsTransport',
    'TransportResponse'
]
