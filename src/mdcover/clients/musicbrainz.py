"""
MusicBrainz Client Module
A client for searching MusicBrainz releases and fetching their track listings.
"""

import json
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import quote

from ..core.config import MUSICBRAINZ_CONFIG, MusicBrainzConfig
from ..core.exceptions import UpstreamError, UpstreamMalformedResponse
from ..core.logger import get_logger
from ..models.releases import ReleaseDetail
from ..models.search_results import SearchResponse
from .transport import HttpTransport, RequestsTransport

logger = get_logger(__name__)

HTTP_OK = 200


class MusicBrainzClient:
    """
    MusicBrainz release client.

    Holds no per-request state, so one instance can serve concurrent
    callers. There is no retry, caching, or rate limiting.
    """
    
    def __init__(
        self,
        config: Optional[MusicBrainzConfig] = None,
        transport: Optional[HttpTransport] = None
    ):
        self.config = config or MusicBrainzConfig.from_dict(MUSICBRAINZ_CONFIG)
        self.transport = transport or RequestsTransport()
        self.headers = MappingProxyType({
            'User-Agent': self.config.user_agent,
            'Accept': 'application/json'
        })
    
    @property
    def base_url(self) -> str:
        return self.config.base_url
    
    @property
    def timeout(self) -> float:
        return self.config.timeout
    
    def _make_request(self, url: str, params: Mapping[str, Any]) -> Any:
        """
        Send a GET request and decode the JSON body.
        
        Args:
            url: Request URL
            params: Query parameters
            
        Returns:
            Decoded JSON value
            
        Raises:
            UpstreamUnreachable: On transport failure or timeout
            UpstreamError: If the status is not 200
            UpstreamMalformedResponse: If the body is not valid JSON
        """
        logger.debug(f"GET {url} params={dict(params)}")
        response = self.transport.get(url, params, self.headers, self.timeout)
        
        if response.status_code != HTTP_OK:
            raise UpstreamError(response.status_code, response.reason)
        
        try:
            return json.loads(response.body)
        except (ValueError, RecursionError) as e:
            raise UpstreamMalformedResponse(f"Invalid JSON from {url}: {e}") from e
    
    def search_releases(self, query: str) -> SearchResponse:
        """
        Search for releases in MusicBrainz.
        
        Args:
            query: Free-text search (Lucene syntax is passed through)
            
        Returns:
            SearchResponse with the releases in upstream order
        """
        url = f"{self.base_url}/release/"
        params = {
            'query': query,
            'fmt': 'json'
        }
        
        data = self._make_request(url, params)
        try:
            result = SearchResponse.from_dict(data)
        except TypeError as e:
            raise UpstreamMalformedResponse(f"Unexpected search response shape: {e}") from e
        
        logger.debug(f"Search {query!r} returned {len(result.releases)} of {result.count} releases")
        return result
    
    def get_release(self, release_id: str) -> ReleaseDetail:
        """
        Get a release with its media and tracks.
        
        Args:
            release_id: MusicBrainz release ID (MBID); percent-encoded as a
                single path segment
            
        Returns:
            ReleaseDetail with media and tracks in upstream order
        """
        url = f"{self.base_url}/release/{quote(release_id, safe='')}"
        params = {
            'inc': 'recordings',
            'fmt': 'json'
        }
        
        data = self._make_request(url, params)
        try:
            result = ReleaseDetail.from_dict(data)
        except TypeError as e:
            raise UpstreamMalformedResponse(f"Unexpected release response shape: {e}") from e
        
        logger.debug(f"Release {release_id} has {len(result.media)} media, {result.track_count} tracks")
        return result
