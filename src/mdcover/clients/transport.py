"""
HTTP transport used by the upstream clients.

Transports only send a GET and hand back status and body; tests
substitute a stub.
"""

import queue
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from ..core.exceptions import UpstreamUnreachable
from ..core.logger import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 8192


@dataclass(frozen=True)
class TransportResponse:
    """Status line and raw body of an HTTP response."""
    status_code: int
    reason: str
    body: bytes


class HttpTransport(ABC):
    """Abstract base class for HTTP transports."""

    @abstractmethod
    def get(
        self,
        url: str,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
        timeout: float
    ) -> TransportResponse:
        """
        Send a GET request.

        Raises:
            UpstreamUnreachable: If no response was received within timeout
        """
        pass


class RequestsTransport(HttpTransport):
    """
    HttpTransport backed by a requests.Session.

    `timeout` is a wall-clock limit on the whole exchange: connect,
    headers and body. requests only bounds each socket read, so the
    exchange runs in a daemon thread and the caller stops waiting once
    the deadline passes. The abandoned thread stops at its next chunk.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        # MusicBrainz uses valid certificates; never fall back to plain HTTP
        self.session.verify = True

    def get(
        self,
        url: str,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
        timeout: float
    ) -> TransportResponse:
        deadline = time.monotonic() + timeout
        outcome: "queue.Queue" = queue.Queue(maxsize=1)
        worker = threading.Thread(
            target=self._fetch,
            args=(url, dict(params), dict(headers), timeout, deadline, outcome),
            daemon=True
        )
        worker.start()
        
        try:
            result = outcome.get(timeout=max(deadline - time.monotonic(), 0))
        except queue.Empty:
            logger.debug(f"Abandoning request to {url} after {timeout}s")
            raise UpstreamUnreachable(f"Request to {url} timed out after {timeout}s") from None
        
        if isinstance(result, BaseException):
            raise result
        return result

    def _fetch(
        self,
        url: str,
        params: Dict[str, Any],
        headers: Dict[str, str],
        timeout: float,
        deadline: float,
        outcome: "queue.Queue"
    ):
        """Run one exchange and put a TransportResponse or an exception on outcome."""
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=timeout, stream=True)
            try:
                body = bytearray()
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if time.monotonic() > deadline:
                        raise UpstreamUnreachable(f"Request to {url} timed out after {timeout}s reading the body")
                    body.extend(chunk)
            finally:
                response.close()
            outcome.put(TransportResponse(
                status_code=response.status_code,
                reason=response.reason or "",
                body=bytes(body),
            ))
        except requests.exceptions.Timeout as e:
            error = UpstreamUnreachable(f"Request to {url} timed out after {timeout}s: {e}")
            error.__cause__ = e
            outcome.put(error)
        except requests.exceptions.RequestException as e:
            error = UpstreamUnreachable(f"Request to {url} failed: {e}")
            error.__cause__ = e
            outcome.put(error)
        except Exception as e:
            # Handed to the caller, which re-raises it
            outcome.put(e)

    def close(self):
        self.session.close()
