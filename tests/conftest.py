"""
Pytest configuration and shared fixtures.
"""

import json
import pytest
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mdcover.clients.transport import HttpTransport, TransportResponse


class StubTransport(HttpTransport):
    """Transport that replays a canned response and records every call."""

    def __init__(self, response: Optional[TransportResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Mapping[str, Any], headers: Mapping[str, str], timeout: float) -> TransportResponse:
        self.calls.append({
            "url": url,
            "params": dict(params),
            "headers": dict(headers),
            "timeout": timeout,
        })
        if self.error is not None:
            raise self.error
        return self.response

    @classmethod
    def from_json(cls, payload: Any, status_code: int = 200, reason: str = "OK") -> "StubTransport":
        body = json.dumps(payload).encode("utf-8")
        return cls(TransportResponse(status_code=status_code, reason=reason, body=body))


@pytest.fixture
def sample_search_payload() -> Dict[str, Any]:
    """MusicBrainz release search body with one result."""
    return {
        "created": "2024-01-01T00:00:00Z",
        "count": 1,
        "offset": 0,
        "releases": [
            {
                "id": "abc-123",
                "title": "Nevermind",
                "status": "Official",
                "date": "1991-09-24",
                "score": 100,
                "artist-credit": [{"name": "Nirvana"}]
            }
        ]
    }


@pytest.fixture
def sample_release_payload() -> Dict[str, Any]:
    """MusicBrainz release lookup body with two media."""
    return {
        "id": "abc-123",
        "title": "Nevermind",
        "artist-credit": [{"name": "Nirvana", "joinphrase": ""}],
        "media": [
            {
                "position": 1,
                "format": "MiniDisc",
                "tracks": [
                    {"id": "t-1", "position": 1, "title": "Smells Like Teen Spirit", "length": 301920},
                    {"id": "t-2", "position": 2, "title": "In Bloom", "length": 254800}
                ]
            },
            {
                "position": 2,
                "format": "MiniDisc",
                "tracks": [
                    {"id": "t-3", "position": 1, "title": "Lithium", "length": 256933},
                    {"id": "t-4", "position": 2, "title": "Polly", "length": None}
                ]
            }
        ]
    }


@pytest.fixture
def stub_transport() -> StubTransport:
    """Transport stub with no canned response; tests fill it in."""
    return StubTransport()


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """A minimal frontend build directory."""
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>mdcover</html>")
    (dist / "assets" / "app.js").write_text("console.log('mdcover');")
    return dist
