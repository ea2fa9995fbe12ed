"""
Release search result models.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from .fields import artist_credit, ensure_object, get_artist_names, get_int, get_list, get_str


@dataclass(frozen=True)
class SearchResult:
    """One candidate release returned by a text search."""
    id: str
    title: str
    status: str = ""
    date: str = ""  # may be partial, e.g. "1991"
    score: int = 0
    artist_names: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchResult":
        data = ensure_object(data, "release")
        return cls(
            id=get_str(data, "id"),
            title=get_str(data, "title"),
            status=get_str(data, "status"),
            date=get_str(data, "date"),
            score=get_int(data, "score"),
            artist_names=get_artist_names(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "date": self.date,
            "score": self.score,
            "artist-credit": artist_credit(self.artist_names),
        }


@dataclass(frozen=True)
class SearchResponse:
    """
    A page of release search results.

    Pagination values are passed through from MusicBrainz as given;
    `count` is the total number of matches, not len(releases).
    """
    created: str = ""
    count: int = 0
    offset: int = 0
    releases: Tuple[SearchResult, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchResponse":
        data = ensure_object(data, "search response")
        return cls(
            created=get_str(data, "created"),
            count=get_int(data, "count"),
            offset=get_int(data, "offset"),
            releases=tuple(SearchResult.from_dict(r) for r in get_list(data, "releases")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "created": self.created,
            "count": self.count,
            "offset": self.offset,
            "releases": [release.to_dict() for release in self.releases],
        }
