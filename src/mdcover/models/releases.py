"""
Release detail and track layout models.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from .fields import artist_credit, ensure_object, get_artist_names, get_int, get_list, get_str


@dataclass(frozen=True)
class Track:
    """Track information from a medium."""
    id: str
    position: int
    title: str
    length: int = 0  # milliseconds, 0 when unknown

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Track":
        data = ensure_object(data, "track")
        return cls(
            id=get_str(data, "id"),
            position=get_int(data, "position"),
            title=get_str(data, "title"),
            length=get_int(data, "length"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "position": self.position,
            "title": self.title,
            "length": self.length,
        }


@dataclass(frozen=True)
class Medium:
    """One disc or side of a release."""
    position: int
    format: str = ""
    tracks: Tuple[Track, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Medium":
        data = ensure_object(data, "medium")
        return cls(
            position=get_int(data, "position"),
            format=get_str(data, "format"),
            tracks=tuple(Track.from_dict(t) for t in get_list(data, "tracks")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "format": self.format,
            "tracks": [track.to_dict() for track in self.tracks],
        }


@dataclass(frozen=True)
class ReleaseDetail:
    """Detailed release information with its media and tracks, in upstream order."""
    id: str
    title: str
    artist_names: Tuple[str, ...] = ()
    media: Tuple[Medium, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReleaseDetail":
        data = ensure_object(data, "release")
        return cls(
            id=get_str(data, "id"),
            title=get_str(data, "title"),
            artist_names=get_artist_names(data),
            media=tuple(Medium.from_dict(m) for m in get_list(data, "media")),
        )

    @property
    def track_count(self) -> int:
        return sum(len(medium.tracks) for medium in self.media)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "media": [medium.to_dict() for medium in self.media],
            "artist-credit": artist_credit(self.artist_names),
        }
