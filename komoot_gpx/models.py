"""Immutable value types describing a GPS track."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Point:
    """Single GPS fix; ``elevation`` is ``None`` when the source had no altitude."""

    latitude: float
    longitude: float
    elevation: Optional[float] = None

    def with_elevation(self, elevation: Optional[float]) -> "Point":
        return replace(self, elevation=elevation)


@dataclass(frozen=True, slots=True)
class TrackSegment:
    points: Tuple[Point, ...] = ()

    @classmethod
    def of(cls, points: Iterable[Point]) -> "TrackSegment":
        return cls(tuple(points))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True, slots=True)
class Track:
    """Ordered segments of a traveled path plus an opaque display name."""

    name: Optional[str] = None
    segments: Tuple[TrackSegment, ...] = ()

    @property
    def point_count(self) -> int:
        return sum(len(segment) for segment in self.segments)

    def with_segments(self, segments: Iterable[TrackSegment]) -> "Track":
        """Return a copy holding ``segments`` and the same name."""

        return replace(self, segments=tuple(segments))
