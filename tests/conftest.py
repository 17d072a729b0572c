"""Global pytest fixtures & helpers.

Adds project root to path and provides track factories shared by the
processing and export tests.
"""
from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from komoot_gpx.models import Point, Track, TrackSegment


# --- Factory helpers -------------------------------------------------
def make_segment(elevations: Sequence[Optional[float]], step: float = 0.001) -> TrackSegment:
    """Diagonal run of points starting at (45.0, 11.0) with the given elevations."""
    return TrackSegment.of(
        Point(latitude=45.0 + i * step, longitude=11.0 + i * step, elevation=ele)
        for i, ele in enumerate(elevations)
    )


def make_track(*segments: Sequence[Optional[float]], name: str = "Test Track") -> Track:
    return Track(name=name, segments=tuple(make_segment(ele) for ele in segments))


def elevations(segment: TrackSegment) -> list:
    return [point.elevation for point in segment.points]


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def straight_track() -> Track:
    """Four redundant points along a meridian, ~1.1 km long."""
    lats = [45.0, 45.001, 45.002, 45.003, 45.010]
    return Track(
        name="Test Track",
        segments=(TrackSegment.of(Point(lat, 11.0, 100.0) for lat in lats),),
    )


@pytest.fixture
def zigzag_track() -> Track:
    """Sawtooth with ~111 m teeth; elevation encodes the point index."""
    coords = [
        (45.000, 11.000),
        (45.001, 11.001),
        (45.000, 11.002),
        (45.001, 11.003),
        (45.000, 11.004),
    ]
    return Track(
        name="Zigzag",
        segments=(
            TrackSegment.of(
                Point(lat, lon, 100.0 + i) for i, (lat, lon) in enumerate(coords)
            ),
        ),
    )


@pytest.fixture
def spiky_track() -> Track:
    return make_track([100, 150, 105, 110, 80, 115], name="Test Track with Spikes")
