"""Tests for the value types and shared helpers."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from komoot_gpx.errors import InvalidArgumentError
from komoot_gpx.models import Point, Track, TrackSegment
from komoot_gpx.utils import percent_reduction, require_non_negative, setup_logging

from conftest import make_track


def test_points_are_immutable() -> None:
    point = Point(45.0, 11.0, 100.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.elevation = 5.0  # type: ignore[misc]


def test_with_elevation_returns_copy() -> None:
    point = Point(45.0, 11.0, 100.0)
    changed = point.with_elevation(120.0)
    assert changed == Point(45.0, 11.0, 120.0)
    assert point.elevation == 100.0


def test_track_point_count_and_with_segments() -> None:
    track = make_track([1, 2, 3], [4], name="Counted")
    assert track.point_count == 4

    replaced = track.with_segments([TrackSegment()])
    assert replaced.name == "Counted"
    assert replaced.point_count == 0
    assert track.point_count == 4


def test_segment_of_accepts_generators() -> None:
    segment = TrackSegment.of(Point(float(i), 0.0) for i in range(3))
    assert len(segment) == 3
    assert isinstance(segment.points, tuple)


@pytest.mark.parametrize("value, expected", [(0, 0.0), (5, 5.0), ("2.5", 2.5)])
def test_require_non_negative_accepts(value, expected: float) -> None:
    assert require_non_negative(value, "x") == expected


@pytest.mark.parametrize("value", [-0.1, float("nan"), None, "abc"])
def test_require_non_negative_rejects(value) -> None:
    with pytest.raises(InvalidArgumentError, match="x must be"):
        require_non_negative(value, "x")


def test_percent_reduction() -> None:
    assert percent_reduction(10, 4) == pytest.approx(60.0)
    assert percent_reduction(0, 0) == 0.0


def test_setup_logging_can_silence_everything() -> None:
    try:
        setup_logging(enabled=False)
        assert not logging.getLogger("komoot_gpx").isEnabledFor(logging.CRITICAL)
        setup_logging(enabled=True)
        assert logging.getLogger("komoot_gpx").isEnabledFor(logging.CRITICAL)
    finally:
        logging.disable(logging.NOTSET)
