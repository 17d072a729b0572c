"""Elevation processing: spike smoothing and total gain."""

from __future__ import annotations

import logging
import math
import sys
from typing import List, Optional, Tuple

from ..models import Point, Track, TrackSegment
from ..utils import require_non_negative

LOGGER = logging.getLogger(__name__)


def smooth_elevation(track: Track, threshold_m: float) -> Track:
    """Replace single-point elevation spikes with the mean of their neighbours.

    An interior point is a spike when it is a strict peak or trough and its
    elevation differs from both neighbours by more than ``threshold_m``.
    Neighbour values are always read from the input, so a replaced point
    never influences the classification of the next one. Point counts and
    coordinates are left untouched.

    Raises:
        InvalidArgumentError: ``threshold_m`` is negative or NaN.
    """

    threshold_m = require_non_negative(threshold_m, "threshold_m")
    LOGGER.info("Smoothing elevation with threshold %sm", threshold_m)

    segments: List[TrackSegment] = []
    spikes = 0
    for segment in track.segments:
        smoothed, removed = _smooth_segment(segment, threshold_m)
        segments.append(smoothed)
        spikes += removed

    LOGGER.info("Elevation smoothed: %d spikes removed/smoothed", spikes)
    return track.with_segments(segments)


def is_spike(prev: float, curr: float, nxt: float, threshold_m: float) -> bool:
    up = abs(curr - prev)
    down = abs(nxt - curr)
    if not (up > threshold_m and down > threshold_m):
        return False
    peak = curr > prev and curr > nxt
    trough = curr < prev and curr < nxt
    return peak or trough


def _smooth_segment(segment: TrackSegment, threshold_m: float) -> Tuple[TrackSegment, int]:
    points = segment.points
    if len(points) < 3:
        return segment, 0

    smoothed: List[Point] = [points[0]]
    spikes = 0
    for prev, curr, nxt in zip(points, points[1:], points[2:]):
        replacement = _interpolated_elevation(prev, curr, nxt, threshold_m)
        if replacement is None:
            smoothed.append(curr)
            continue
        smoothed.append(curr.with_elevation(replacement))
        spikes += 1
    smoothed.append(points[-1])
    return TrackSegment.of(smoothed), spikes


def _interpolated_elevation(
    prev: Point, curr: Point, nxt: Point, threshold_m: float
) -> Optional[float]:
    if prev.elevation is None or curr.elevation is None or nxt.elevation is None:
        return None
    if not is_spike(prev.elevation, curr.elevation, nxt.elevation, threshold_m):
        return None
    return (prev.elevation + nxt.elevation) / 2.0


def total_elevation_gain(track: Track) -> int:
    """Sum of climbs between consecutive points, rounded to whole metres.

    Segments are not chained together and pairs missing an elevation are
    skipped. Rounding (half away from zero) is applied once to the total.
    """

    total = 0.0
    for segment in track.segments:
        points = segment.points
        for prev, curr in zip(points, points[1:]):
            if prev.elevation is None or curr.elevation is None:
                continue
            delta = curr.elevation - prev.elevation
            if delta > 0 and math.isfinite(delta):
                total += delta
    if math.isinf(total):
        total = sys.float_info.max
    whole = math.floor(total)
    return whole + 1 if total - whole >= 0.5 else whole
