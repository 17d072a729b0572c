"""Douglas-Peucker simplification of track segments."""

from __future__ import annotations

import logging

import numpy as np
from shapely.geometry import LineString

from ..models import Track, TrackSegment
from ..utils import percent_reduction, require_non_negative
from .geometry import as_coord_array, meters_to_degrees, nearest_index

LOGGER = logging.getLogger(__name__)


def simplify(track: Track, tolerance_m: float) -> Track:
    """Return a copy of ``track`` with redundant points removed.

    Each segment is simplified on its own, treating ``(lon, lat)`` as planar
    coordinates. ``tolerance_m`` is the largest deviation (metres) a dropped
    point may have from the simplified line; ``0`` keeps every point. Retained
    vertices are mapped back to the original points so elevation survives.

    Raises:
        InvalidArgumentError: ``tolerance_m`` is negative or NaN.
    """

    tolerance_m = require_non_negative(tolerance_m, "tolerance_m")
    LOGGER.info("Simplifying track with tolerance %sm", tolerance_m)
    tolerance_deg = meters_to_degrees(tolerance_m)

    segments = [_simplify_segment(segment, tolerance_deg) for segment in track.segments]
    result = track.with_segments(segments)

    before = track.point_count
    after = result.point_count
    LOGGER.info(
        "Track simplified: %d -> %d points (%.1f%% reduction)",
        before,
        after,
        percent_reduction(before, after),
    )
    return result


def _simplify_segment(segment: TrackSegment, tolerance_deg: float) -> TrackSegment:
    points = segment.points
    if len(points) < 3 or tolerance_deg <= 0:
        return segment

    coords = as_coord_array(points)
    if not np.isfinite(coords).all():
        LOGGER.warning("Segment has non-finite coordinates; left unsimplified")
        return segment

    line = LineString(coords)
    simplified = np.asarray(
        line.simplify(tolerance_deg, preserve_topology=False).coords, dtype=float
    )
    if len(simplified) < 2:
        simplified = coords[[0, -1]]
    LOGGER.debug("Segment simplified: %d -> %d points", len(points), len(simplified))
    return TrackSegment.of(points[nearest_index(coords, coord)] for coord in simplified)
