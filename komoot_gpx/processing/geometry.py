"""Planar geometry helpers operating on (longitude, latitude) arrays.

Geographic coordinates are treated as Cartesian, which is a fair
approximation over the extent of a single tour.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..config import METERS_PER_DEGREE
from ..models import Point

CoordArray = NDArray[np.float64]


def meters_to_degrees(meters: float) -> float:
    """Convert a distance in metres to the equivalent number of degrees."""

    return meters / METERS_PER_DEGREE


def as_coord_array(points: Sequence[Point]) -> CoordArray:
    """Project points onto an ``(n, 2)`` array of ``(lon, lat)`` pairs."""

    if not points:
        return np.empty((0, 2), dtype=float)
    return np.asarray(
        [(point.longitude, point.latitude) for point in points], dtype=float
    )


def nearest_index(coords: CoordArray, target: NDArray[np.float64]) -> int:
    """Index of the coordinate closest to ``target``; ties go to the first."""

    distances = np.linalg.norm(coords - target, axis=1)
    # NaN never wins.
    distances = np.where(np.isnan(distances), np.inf, distances)
    return int(np.argmin(distances))
