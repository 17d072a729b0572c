"""Apply the optional post-processing steps to a downloaded track."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import DEFAULT_ELEVATION_THRESHOLD_M, DEFAULT_SIMPLIFY_TOLERANCE_M
from ..models import Track
from ..utils import require_non_negative
from .elevation import smooth_elevation, total_elevation_gain
from .simplify import simplify

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessingOptions:
    """Which steps to run; ``None`` skips the step."""

    simplify_tolerance_m: Optional[float] = None
    elevation_threshold_m: Optional[float] = None

    def __post_init__(self) -> None:
        if self.simplify_tolerance_m is not None:
            require_non_negative(self.simplify_tolerance_m, "simplify_tolerance_m")
        if self.elevation_threshold_m is not None:
            require_non_negative(self.elevation_threshold_m, "elevation_threshold_m")

    @classmethod
    def defaults(cls, *, simplify: bool = True, smooth: bool = True) -> "ProcessingOptions":
        """Options using the configured default tolerance and threshold."""

        return cls(
            simplify_tolerance_m=DEFAULT_SIMPLIFY_TOLERANCE_M if simplify else None,
            elevation_threshold_m=DEFAULT_ELEVATION_THRESHOLD_M if smooth else None,
        )


@dataclass(frozen=True, slots=True)
class ProcessedTrack:
    track: Track
    simplified: bool
    smoothed: bool
    elevation_gain_m: int
    original_point_count: int


def process_track(
    track: Track, options: Optional[ProcessingOptions] = None
) -> ProcessedTrack:
    """Simplify, then smooth, then measure elevation gain.

    Tolerance and threshold are validated when the options are built, so a
    bad value never leaves a half-processed track behind.
    """

    options = options or ProcessingOptions()
    original_count = track.point_count
    result = track

    simplified = options.simplify_tolerance_m is not None
    if simplified:
        result = simplify(result, options.simplify_tolerance_m)

    smoothed = options.elevation_threshold_m is not None
    if smoothed:
        result = smooth_elevation(result, options.elevation_threshold_m)

    gain = total_elevation_gain(result)
    LOGGER.debug(
        "Processed track %r: %d points, elevation gain %dm",
        result.name,
        result.point_count,
        gain,
    )
    return ProcessedTrack(
        track=result,
        simplified=simplified,
        smoothed=smoothed,
        elevation_gain_m=gain,
        original_point_count=original_count,
    )
