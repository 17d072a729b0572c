"""Post-process GPS tracks from komoot tours and export them as GPX."""

from .errors import InvalidArgumentError, KomootGpxError, MalformedTrackError
from .gpx_writer import describe_track, track_to_gpx, write_gpx
from .models import Point, Track, TrackSegment
from .processing import (
    ProcessedTrack,
    ProcessingOptions,
    process_track,
    simplify,
    smooth_elevation,
    total_elevation_gain,
)
from .utils import setup_logging

__all__ = [
    "Point",
    "TrackSegment",
    "Track",
    "simplify",
    "smooth_elevation",
    "total_elevation_gain",
    "ProcessingOptions",
    "ProcessedTrack",
    "process_track",
    "describe_track",
    "track_to_gpx",
    "write_gpx",
    "setup_logging",
    "KomootGpxError",
    "InvalidArgumentError",
    "MalformedTrackError",
]
