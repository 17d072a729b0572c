"""Track post-processing: simplification, spike smoothing and elevation gain."""

from .elevation import smooth_elevation, total_elevation_gain
from .pipeline import ProcessedTrack, ProcessingOptions, process_track
from .simplify import simplify

__all__ = [
    "simplify",
    "smooth_elevation",
    "total_elevation_gain",
    "ProcessingOptions",
    "ProcessedTrack",
    "process_track",
]
