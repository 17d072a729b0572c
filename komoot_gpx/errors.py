"""Central error types used across the package."""

from __future__ import annotations


class KomootGpxError(RuntimeError):
    """Base error for track processing and export failures."""


class InvalidArgumentError(KomootGpxError, ValueError):
    """Raised when a tolerance or threshold is negative or not a number."""


class MalformedTrackError(KomootGpxError):
    """Raised when a point carries coordinates outside the valid range."""


__all__ = [
    "KomootGpxError",
    "InvalidArgumentError",
    "MalformedTrackError",
]
