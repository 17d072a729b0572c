"""Render a processed track as a GPX 1.1 document.

The output holds a single ``<trk>`` with one ``<trkseg>`` per segment, which
can be imported into GPS devices, mapping apps, or uploaded to other
platforms.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, TextIO, Union

from .config import GPX_CREATOR
from .errors import MalformedTrackError
from .models import Point, Track
from .processing.elevation import total_elevation_gain

LOGGER = logging.getLogger(__name__)

Destination = Union[str, Path, TextIO]


def describe_track(track: Track) -> str:
    """Short summary used as the GPX description."""

    return f"Points: {track.point_count} | Elevation gain: {total_elevation_gain(track)}m"


def track_to_gpx(
    track: Track,
    *,
    creator: str = GPX_CREATOR,
    description: Optional[str] = None,
) -> str:
    """Convert a track to GPX track format.

    Args:
        track: Track to serialize; an unnamed track gets an empty ``<name>``.
        creator: Value of the ``creator`` attribute.
        description: Optional text for ``<desc>`` in metadata and track.

    Returns:
        GPX XML string.

    Raises:
        MalformedTrackError: A point has a coordinate the GPX schema rejects.
    """
    name = track.name or ""

    gpx_lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<gpx version="1.1" creator="{_escape_xml(creator)}"',
        '     xmlns="http://www.topografix.com/GPX/1/1"',
        '     xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"',
        '     xsi:schemaLocation="http://www.topografix.com/GPX/1/1 '
        'http://www.topografix.com/GPX/1/1/gpx.xsd">',
        "  <metadata>",
        f"    <name>{_escape_xml(name)}</name>",
    ]

    if description:
        gpx_lines.append(f"    <desc>{_escape_xml(description)}</desc>")

    gpx_lines.extend(
        [
            "  </metadata>",
            "  <trk>",
            f"    <name>{_escape_xml(name)}</name>",
        ]
    )

    if description:
        gpx_lines.append(f"    <desc>{_escape_xml(description)}</desc>")

    for segment in track.segments:
        gpx_lines.append("    <trkseg>")
        gpx_lines.extend(_trkpt_xml(point) for point in segment.points)
        gpx_lines.append("    </trkseg>")

    gpx_lines.extend(
        [
            "  </trk>",
            "</gpx>",
        ]
    )

    return "\n".join(gpx_lines) + "\n"


def write_gpx(
    track: Track,
    destination: Destination,
    *,
    creator: str = GPX_CREATOR,
    description: Optional[str] = None,
) -> None:
    """Write ``track`` as GPX to a file path or an open text stream."""

    output = track_to_gpx(track, creator=creator, description=description)
    if isinstance(destination, (str, Path)):
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output, encoding="utf-8")
        LOGGER.info("GPX written to %s", path)
        return
    destination.write(output)


def _trkpt_xml(point: Point) -> str:
    _check_coordinates(point)
    if point.elevation is None or not math.isfinite(point.elevation):
        return f'      <trkpt lat="{_decimal(point.latitude)}" lon="{_decimal(point.longitude)}"/>'
    lines: List[str] = [
        f'      <trkpt lat="{_decimal(point.latitude)}" lon="{_decimal(point.longitude)}">',
        f"        <ele>{_decimal(point.elevation)}</ele>",
        "      </trkpt>",
    ]
    return "\n".join(lines)


def _check_coordinates(point: Point) -> None:
    lat, lon = point.latitude, point.longitude
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise MalformedTrackError(f"Non-finite coordinate lat={lat} lon={lon}")
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise MalformedTrackError(f"Coordinate out of range lat={lat} lon={lon}")


def _decimal(value: float) -> str:
    """Plain decimal text; xsd:decimal does not allow exponents."""
    return format(Decimal(str(value)), "f")


def _escape_xml(text: str) -> str:
    """Escape special XML characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )
