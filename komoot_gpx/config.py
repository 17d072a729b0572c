"""Central configuration for the komoot GPX track processor.

All values are constants imported by the rest of the package. Defaults can be
overridden through environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------
# Rough metres-per-degree factor used to turn a tolerance in metres into
# degrees. Loses accuracy at high latitudes; kept fixed so simplified output
# stays comparable with tracks produced by earlier releases.
METERS_PER_DEGREE = 111000.0


# ---------------------------------------------------------------------------
# Processing defaults
# ---------------------------------------------------------------------------
# Douglas-Peucker tolerance (metres) used when simplification is requested
# without an explicit value.
DEFAULT_SIMPLIFY_TOLERANCE_M = _env_float("KOMOOT_GPX_SIMPLIFY_TOLERANCE_M", 5.0)

# Minimum elevation jump (metres) on both sides of a point for it to count as
# a spike when smoothing is requested without an explicit value.
DEFAULT_ELEVATION_THRESHOLD_M = _env_float("KOMOOT_GPX_ELEVATION_THRESHOLD_M", 10.0)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
# Value written to the GPX creator attribute.
GPX_CREATOR = "komootgpx"

# Format used by setup_logging when no handler is configured yet.
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
