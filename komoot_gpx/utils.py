"""General utility helpers shared across modules."""

from __future__ import annotations

import logging
import math

from .config import LOG_FORMAT
from .errors import InvalidArgumentError


def setup_logging(enabled: bool = True, level: int = logging.INFO) -> None:
    """Configure root logging, or silence it when output goes to stdout."""

    if not enabled:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=level, format=LOG_FORMAT)


def require_non_negative(value: float, name: str) -> float:
    """Return ``value`` as float, rejecting negatives and NaN."""

    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}") from exc
    if math.isnan(number) or number < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value!r}")
    return number


def percent_reduction(before: int, after: int) -> float:
    """Share of points removed, as a percentage (0.0 when nothing was there)."""

    if before <= 0:
        return 0.0
    return (1.0 - after / before) * 100.0
