"""Conversion between ``HH:MM`` strings and minutes since midnight.

``time_to_minutes`` and ``minutes_to_time`` never raise: malformed input
resolves to ``0`` / ``"00:00"`` with a logged warning. Use
``parse_time_strict`` to reject bad input instead.
"""

import logging
import math
from typing import Any

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 1440


class TimeFormatError(ValueError):
    """Raised by the strict parser for malformed or out-of-range times."""


def _split_time(time_str: Any) -> tuple[int, int]:
    """Split ``H:MM``/``HH:MM`` into validated hour and minute components."""
    if not isinstance(time_str, str) or not time_str.strip():
        raise TimeFormatError(f"Missing time value: {time_str!r}")

    parts = time_str.strip().split(":")
    if len(parts) != 2:
        raise TimeFormatError(f"Invalid time format: {time_str!r}")

    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError as e:
        raise TimeFormatError(f"Non-numeric time components: {time_str!r}") from e

    if not (0 <= hours <= 23):
        raise TimeFormatError(f"Hour out of range in {time_str!r}")
    if not (0 <= minutes <= 59):
        raise TimeFormatError(f"Minute out of range in {time_str!r}")

    return hours, minutes


def parse_time_strict(time_str: str) -> int:
    """Parse ``HH:MM`` to minutes since midnight, raising ``TimeFormatError`` on bad input."""
    hours, minutes = _split_time(time_str)
    return hours * 60 + minutes


def time_to_minutes(time_str: Any) -> int:
    """
    Convert ``HH:MM`` to minutes since midnight.

    Malformed, missing or out-of-range input returns 0 and logs a warning.
    The result is clamped to ``[0, 1440]``.
    """
    try:
        total = parse_time_strict(time_str)
    except TimeFormatError as e:
        logger.warning(f"{e}, defaulting to 00:00")
        return 0

    return min(max(total, 0), MINUTES_PER_DAY)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def minutes_to_time(minutes: Any) -> str:
    """
    Convert minutes since midnight to ``HH:MM``.

    Input is clamped to ``[0, 1440]`` and hours wrap modulo 24, so 1440
    renders as ``"00:00"``. Non-numeric input returns ``"00:00"``.
    """
    if not _is_number(minutes):
        logger.warning(f"Non-numeric minutes value {minutes!r}, defaulting to 00:00")
        return "00:00"

    total = int(math.floor(min(max(minutes, 0), MINUTES_PER_DAY)))
    hours = (total // 60) % 24
    mins = total % 60
    return f"{hours:02d}:{mins:02d}"


def format_service_time(minutes: float) -> str:
    """
    Format minutes as ``HH:MM`` without wrapping at midnight.

    Trips that run past midnight keep counting hours (1455 -> ``"24:15"``),
    matching the GTFS convention for same-night service.
    """
    total = max(int(math.floor(minutes)), 0)
    hours, mins = divmod(total, 60)
    return f"{hours:02d}:{mins:02d}"


def parse_service_time(time_str: str) -> int:
    """Parse a trip time that may run past midnight (``"24:15"`` -> 1455)."""
    parts = time_str.strip().split(":")
    if len(parts) != 2:
        raise TimeFormatError(f"Invalid time format: {time_str!r}")

    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError as e:
        raise TimeFormatError(f"Non-numeric time components: {time_str!r}") from e

    if hours < 0 or not (0 <= minutes <= 59):
        raise TimeFormatError(f"Time component out of range in {time_str!r}")

    return hours * 60 + minutes


def add_minutes_to_time(time_str: str, delta: Any) -> str:
    """Add a non-negative number of minutes to an ``HH:MM`` string."""
    if not _is_number(delta) or delta < 0:
        logger.warning(f"Ignoring invalid minute delta {delta!r} for {time_str!r}")
        return time_str

    return minutes_to_time(time_to_minutes(time_str) + delta)
