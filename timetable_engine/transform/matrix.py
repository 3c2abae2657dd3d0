"""Travel time matrix construction from directed observations."""

import logging
import math

from timetable_engine.schedule.models import (
    DAY_TYPES,
    DayType,
    TravelTime,
    TravelTimeMatrices,
    TravelTimeMatrix,
)

logger = logging.getLogger(__name__)


def build_travel_matrix(
    travel_times: list[TravelTime],
    day_type: DayType | str,
    assume_symmetric: bool = True,
) -> TravelTimeMatrix:
    """
    Build the travel time matrix for one day type.

    Each observation sets ``matrix[from][to]``. With ``assume_symmetric`` the
    reverse entry is backfilled with the same value unless the reverse pair
    was observed directly, in which case the explicit observation wins.
    Negative and non-finite durations are skipped so every defined entry
    stays a finite value >= 0.
    """
    day_type = DayType(day_type)
    logger.debug(f"Building travel matrix for {day_type.value}")

    observed = {(tt.from_time_point, tt.to_time_point) for tt in travel_times}
    matrix: TravelTimeMatrix = {}

    for tt in travel_times:
        origin = tt.from_time_point
        destination = tt.to_time_point
        duration = tt.duration(day_type)

        matrix.setdefault(origin, {})
        matrix.setdefault(destination, {})

        if not math.isfinite(duration) or duration < 0:
            logger.warning(
                f"Skipping invalid {day_type.value} travel time {origin} -> {destination}: "
                f"{duration}"
            )
            continue

        matrix[origin][destination] = duration

        if assume_symmetric and (destination, origin) not in observed:
            matrix[destination][origin] = duration

    return matrix


def calculate_travel_times(
    travel_times: list[TravelTime], assume_symmetric: bool = True
) -> TravelTimeMatrices:
    """Build travel time matrices for all day types."""
    logger.info(f"Building travel matrices from {len(travel_times)} observations")

    matrices = {
        day_type.value: build_travel_matrix(travel_times, day_type, assume_symmetric)
        for day_type in DAY_TYPES
    }

    return TravelTimeMatrices(**matrices)
