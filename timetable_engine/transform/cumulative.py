"""Cumulative travel time along an ordered stop sequence."""

import logging

from timetable_engine.schedule.models import TimePoint, TravelTimeMatrix

logger = logging.getLogger(__name__)


def sort_time_points(time_points: list[TimePoint]) -> list[TimePoint]:
    """Return time points in ascending sequence; ties keep their input order."""
    return sorted(time_points, key=lambda tp: tp.sequence)


def calculate_sequential_travel_times(
    time_points: list[TimePoint], matrix: TravelTimeMatrix
) -> dict[str, float]:
    """
    Compute elapsed minutes from the first stop to every stop.

    A missing ``matrix[prev][curr]`` contributes 0; the matrix is not
    gap-filled here.
    """
    ordered = sort_time_points(time_points)
    if not ordered:
        return {}

    sequential: dict[str, float] = {ordered[0].id: 0}
    cumulative: float = 0

    for prev, curr in zip(ordered, ordered[1:]):
        segment = matrix.get(prev.id, {}).get(curr.id)
        if segment is None:
            logger.debug(f"No travel time {prev.id} -> {curr.id}, counting 0 minutes")
            segment = 0
        cumulative += segment
        sequential[curr.id] = cumulative

    return sequential
