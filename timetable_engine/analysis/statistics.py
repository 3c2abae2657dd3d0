"""Aggregate statistics over generated trips."""

import logging

from timetable_engine.schedule.models import (
    DAY_TYPES,
    CalculationResults,
    DayType,
    ScheduleEntry,
    ScheduleStatistics,
    TimePoint,
    TripCalculationResult,
)
from timetable_engine.schedule.times import format_service_time, parse_service_time

logger = logging.getLogger(__name__)


def calculate_schedule_statistics(
    results: CalculationResults, time_points: list[TimePoint]
) -> ScheduleStatistics:
    """Compute trip counts, headways, operating hours and travel time per day type."""
    logger.info("Computing schedule statistics")

    total_trips = {day_type.value: len(results.for_day(day_type)) for day_type in DAY_TYPES}
    total_trips["total"] = sum(total_trips.values())

    return ScheduleStatistics(
        total_time_points=len(time_points),
        total_trips=total_trips,
        average_frequency={
            day_type.value: _average_headway(results.for_day(day_type)) for day_type in DAY_TYPES
        },
        operating_hours={
            day_type.value: _operating_hours(results.for_day(day_type)) for day_type in DAY_TYPES
        },
        total_travel_time={
            day_type.value: sum(trip.total_travel_time for trip in results.for_day(day_type))
            for day_type in DAY_TYPES
        },
    )


def _average_headway(trips: list[TripCalculationResult]) -> int:
    """Mean minutes between consecutive first-stop departures."""
    departures = sorted(
        parse_service_time(trip.schedule_entries[0].departure_time)
        for trip in trips
        if trip.schedule_entries
    )
    if len(departures) < 2:
        return 0

    gaps = [b - a for a, b in zip(departures, departures[1:])]
    return round(sum(gaps) / len(gaps))


def _operating_hours(trips: list[TripCalculationResult]) -> dict[str, str]:
    """Earliest and latest departure at any stop."""
    departures = [
        parse_service_time(entry.departure_time)
        for trip in trips
        for entry in trip.schedule_entries
    ]
    if not departures:
        return {"start": "00:00", "end": "00:00"}

    return {
        "start": format_service_time(min(departures)),
        "end": format_service_time(max(departures)),
    }


def get_time_point_schedule(
    results: CalculationResults, time_point_id: str, day_type: DayType | str
) -> list[ScheduleEntry]:
    """All entries at one time point for a day type, ordered by arrival."""
    entries = [
        entry
        for trip in results.for_day(day_type)
        for entry in trip.schedule_entries
        if entry.time_point_id == time_point_id
    ]
    return sorted(entries, key=lambda entry: parse_service_time(entry.arrival_time))
