"""Trip generation from frequency-based time bands."""

import logging

from timetable_engine.schedule.models import (
    DayType,
    ScheduleEntry,
    TimeBand,
    TimePoint,
    TravelTimeMatrix,
    TripCalculationResult,
)
from timetable_engine.schedule.times import format_service_time, minutes_to_time, time_to_minutes
from timetable_engine.transform.cumulative import (
    calculate_sequential_travel_times,
    sort_time_points,
)

logger = logging.getLogger(__name__)


def generate_trip_schedule(
    trip_id: str,
    start_time: str,
    time_points: list[TimePoint],
    matrix: TravelTimeMatrix,
    dwell_time: int = 0,
) -> TripCalculationResult:
    """
    Build one trip's schedule entries starting at ``start_time``.

    Arrival equals departure at every stop unless ``dwell_time`` is given, in
    which case the bus holds that many minutes at each intermediate stop.
    Times are not wrapped at midnight, so a late trip can reach ``"24:15"``.
    """
    start_minutes = time_to_minutes(start_time)
    sequential = calculate_sequential_travel_times(time_points, matrix)
    ordered = sort_time_points(time_points)
    last_index = len(ordered) - 1

    entries: list[ScheduleEntry] = []
    for index, tp in enumerate(ordered):
        held = dwell_time * max(index - 1, 0)
        arrival = start_minutes + sequential.get(tp.id, 0) + held
        departure = arrival + dwell_time if 0 < index < last_index else arrival

        entries.append(
            ScheduleEntry(
                time_point_id=tp.id,
                arrival_time=format_service_time(arrival),
                departure_time=format_service_time(departure),
            )
        )

    total_travel_time = sequential.get(ordered[-1].id, 0) if ordered else 0

    return TripCalculationResult(
        trip_id=trip_id,
        schedule_entries=entries,
        total_travel_time=total_travel_time,
        is_valid=True,
        errors=[],
    )


def count_band_trips(band: TimeBand) -> int:
    """Number of departures a band produces, its end time included."""
    if band.frequency <= 0:
        return 0

    start_minutes = time_to_minutes(band.start_time)
    end_minutes = time_to_minutes(band.end_time)
    if end_minutes < start_minutes:
        return 0

    return int((end_minutes - start_minutes) // band.frequency) + 1


def generate_trips_from_time_bands(
    time_bands: list[TimeBand],
    time_points: list[TimePoint],
    matrix: TravelTimeMatrix,
    day_type: DayType | str,
    dwell_time: int = 0,
) -> list[TripCalculationResult]:
    """Expand time bands into trips, one every ``frequency`` minutes from start to end."""
    day_type = DayType(day_type)
    trips: list[TripCalculationResult] = []

    for band_index, band in enumerate(time_bands):
        if band.frequency <= 0:
            logger.warning(
                f"Skipping {day_type.value} band {band_index + 1} "
                f"({band.start_time}-{band.end_time}): frequency must be positive, "
                f"got {band.frequency}"
            )
            continue

        start_minutes = time_to_minutes(band.start_time)
        trip_count = count_band_trips(band)

        for trip_index in range(trip_count):
            departure = start_minutes + trip_index * band.frequency
            trip_id = f"{day_type.value}_band{band_index + 1}_trip{trip_index + 1}"
            trips.append(
                generate_trip_schedule(
                    trip_id, minutes_to_time(departure), time_points, matrix, dwell_time
                )
            )

        logger.debug(
            f"{day_type.value} band {band_index + 1} "
            f"({band.start_time}-{band.end_time} every {band.frequency} min): {trip_count} trips"
        )

    logger.info(f"Built {len(trips)} {day_type.value} trips from {len(time_bands)} bands")
    return trips


def convert_to_schedule_matrix(
    trips: list[TripCalculationResult], time_points: list[TimePoint]
) -> list[list[str]]:
    """Lay trips out as rows of departure times in stop order, blank where a stop is absent."""
    ordered = sort_time_points(time_points)
    rows: list[list[str]] = []

    for trip in trips:
        departures = {entry.time_point_id: entry.departure_time for entry in trip.schedule_entries}
        rows.append([departures.get(tp.id, "") for tp in ordered])

    return rows
