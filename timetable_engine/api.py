"""Public API for transit-timetable-engine."""

import logging
import time
from collections.abc import Mapping

from timetable_engine.schedule.models import (
    DAY_TYPES,
    CalculationMetadata,
    CalculationResults,
    CompletenessReport,
    ScheduleConfig,
    TimeBand,
    TimeBands,
    TimePoint,
    TravelTime,
    TravelTimeMatrices,
)
from timetable_engine.schedule.validator import ScheduleValidationError, validate_travel_times
from timetable_engine.transform.gaps import handle_missing_connections, validate_matrix_completeness
from timetable_engine.transform.matrix import calculate_travel_times
from timetable_engine.transform.trips import generate_trips_from_time_bands

logger = logging.getLogger(__name__)


def build_enhanced_travel_matrices(
    time_points: list[TimePoint],
    travel_times: list[TravelTime],
    config: ScheduleConfig | None = None,
) -> TravelTimeMatrices:
    """
    Build matrices for all day types and fill missing connections.

    Args:
        time_points: Stops on the route
        travel_times: Directed travel time observations
        config: Optional calculation configuration

    Returns:
        Gap-filled TravelTimeMatrices
    """
    if config is None:
        config = ScheduleConfig()

    matrices = calculate_travel_times(travel_times, assume_symmetric=config.assume_symmetric)

    enhanced = {
        day_type.value: handle_missing_connections(
            time_points, matrices.for_day(day_type), config.estimation
        )
        for day_type in DAY_TYPES
    }

    return TravelTimeMatrices(**enhanced)


def audit_travel_matrices(
    time_points: list[TimePoint], matrices: TravelTimeMatrices
) -> dict[str, CompletenessReport]:
    """Completeness report per day type, keyed by day type name."""
    reports = {}
    for day_type in DAY_TYPES:
        report = validate_matrix_completeness(time_points, matrices.for_day(day_type))
        if not report.is_complete:
            logger.warning(
                f"Missing connections for {day_type.value}: "
                f"{', '.join(report.missing_connections)}"
            )
        reports[day_type.value] = report
    return reports


def calculate_optimized_schedule(
    time_points: list[TimePoint],
    travel_times: list[TravelTime],
    time_bands: TimeBands | Mapping[str, list[TimeBand]],
    config: ScheduleConfig | None = None,
) -> CalculationResults:
    """
    Validate route data and generate trips for every day type.

    Args:
        time_points: Stops on the route
        travel_times: Directed travel time observations
        time_bands: TimeBands, or a mapping of day type to bands
        config: Optional calculation configuration

    Returns:
        CalculationResults with trips and metadata

    Raises:
        ScheduleValidationError: if the travel time data is invalid
    """
    if config is None:
        config = ScheduleConfig()
    if not isinstance(time_bands, TimeBands):
        time_bands = TimeBands.from_mapping(dict(time_bands))

    logger.info(
        f"Calculating schedule for {len(time_points)} time points "
        f"and {len(travel_times)} travel times"
    )

    # Validate
    validation = validate_travel_times(
        time_points, travel_times, config.validation, config.estimation
    )
    if not validation.valid:
        raise ScheduleValidationError(validation)

    start = time.perf_counter()

    # Build and enhance matrices
    matrices = build_enhanced_travel_matrices(time_points, travel_times, config)
    completeness = audit_travel_matrices(time_points, matrices)

    warnings = list(validation.warnings)
    for day_type, report in completeness.items():
        if not report.is_complete:
            warnings.append(
                f"Missing connections for {day_type}: {', '.join(report.missing_connections)}"
            )

    # Generate trips
    trips = {
        day_type.value: generate_trips_from_time_bands(
            time_bands.for_day(day_type),
            time_points,
            matrices.for_day(day_type),
            day_type,
            config.dwell_time,
        )
        for day_type in DAY_TYPES
    }

    elapsed_ms = (time.perf_counter() - start) * 1000

    metadata = CalculationMetadata(
        total_time_points=len(time_points),
        total_trips=sum(len(day_trips) for day_trips in trips.values()),
        calculation_time=elapsed_ms,
        weekday_trips=len(trips["weekday"]),
        saturday_trips=len(trips["saturday"]),
        sunday_trips=len(trips["sunday"]),
    )

    logger.info(f"Generated {metadata.total_trips} trips in {elapsed_ms:.2f}ms")

    return CalculationResults(
        weekday=trips["weekday"],
        saturday=trips["saturday"],
        sunday=trips["sunday"],
        metadata=metadata,
        warnings=warnings,
    )
