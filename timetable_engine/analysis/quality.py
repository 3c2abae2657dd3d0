"""Data-quality checks over travel time matrices."""

import logging

from timetable_engine.schedule.models import (
    DAY_TYPES,
    MatrixPerformanceReport,
    TimePoint,
    TravelTimeMatrices,
    TravelTimeMatrix,
)

logger = logging.getLogger(__name__)

LARGE_MATRIX_SIZE = 15
MAX_OPTIMAL_SIZE = 20
MIN_CONNECTION_RATE = 0.8
MAX_AVERAGE_TRAVEL_TIME = 60  # minutes


def connection_rate(time_points: list[TimePoint], matrix: TravelTimeMatrix) -> float:
    """Share of ordered stop pairs that have an entry."""
    total = 0
    present = 0
    for origin in time_points:
        for destination in time_points:
            if origin.id == destination.id:
                continue
            total += 1
            if matrix.get(origin.id, {}).get(destination.id) is not None:
                present += 1

    return present / total if total else 0.0


def average_travel_time(matrix: TravelTimeMatrix) -> float:
    values = [minutes for row in matrix.values() for minutes in row.values()]
    return sum(values) / len(values) if values else 0.0


def validate_matrix_performance(
    time_points: list[TimePoint], matrices: TravelTimeMatrices
) -> MatrixPerformanceReport:
    """Summarize matrix coverage and travel times, with recommendations."""
    matrix_size = len(time_points)

    rates = [connection_rate(time_points, matrices.for_day(day_type)) for day_type in DAY_TYPES]
    avg_rate = sum(rates) / len(rates)

    averages = {
        day_type.value: average_travel_time(matrices.for_day(day_type)) for day_type in DAY_TYPES
    }
    overall_average = sum(averages.values()) / len(averages)

    recommendations: list[str] = []
    if matrix_size > LARGE_MATRIX_SIZE:
        recommendations.append(
            f"Consider using batch processing for large matrices "
            f"(>{LARGE_MATRIX_SIZE}x{LARGE_MATRIX_SIZE})"
        )
    if avg_rate < MIN_CONNECTION_RATE:
        recommendations.append(
            "Low connection rate detected - consider adding more travel time data"
        )
    if overall_average > MAX_AVERAGE_TRAVEL_TIME:
        recommendations.append("High average travel times detected - verify route efficiency")

    is_optimal = (
        avg_rate >= MIN_CONNECTION_RATE
        and matrix_size <= MAX_OPTIMAL_SIZE
        and overall_average <= MAX_AVERAGE_TRAVEL_TIME
    )

    logger.debug(
        f"Matrix size {matrix_size}, connection rate {avg_rate:.2f}, "
        f"average travel time {overall_average:.1f}"
    )

    return MatrixPerformanceReport(
        is_optimal=is_optimal,
        matrix_size=matrix_size,
        connection_rate=avg_rate,
        average_travel_time=averages,
        recommendations=recommendations,
    )
