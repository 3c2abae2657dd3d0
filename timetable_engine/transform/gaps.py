"""Gap estimation and completeness auditing for travel time matrices."""

import logging

from timetable_engine.schedule.models import (
    CompletenessReport,
    EstimationPolicy,
    TimePoint,
    TravelTimeMatrix,
)
from timetable_engine.transform.cumulative import sort_time_points

logger = logging.getLogger(__name__)


def estimate_travel_time(
    origin: TimePoint,
    destination: TimePoint,
    time_points: list[TimePoint],
    matrix: TravelTimeMatrix,
    policy: EstimationPolicy,
) -> float | None:
    """
    Estimate minutes from ``origin`` to ``destination``.

    Adjacent stops get ``policy.adjacent_default`` (``None`` when the default
    is disabled). Longer gaps get ``policy.per_step_default`` per sequence
    step, or the shortest known two-leg path through one intermediate stop
    when that is smaller.
    """
    steps = abs(destination.sequence - origin.sequence)
    if steps == 1:
        return policy.adjacent_default

    best = policy.per_step_default * steps
    origin_row = matrix.get(origin.id, {})

    for intermediate in time_points:
        if intermediate.id in (origin.id, destination.id):
            continue

        first_leg = origin_row.get(intermediate.id)
        second_leg = matrix.get(intermediate.id, {}).get(destination.id)
        if first_leg is None or second_leg is None:
            continue

        if first_leg + second_leg < best:
            best = first_leg + second_leg

    return best


def handle_missing_connections(
    time_points: list[TimePoint],
    matrix: TravelTimeMatrix,
    policy: EstimationPolicy | None = None,
) -> TravelTimeMatrix:
    """
    Return a copy of ``matrix`` with missing connections estimated.

    Every pair of stops with different sequence numbers gets an estimate in
    each direction that has no entry. Estimates only draw on entries present
    in the input, and existing entries are never overwritten, so applying
    this to its own output changes nothing.
    """
    if policy is None:
        policy = EstimationPolicy()

    enhanced: TravelTimeMatrix = {origin: dict(row) for origin, row in matrix.items()}
    ordered = sort_time_points(time_points)
    for tp in ordered:
        enhanced.setdefault(tp.id, {})

    estimated = 0
    for i, first in enumerate(ordered):
        for second in ordered[i + 1 :]:
            if second.sequence <= first.sequence or second.id == first.id:
                continue

            for origin, destination in ((first, second), (second, first)):
                if destination.id in enhanced[origin.id]:
                    continue

                estimate = estimate_travel_time(origin, destination, ordered, matrix, policy)
                if estimate is None:
                    continue

                enhanced[origin.id][destination.id] = estimate
                estimated += 1
                logger.debug(f"Estimated {origin.id} -> {destination.id}: {estimate} minutes")

    if estimated:
        logger.info(f"Estimated {estimated} missing connections")

    return enhanced


def validate_matrix_completeness(
    time_points: list[TimePoint], matrix: TravelTimeMatrix
) -> CompletenessReport:
    """Report consecutive stop pairs that have no matrix entry."""
    ordered = sort_time_points(time_points)
    missing: list[str] = []

    for origin, destination in zip(ordered, ordered[1:]):
        if matrix.get(origin.id, {}).get(destination.id) is None:
            missing.append(f"{origin.name} -> {destination.name}")

    return CompletenessReport(is_complete=not missing, missing_connections=missing)
