"""Tests for matrix building, gap estimation and cumulative times."""

import copy
import math

import pytest

from timetable_engine.schedule.models import (
    DayType,
    EstimationPolicy,
    TimePoint,
    TravelTime,
    TravelTimeMatrix,
)
from timetable_engine.transform.cumulative import calculate_sequential_travel_times
from timetable_engine.transform.gaps import (
    handle_missing_connections,
    validate_matrix_completeness,
)
from timetable_engine.transform.matrix import build_travel_matrix, calculate_travel_times


def test_build_matrix_structure(travel_times: list[TravelTime]) -> None:
    """Test forward entries and symmetric backfill."""
    matrix = build_travel_matrix(travel_times, DayType.WEEKDAY)

    assert matrix["tp1"]["tp2"] == 5
    assert matrix["tp2"]["tp3"] == 8
    assert matrix["tp3"]["tp4"] == 12

    assert matrix["tp2"]["tp1"] == 5
    assert matrix["tp3"]["tp2"] == 8
    assert matrix["tp4"]["tp3"] == 12


def test_build_matrix_day_types(travel_times: list[TravelTime]) -> None:
    assert build_travel_matrix(travel_times, "weekday")["tp1"]["tp2"] == 5
    assert build_travel_matrix(travel_times, "saturday")["tp1"]["tp2"] == 6
    assert build_travel_matrix(travel_times, DayType.SUNDAY)["tp1"]["tp2"] == 7


def test_build_matrix_explicit_reverse_wins() -> None:
    """Test a direct reverse observation is never overwritten by backfill, in either order."""
    forward_first = [
        TravelTime("a", "b", weekday=10, saturday=10, sunday=10),
        TravelTime("b", "a", weekday=14, saturday=14, sunday=14),
    ]
    reverse_first = list(reversed(forward_first))

    for observations in (forward_first, reverse_first):
        matrix = build_travel_matrix(observations, DayType.WEEKDAY)
        assert matrix["a"]["b"] == 10
        assert matrix["b"]["a"] == 14


def test_build_matrix_asymmetric_flag(travel_times: list[TravelTime]) -> None:
    matrix = build_travel_matrix(travel_times, DayType.WEEKDAY, assume_symmetric=False)

    assert matrix["tp1"]["tp2"] == 5
    assert "tp1" not in matrix["tp2"]


def test_build_matrix_skips_negative() -> None:
    matrix = build_travel_matrix(
        [TravelTime("a", "b", weekday=-3, saturday=4, sunday=4)], DayType.WEEKDAY
    )

    assert matrix == {"a": {}, "b": {}}


@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_build_matrix_skips_non_finite(value: float) -> None:
    observations = [
        TravelTime("a", "b", weekday=value, saturday=4, sunday=4),
        TravelTime("b", "c", weekday=3, saturday=3, sunday=3),
    ]

    matrix = build_travel_matrix(observations, DayType.WEEKDAY)

    assert matrix == {"a": {}, "b": {"c": 3}, "c": {"b": 3}}
    assert build_travel_matrix(observations, DayType.SATURDAY)["a"]["b"] == 4


def test_calculate_travel_times_all_day_types(travel_times: list[TravelTime]) -> None:
    matrices = calculate_travel_times(travel_times)

    assert matrices.weekday["tp1"]["tp2"] == 5
    assert matrices.saturday["tp1"]["tp2"] == 6
    assert matrices.sunday["tp1"]["tp2"] == 7
    assert matrices.for_day("saturday") is matrices.saturday


def test_sequential_travel_times(
    time_points: list[TimePoint], travel_times: list[TravelTime]
) -> None:
    """Test cumulative times from the first stop."""
    matrix = build_travel_matrix(travel_times, DayType.WEEKDAY)
    sequential = calculate_sequential_travel_times(time_points, matrix)

    assert sequential == {"tp1": 0, "tp2": 5, "tp3": 13, "tp4": 25}


def test_sequential_travel_times_unordered(
    time_points: list[TimePoint], travel_times: list[TravelTime]
) -> None:
    """Test input order is ignored in favour of sequence."""
    shuffled = [time_points[2], time_points[0], time_points[3], time_points[1]]
    matrix = build_travel_matrix(travel_times, DayType.WEEKDAY)
    sequential = calculate_sequential_travel_times(shuffled, matrix)

    assert sequential["tp1"] == 0
    assert sequential["tp2"] == 5
    assert sequential["tp3"] == 13
    assert sequential["tp4"] == 25


def test_sequential_missing_entries_count_zero(time_points: list[TimePoint]) -> None:
    sequential = calculate_sequential_travel_times(time_points, {"tp1": {"tp2": 5}})

    assert sequential["tp1"] == 0
    assert sequential["tp2"] == 5
    assert sequential["tp3"] == 5
    assert sequential["tp4"] == 5


def test_sequential_duplicate_sequences(travel_times: list[TravelTime]) -> None:
    """Test duplicate sequence values are ordered by input position."""
    points = [
        TimePoint("tp1", "Station A", 1),
        TimePoint("tp2", "Station B", 1),
        TimePoint("tp3", "Station C", 2),
    ]
    matrix = build_travel_matrix(travel_times, DayType.WEEKDAY)
    sequential = calculate_sequential_travel_times(points, matrix)

    assert sequential == {"tp1": 0, "tp2": 5, "tp3": 13}


def test_sequential_empty() -> None:
    assert calculate_sequential_travel_times([], {}) == {}


def test_gap_fill_preserves_existing(time_points: list[TimePoint]) -> None:
    """Test estimated entries are added without touching observed ones."""
    points = time_points + [TimePoint("tp5", "Airport", 5)]
    partial: TravelTimeMatrix = {"tp1": {"tp2": 5}, "tp2": {"tp3": 8, "tp1": 5}}

    enhanced = handle_missing_connections(points, partial)

    assert enhanced["tp1"]["tp3"] > 0
    assert enhanced["tp1"]["tp2"] == 5
    assert enhanced["tp2"]["tp3"] == 8


def test_gap_fill_adjacent_default(time_points: list[TimePoint]) -> None:
    enhanced = handle_missing_connections(time_points, {})

    assert enhanced["tp1"]["tp2"] == 5
    assert enhanced["tp2"]["tp3"] == 5
    assert enhanced["tp3"]["tp4"] == 5
    assert enhanced["tp4"]["tp3"] == 5


def test_gap_fill_linear_extrapolation(time_points: list[TimePoint]) -> None:
    """Test non-adjacent pairs use 5 minutes per step when no shorter path is known."""
    partial: TravelTimeMatrix = {"tp1": {"tp2": 5}, "tp2": {"tp3": 8, "tp1": 5}}

    enhanced = handle_missing_connections(time_points, partial)

    assert enhanced["tp1"]["tp3"] == 10
    assert enhanced["tp1"]["tp4"] == 15


def test_gap_fill_shorter_known_path(time_points: list[TimePoint]) -> None:
    """Test a two-leg path through observed entries beats extrapolation."""
    partial: TravelTimeMatrix = {"tp1": {"tp2": 2}, "tp2": {"tp3": 3}}

    enhanced = handle_missing_connections(time_points, partial)

    assert enhanced["tp1"]["tp3"] == 5


def test_gap_fill_idempotent(time_points: list[TimePoint]) -> None:
    partial: TravelTimeMatrix = {"tp1": {"tp2": 7}, "tp3": {"tp4": 4}}

    once = handle_missing_connections(time_points, partial)
    twice = handle_missing_connections(time_points, once)

    assert once == twice


def test_gap_fill_does_not_mutate_input(time_points: list[TimePoint]) -> None:
    partial: TravelTimeMatrix = {"tp1": {"tp2": 7}}
    snapshot = copy.deepcopy(partial)

    handle_missing_connections(time_points, partial)

    assert partial == snapshot


def test_gap_fill_custom_policy(time_points: list[TimePoint]) -> None:
    policy = EstimationPolicy(adjacent_default=3, per_step_default=4)

    enhanced = handle_missing_connections(time_points, {}, policy)

    assert enhanced["tp1"]["tp2"] == 3
    assert enhanced["tp1"]["tp3"] == 8


def test_gap_fill_adjacent_default_disabled(time_points: list[TimePoint]) -> None:
    enhanced = handle_missing_connections(
        time_points, {}, EstimationPolicy(adjacent_default=None)
    )

    assert "tp2" not in enhanced["tp1"]
    assert enhanced["tp1"]["tp3"] == 10


def test_completeness_complete(time_points: list[TimePoint]) -> None:
    matrix: TravelTimeMatrix = {
        "tp1": {"tp2": 5},
        "tp2": {"tp3": 8, "tp1": 5},
        "tp3": {"tp4": 12, "tp2": 8},
        "tp4": {"tp3": 12},
    }

    report = validate_matrix_completeness(time_points, matrix)

    assert report.is_complete
    assert report.missing_connections == []


def test_completeness_missing_consecutive(time_points: list[TimePoint]) -> None:
    """Test only consecutive gaps are reported, by name."""
    matrix: TravelTimeMatrix = {"tp1": {"tp2": 5}, "tp2": {"tp1": 5}}

    report = validate_matrix_completeness(time_points, matrix)

    assert not report.is_complete
    assert report.missing_connections == [
        "Main Street -> Shopping Center",
        "Shopping Center -> University",
    ]


def test_completeness_after_gap_fill(time_points: list[TimePoint]) -> None:
    enhanced = handle_missing_connections(time_points, {"tp1": {"tp2": 5}})

    assert validate_matrix_completeness(time_points, enhanced).is_complete
