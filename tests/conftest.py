"""Pytest configuration and fixtures."""

import shutil
from pathlib import Path

import pytest

from timetable_engine.schedule.models import TimeBand, TimeBands, TimePoint, TravelTime


@pytest.fixture
def route_minimal() -> Path:
    """Path to complete five-stop route fixture."""
    return Path(__file__).parent / "fixtures" / "route_minimal"


@pytest.fixture
def route_gap() -> Path:
    """Path to route fixture missing the mainst -> mall observation."""
    return Path(__file__).parent / "fixtures" / "route_gap"


@pytest.fixture
def route_invalid() -> Path:
    """Path to route fixture with a negative travel time."""
    return Path(__file__).parent / "fixtures" / "route_invalid"


@pytest.fixture
def tmp_output(tmp_path: Path) -> Path:
    """Temporary output directory."""
    output_dir = tmp_path / "timetable"
    output_dir.mkdir()
    yield output_dir
    # Cleanup
    if output_dir.exists():
        shutil.rmtree(output_dir)


@pytest.fixture
def time_points() -> list[TimePoint]:
    """Four stops in sequence."""
    return [
        TimePoint(id="tp1", name="Downtown Terminal", sequence=1),
        TimePoint(id="tp2", name="Main Street", sequence=2),
        TimePoint(id="tp3", name="Shopping Center", sequence=3),
        TimePoint(id="tp4", name="University", sequence=4),
    ]


@pytest.fixture
def travel_times() -> list[TravelTime]:
    """Consecutive observations for the four-stop route."""
    return [
        TravelTime("tp1", "tp2", weekday=5, saturday=6, sunday=7),
        TravelTime("tp2", "tp3", weekday=8, saturday=9, sunday=10),
        TravelTime("tp3", "tp4", weekday=12, saturday=13, sunday=14),
    ]


@pytest.fixture
def real_time_points() -> list[TimePoint]:
    """Five-stop route used by end-to-end scenarios."""
    return [
        TimePoint(id="downtown", name="Downtown Terminal", sequence=1),
        TimePoint(id="mainst", name="Main Street", sequence=2),
        TimePoint(id="mall", name="Shopping Mall", sequence=3),
        TimePoint(id="university", name="University Campus", sequence=4),
        TimePoint(id="hospital", name="General Hospital", sequence=5),
    ]


@pytest.fixture
def real_travel_times() -> list[TravelTime]:
    return [
        TravelTime("downtown", "mainst", weekday=8, saturday=9, sunday=10),
        TravelTime("mainst", "mall", weekday=6, saturday=7, sunday=8),
        TravelTime("mall", "university", weekday=12, saturday=13, sunday=14),
        TravelTime("university", "hospital", weekday=7, saturday=8, sunday=9),
    ]


@pytest.fixture
def real_time_bands() -> TimeBands:
    return TimeBands(
        weekday=[
            TimeBand("06:00", "09:00", 15),
            TimeBand("09:00", "15:00", 30),
            TimeBand("15:00", "18:00", 15),
            TimeBand("18:00", "22:00", 30),
        ],
        saturday=[
            TimeBand("07:00", "12:00", 20),
            TimeBand("12:00", "20:00", 30),
        ],
        sunday=[TimeBand("08:00", "18:00", 45)],
    )


def make_route(stop_count: int) -> tuple[list[TimePoint], list[TravelTime]]:
    """Build a straight route with consecutive observations of 5-12 minutes."""
    points = [
        TimePoint(id=f"stop{i + 1}", name=f"Stop {i + 1}", sequence=i + 1)
        for i in range(stop_count)
    ]
    times = [
        TravelTime(
            f"stop{i + 1}",
            f"stop{i + 2}",
            weekday=5 + i % 8,
            saturday=6 + i % 8,
            sunday=7 + i % 8,
        )
        for i in range(stop_count - 1)
    ]
    return points, times


@pytest.fixture
def large_route() -> tuple[list[TimePoint], list[TravelTime]]:
    """Fifteen-stop route."""
    return make_route(15)
