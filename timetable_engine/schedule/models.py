"""Data models for route inputs, travel matrices and generated trips."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DayType(str, Enum):
    """Service day type with its own matrix and band set."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


DAY_TYPES: tuple[DayType, ...] = (DayType.WEEKDAY, DayType.SATURDAY, DayType.SUNDAY)

# from_time_point_id -> to_time_point_id -> minutes
TravelTimeMatrix = dict[str, dict[str, float]]


@dataclass(frozen=True)
class TimePoint:
    """Named, sequenced stop along a route."""

    id: str
    name: str
    sequence: int


@dataclass(frozen=True)
class TravelTime:
    """Observed directed duration between two time points, per day type."""

    from_time_point: str
    to_time_point: str
    weekday: float  # minutes
    saturday: float  # minutes
    sunday: float  # minutes

    def duration(self, day_type: DayType | str) -> float:
        """Return the duration observed for a day type."""
        return getattr(self, DayType(day_type).value)

    def durations(self) -> tuple[float, float, float]:
        return (self.weekday, self.saturday, self.sunday)


@dataclass(frozen=True)
class TimeBand:
    """Period of uniform headway."""

    start_time: str  # HH:MM
    end_time: str  # HH:MM
    frequency: int  # minutes between departures


@dataclass
class TimeBands:
    """Time bands for all day types."""

    weekday: list[TimeBand] = field(default_factory=list)
    saturday: list[TimeBand] = field(default_factory=list)
    sunday: list[TimeBand] = field(default_factory=list)

    def for_day(self, day_type: DayType | str) -> list[TimeBand]:
        return getattr(self, DayType(day_type).value)

    @classmethod
    def from_mapping(cls, bands: dict[str, list[TimeBand]]) -> "TimeBands":
        """Build from a ``{day_type: [TimeBand, ...]}`` mapping; absent day types get no bands."""
        return cls(
            weekday=list(bands.get(DayType.WEEKDAY.value, [])),
            saturday=list(bands.get(DayType.SATURDAY.value, [])),
            sunday=list(bands.get(DayType.SUNDAY.value, [])),
        )


@dataclass
class TravelTimeMatrices:
    """Travel time matrices for all day types."""

    weekday: TravelTimeMatrix = field(default_factory=dict)
    saturday: TravelTimeMatrix = field(default_factory=dict)
    sunday: TravelTimeMatrix = field(default_factory=dict)

    def for_day(self, day_type: DayType | str) -> TravelTimeMatrix:
        return getattr(self, DayType(day_type).value)


@dataclass
class ScheduleEntry:
    """Arrival and departure of one trip at one time point."""

    time_point_id: str
    arrival_time: str  # HH:MM, may exceed 24:00 for trips running past midnight
    departure_time: str  # HH:MM


@dataclass
class TripCalculationResult:
    """One generated trip across all time points."""

    trip_id: str
    schedule_entries: list[ScheduleEntry]
    total_travel_time: float  # minutes
    is_valid: bool = True
    errors: list[str] = field(default_factory=list)


@dataclass
class CalculationMetadata:
    """Summary figures for one orchestration run."""

    total_time_points: int
    total_trips: int
    calculation_time: float  # milliseconds
    weekday_trips: int = 0
    saturday_trips: int = 0
    sunday_trips: int = 0


@dataclass
class CalculationResults:
    """Generated trips for all day types plus run metadata."""

    weekday: list[TripCalculationResult]
    saturday: list[TripCalculationResult]
    sunday: list[TripCalculationResult]
    metadata: CalculationMetadata
    warnings: list[str] = field(default_factory=list)

    def for_day(self, day_type: DayType | str) -> list[TripCalculationResult]:
        return getattr(self, DayType(day_type).value)


@dataclass
class ValidationReport:
    """Report from validation process."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.valid


@dataclass
class CompletenessReport:
    """Consecutive connections still missing from a matrix."""

    is_complete: bool
    missing_connections: list[str] = field(default_factory=list)


@dataclass
class ScheduleStatistics:
    """Aggregate figures over generated trips."""

    total_time_points: int
    total_trips: dict[str, int]
    average_frequency: dict[str, int]  # minutes
    operating_hours: dict[str, dict[str, str]]
    total_travel_time: dict[str, float]  # minutes


@dataclass
class MatrixPerformanceReport:
    """Data-quality summary for a set of travel time matrices."""

    is_optimal: bool
    matrix_size: int
    connection_rate: float
    average_travel_time: dict[str, float]
    recommendations: list[str] = field(default_factory=list)


@dataclass
class EstimationPolicy:
    """Constants used to synthesize missing matrix entries."""

    adjacent_default: float | None = 5  # minutes between adjacent stops, None disables
    per_step_default: float = 5  # minutes per sequence step for non-adjacent pairs


@dataclass
class ValidationPolicy:
    """Thresholds for travel time validation."""

    long_travel_threshold: float = 60  # minutes for a single observation
    warn_sequence_gaps: bool = True


@dataclass
class ScheduleConfig:
    """Configuration for schedule calculation."""

    assume_symmetric: bool = True
    dwell_time: int = 0  # minutes at intermediate stops
    estimation: EstimationPolicy = field(default_factory=EstimationPolicy)
    validation: ValidationPolicy = field(default_factory=ValidationPolicy)

    def to_dict(self) -> dict[str, Any]:
        return {
            "assume_symmetric": self.assume_symmetric,
            "dwell_time": self.dwell_time,
            "adjacent_default": self.estimation.adjacent_default,
            "per_step_default": self.estimation.per_step_default,
            "long_travel_threshold": self.validation.long_travel_threshold,
            "warn_sequence_gaps": self.validation.warn_sequence_gaps,
        }
