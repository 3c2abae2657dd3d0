"""Travel time data validator."""

import logging
import math

from timetable_engine.schedule.models import (
    EstimationPolicy,
    TimePoint,
    TravelTime,
    ValidationPolicy,
    ValidationReport,
)

logger = logging.getLogger(__name__)


class ScheduleValidationError(ValueError):
    """Raised when travel time data fails validation before trip generation."""

    def __init__(self, report: ValidationReport) -> None:
        super().__init__(f"Invalid travel time data: {', '.join(report.errors)}")
        self.report = report


class TravelTimeValidator:
    """Validate time points and travel times for consistency and plausibility."""

    def __init__(
        self,
        time_points: list[TimePoint],
        travel_times: list[TravelTime],
        policy: ValidationPolicy | None = None,
        estimation: EstimationPolicy | None = None,
    ) -> None:
        """
        Initialize validator with route data.

        When ``estimation`` is given, a missing consecutive travel time that the
        gap estimator will fill is reported as a warning stating the estimate.
        Stops sharing a sequence number are never estimated.
        """
        self.time_points = time_points
        self.travel_times = travel_times
        self.policy = policy or ValidationPolicy()
        self.estimation = estimation
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def validate(self) -> ValidationReport:
        """Run all validation checks."""
        logger.info(
            f"Validating {len(self.travel_times)} travel times "
            f"across {len(self.time_points)} time points"
        )
        self.errors = []
        self.warnings = []

        self._validate_sequence()
        self._validate_consecutive_pairs()
        self._validate_references()
        self._validate_durations()

        valid = len(self.errors) == 0

        report = ValidationReport(
            valid=valid,
            errors=self.errors.copy(),
            warnings=self.warnings.copy(),
            stats={
                "time_points": len(self.time_points),
                "travel_times": len(self.travel_times),
            },
        )

        if not valid:
            logger.error(f"Validation failed with {len(self.errors)} errors")
        elif self.warnings:
            logger.warning(f"Validation passed with {len(self.warnings)} warnings")
        else:
            logger.info("Validation passed")

        return report

    def _sorted_time_points(self) -> list[TimePoint]:
        return sorted(self.time_points, key=lambda tp: tp.sequence)

    def _validate_sequence(self) -> None:
        """Warn about gaps and duplicates in the sequence numbering."""
        if not self.policy.warn_sequence_gaps:
            return

        sequences = sorted(tp.sequence for tp in self.time_points)
        for current, following in zip(sequences, sequences[1:]):
            if following == current:
                self.warnings.append(f"Duplicate time point sequence {current}")
            elif following - current != 1:
                self.warnings.append(
                    f"Time point sequence gap detected between {current} and {following}"
                )

    def _validate_consecutive_pairs(self) -> None:
        """Every consecutive pair needs an observation in at least one direction."""
        observed = set()
        for tt in self.travel_times:
            observed.add((tt.from_time_point, tt.to_time_point))
            observed.add((tt.to_time_point, tt.from_time_point))

        ordered = self._sorted_time_points()
        for origin, destination in zip(ordered, ordered[1:]):
            if (origin.id, destination.id) in observed:
                continue

            missing = f"Missing travel time between {origin.name} and {destination.name}"
            steps = destination.sequence - origin.sequence

            if self.estimation is None:
                self.errors.append(missing)
            elif steps == 0:
                self.warnings.append(
                    f"{missing}, which share sequence {origin.sequence}; "
                    f"not estimated, counted as 0 minutes"
                )
            elif steps == 1:
                if self.estimation.adjacent_default is None:
                    self.errors.append(missing)
                else:
                    self.warnings.append(
                        f"{missing}, estimated at {self.estimation.adjacent_default:g} minutes"
                    )
            else:
                # A shorter two-leg path through known entries may undercut this
                ceiling = self.estimation.per_step_default * steps
                self.warnings.append(f"{missing}, estimated at up to {ceiling:g} minutes")

    def _validate_references(self) -> None:
        """Warn about observations for time points that are not on the route."""
        known = {tp.id for tp in self.time_points}
        if not known:
            return

        for tt in self.travel_times:
            for time_point_id in (tt.from_time_point, tt.to_time_point):
                if time_point_id not in known:
                    self.warnings.append(
                        f"Travel time {tt.from_time_point} -> {tt.to_time_point} "
                        f"references unknown time point {time_point_id}"
                    )

    def _validate_durations(self) -> None:
        """Reject negative or non-finite durations and flag implausibly long ones."""
        threshold = self.policy.long_travel_threshold

        for tt in self.travel_times:
            durations = tt.durations()
            between = f"between {tt.from_time_point} and {tt.to_time_point}"

            invalid = [d for d in durations if not math.isfinite(d)]
            if invalid:
                self.errors.append(f"Invalid travel time ({invalid[0]} minutes) found {between}")
                continue

            if any(d < 0 for d in durations):
                self.errors.append(f"Negative travel time found {between}")

            longest = max(durations)
            if longest > threshold:
                self.warnings.append(
                    f"Unusually long travel time ({longest:g} minutes) {between}"
                )


def validate_travel_times(
    time_points: list[TimePoint],
    travel_times: list[TravelTime],
    policy: ValidationPolicy | None = None,
    estimation: EstimationPolicy | None = None,
) -> ValidationReport:
    """Validate route data without raising."""
    return TravelTimeValidator(time_points, travel_times, policy, estimation).validate()
