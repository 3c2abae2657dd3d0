"""Transit Timetable Engine - Turn sparse travel times into frequency-based bus timetables."""

from timetable_engine.api import build_enhanced_travel_matrices, calculate_optimized_schedule
from timetable_engine.schedule.validator import ScheduleValidationError, validate_travel_times
from timetable_engine.version import VERSION

__version__ = VERSION
__all__ = [
    "VERSION",
    "ScheduleValidationError",
    "build_enhanced_travel_matrices",
    "calculate_optimized_schedule",
    "validate_travel_times",
]
