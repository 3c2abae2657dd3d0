"""Route data reader for CSV route directories."""

import csv
import logging
from pathlib import Path

from timetable_engine.schedule.models import DayType, TimeBand, TimeBands, TimePoint, TravelTime

logger = logging.getLogger(__name__)


class RouteDataReader:
    """Read time points, travel times and time bands from a route directory."""

    def __init__(self, route_path: str) -> None:
        """Initialize reader with route directory path."""
        self.route_path = Path(route_path)
        if not self.route_path.is_dir():
            raise ValueError(f"Route path not found or not a directory: {route_path}")

        self.time_points: list[TimePoint] = []
        self.travel_times: list[TravelTime] = []
        self.time_bands = TimeBands()

    def read_all(self) -> None:
        """Read all route files."""
        logger.info(f"Reading route data from {self.route_path}")
        self.read_time_points()
        self.read_travel_times()
        self.read_time_bands()
        band_count = sum(
            len(self.time_bands.for_day(day_type)) for day_type in DayType
        )
        logger.info(
            f"Loaded {len(self.time_points)} time points, "
            f"{len(self.travel_times)} travel times, {band_count} time bands"
        )

    def read_time_points(self) -> None:
        """Read time_points.csv."""
        file_path = self.route_path / "time_points.csv"
        if not file_path.exists():
            raise FileNotFoundError(f"Required file not found: {file_path}")

        with open(file_path, encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            for row in reader:
                time_point = TimePoint(
                    id=row["id"].strip(),
                    name=row.get("name", "").strip(),
                    sequence=int(row["sequence"]),
                )
                self.time_points.append(time_point)

    def read_travel_times(self) -> None:
        """Read travel_times.csv."""
        file_path = self.route_path / "travel_times.csv"
        if not file_path.exists():
            raise FileNotFoundError(f"Required file not found: {file_path}")

        with open(file_path, encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            for row in reader:
                travel_time = TravelTime(
                    from_time_point=row["from_time_point"].strip(),
                    to_time_point=row["to_time_point"].strip(),
                    weekday=self._parse_minutes(row["weekday"]),
                    saturday=self._parse_minutes(row["saturday"]),
                    sunday=self._parse_minutes(row["sunday"]),
                )
                self.travel_times.append(travel_time)

    def read_time_bands(self) -> None:
        """Read time_bands.csv if present."""
        file_path = self.route_path / "time_bands.csv"
        if not file_path.exists():
            logger.info("time_bands.csv not found, no service bands")
            return

        bands: dict[str, list[TimeBand]] = {day_type.value: [] for day_type in DayType}
        with open(file_path, encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            for row in reader:
                day_type = DayType(row["day_type"].strip().lower())
                band = TimeBand(
                    start_time=row["start_time"].strip(),
                    end_time=row["end_time"].strip(),
                    frequency=int(row["frequency"]),
                )
                bands[day_type.value].append(band)

        self.time_bands = TimeBands.from_mapping(bands)

    @staticmethod
    def _parse_minutes(value: str) -> float:
        """Parse a minute count, keeping whole numbers as int."""
        minutes = float(value.strip())
        return int(minutes) if minutes.is_integer() else minutes
