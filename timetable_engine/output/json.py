"""JSON output of generated schedules."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

from timetable_engine.schedule.models import (
    DAY_TYPES,
    CalculationResults,
    ScheduleConfig,
    ScheduleStatistics,
    TimePoint,
)
from timetable_engine.transform.cumulative import sort_time_points
from timetable_engine.transform.trips import convert_to_schedule_matrix

logger = logging.getLogger(__name__)


def write_json_files(
    output_path: Path,
    results: CalculationResults,
    time_points: list[TimePoint],
    statistics: ScheduleStatistics | None = None,
    config: ScheduleConfig | None = None,
) -> dict[str, str]:
    """Write one JSON file per day type plus a summary."""
    logger.info(f"Writing JSON files to {output_path}")

    output_path.mkdir(parents=True, exist_ok=True)

    files_written = {}
    ordered = sort_time_points(time_points)

    # Write <day_type>.json
    for day_type in DAY_TYPES:
        trips = results.for_day(day_type)

        trips_data = []
        for trip in trips:
            trips_data.append(
                {
                    "trip_id": trip.trip_id,
                    "total_travel_time": trip.total_travel_time,
                    "is_valid": trip.is_valid,
                    "errors": trip.errors,
                    "schedule_entries": [
                        {
                            "time_point_id": entry.time_point_id,
                            "arrival_time": entry.arrival_time,
                            "departure_time": entry.departure_time,
                        }
                        for entry in trip.schedule_entries
                    ],
                }
            )

        day_data = {
            "day_type": day_type.value,
            "time_points": [{"id": tp.id, "name": tp.name} for tp in ordered],
            "trip_count": len(trips),
            "trips": trips_data,
            "timetable": convert_to_schedule_matrix(trips, time_points),
        }

        filename = f"{day_type.value}.json"
        day_path = output_path / filename
        with open(day_path, "w", encoding="utf-8") as f:
            json.dump(day_data, f, indent=2, sort_keys=True)
        files_written[filename] = str(day_path)
        logger.info(f"Wrote {day_path}")

    # Write summary.json
    summary_data = {
        "metadata": asdict(results.metadata),
        "warnings": results.warnings,
    }
    if statistics is not None:
        summary_data["statistics"] = asdict(statistics)
    if config is not None:
        summary_data["config"] = config.to_dict()

    summary_path = output_path / "summary.json"
    with open(summary_path, "w", encoding="utf-8") as f:
        json.dump(summary_data, f, indent=2, sort_keys=True)
    files_written["summary.json"] = str(summary_path)
    logger.info(f"Wrote {summary_path}")

    return files_written
