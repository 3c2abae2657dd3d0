"""Command-line interface for transit-timetable-engine."""

import argparse
import logging
import sys
from pathlib import Path

from timetable_engine.analysis.statistics import calculate_schedule_statistics
from timetable_engine.api import calculate_optimized_schedule
from timetable_engine.output.json import write_json_files
from timetable_engine.schedule.models import EstimationPolicy, ScheduleConfig, ValidationPolicy
from timetable_engine.schedule.reader import RouteDataReader
from timetable_engine.schedule.validator import validate_travel_times
from timetable_engine.version import VERSION


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_validation_policy(args: argparse.Namespace) -> ValidationPolicy:
    """Map CLI flags onto a ValidationPolicy."""
    return ValidationPolicy(
        long_travel_threshold=args.long_travel_threshold,
        warn_sequence_gaps=not args.no_sequence_warnings,
    )


def build_config(args: argparse.Namespace) -> ScheduleConfig:
    """Map CLI flags onto a ScheduleConfig."""
    return ScheduleConfig(
        assume_symmetric=not args.no_symmetric,
        dwell_time=args.dwell_time,
        estimation=EstimationPolicy(adjacent_default=args.adjacent_default),
        validation=build_validation_policy(args),
    )


def cmd_generate(args: argparse.Namespace) -> int:
    """Execute generate command."""
    setup_logging(args.verbose)

    try:
        reader = RouteDataReader(args.input)
        reader.read_all()

        config = build_config(args)
        results = calculate_optimized_schedule(
            reader.time_points, reader.travel_times, reader.time_bands, config
        )
        statistics = calculate_schedule_statistics(results, reader.time_points)
        write_json_files(Path(args.output), results, reader.time_points, statistics, config)

        print("\nSchedule generated!")
        print(f"Output: {args.output}")
        print(
            f"Trips: weekday={results.metadata.weekday_trips}, "
            f"saturday={results.metadata.saturday_trips}, "
            f"sunday={results.metadata.sunday_trips}"
        )
        if results.warnings:
            print(f"Warnings ({len(results.warnings)}):")
            for warning in results.warnings:
                print(f"  - {warning}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Schedule generation failed")
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute validate command."""
    setup_logging(args.verbose)

    try:
        reader = RouteDataReader(args.input)
        reader.read_all()

        report = validate_travel_times(
            reader.time_points,
            reader.travel_times,
            build_validation_policy(args),
        )
        if report.valid:
            print("\nValidation successful!")
            print(f"Stats: {report.stats}")
            if report.warnings:
                print(f"Warnings ({len(report.warnings)}):")
                for warning in report.warnings:
                    print(f"  - {warning}")
            return 0
        else:
            print(f"\nValidation failed with {len(report.errors)} errors:")
            for error in report.errors:
                print(f"  - {error}")
            return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Validation failed")
        return 1


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="timetable-engine",
        description="Generate frequency-based bus timetables from travel time data",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate trips for a route")
    generate_parser.add_argument("--input", required=True, help="Path to route data directory")
    generate_parser.add_argument(
        "--output", default="./timetable", help="Output directory (default: ./timetable)"
    )
    generate_parser.add_argument(
        "--dwell-time",
        type=int,
        default=0,
        help="Minutes held at each intermediate stop (default: 0)",
    )
    generate_parser.add_argument(
        "--adjacent-default",
        type=float,
        default=5,
        help="Estimated minutes between adjacent stops with no data (default: 5)",
    )
    generate_parser.add_argument(
        "--long-travel-threshold",
        type=float,
        default=60,
        help="Warn about travel times above this many minutes (default: 60)",
    )
    generate_parser.add_argument(
        "--no-symmetric",
        action="store_true",
        help="Do not copy each observation to the reverse direction",
    )
    generate_parser.add_argument(
        "--no-sequence-warnings",
        action="store_true",
        help="Do not warn about gaps or duplicates in time point sequence numbers",
    )
    generate_parser.set_defaults(func=cmd_generate)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate route data")
    validate_parser.add_argument("--input", required=True, help="Path to route data directory")
    validate_parser.add_argument(
        "--long-travel-threshold",
        type=float,
        default=60,
        help="Warn about travel times above this many minutes (default: 60)",
    )
    validate_parser.add_argument(
        "--no-sequence-warnings",
        action="store_true",
        help="Do not warn about gaps or duplicates in time point sequence numbers",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # Parse and execute
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
