"""Build a horse-show schedule for selected riders and save it as JSON.

Run with: rider-schedule                      # riders from config.json
Override: rider-schedule "Jane Doe" "John"    # riders for this run only
Table:    rider-schedule --table
Dry run:  rider-schedule --no-save

Exit codes:
  0 = success (schedule on stdout and written to the output files)
  1 = no rider names configured, or the roster could not be fetched
"""

import argparse
import asyncio
import sys
from pathlib import Path

from src.rider_schedule.assembler import build_schedule
from src.rider_schedule.config import get_settings, load_show_config
from src.rider_schedule.errors import ScheduleError
from src.rider_schedule.logging import setup_logging
from src.rider_schedule.output import format_table, serialize_schedule, write_schedule

MISSING_RIDERS_MESSAGE = "create config.json with riderNames array"


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="rider-schedule",
        description="Fetch a show's rider schedules and save them as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Rider names to schedule (overrides riderNames from the config file).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(settings.config_path),
        help=f"Show configuration file (default: {settings.config_path}).",
    )
    parser.add_argument(
        "--show-id",
        type=int,
        default=None,
        help="Show id (overrides showId from the config file).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(settings.output_path),
        help=f"Primary output file (default: {settings.output_path}).",
    )
    parser.add_argument(
        "--published-output",
        type=Path,
        default=Path(settings.published_output_path),
        help=f"Published copy of the schedule (default: {settings.published_output_path}).",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=settings.pacing_delay,
        help=f"Pause between rider fetches in seconds (default: {settings.pacing_delay}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.request_timeout,
        help=f"Per-request timeout in seconds (default: {settings.request_timeout}).",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print a human-readable table instead of JSON.",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Print the schedule without writing the output files.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=settings.log_json,
        help="Emit logs as JSON lines.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level}).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    setup_logging(json_output=args.log_json, log_level=args.log_level)

    config = load_show_config(args.config)
    if args.names:
        config = config.with_rider_names(args.names)
    if args.show_id is not None:
        config = config.model_copy(update={"showId": args.show_id})

    if not config.riderNames:
        _log(MISSING_RIDERS_MESSAGE)
        return 1

    _log(f"rider-schedule: show {config.showId}, riders: {', '.join(config.riderNames)}")

    try:
        rows = asyncio.run(
            build_schedule(
                config,
                base_url=settings.api_base_url,
                timeout=args.timeout,
                pacing_delay=args.delay,
            )
        )
    except ScheduleError as e:
        _log(f"ERROR: {e}")
        return 1
    except Exception as e:
        _log(f"ERROR: unexpected failure: {e!r}")
        return 1

    if args.table:
        print(format_table(rows))
    else:
        print(serialize_schedule(rows))

    if not args.no_save:
        try:
            written = write_schedule(rows, [args.output, args.published_output])
        except OSError as e:
            _log(f"ERROR: cannot save schedule: {e}")
            return 1
        _log(f"Schedule saved to {' and '.join(str(p) for p in written)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
