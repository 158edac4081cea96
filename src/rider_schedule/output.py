"""Schedule serialization and persistence."""

import json
from collections.abc import Iterable, Sequence
from pathlib import Path

from src.rider_schedule.logging import get_logger
from src.rider_schedule.models import ScheduleRow

log = get_logger(__name__)


def serialize_schedule(rows: Iterable[ScheduleRow]) -> str:
    """Render rows as an indented JSON array, keeping accented characters."""
    return json.dumps([row.to_json_dict() for row in rows], indent=2, ensure_ascii=False)


def write_schedule(rows: Sequence[ScheduleRow], paths: Iterable[Path | str]) -> list[Path]:
    """Write the same serialized schedule to every path.

    Parent directories are created as needed.

    Returns:
        The paths written, in order.
    """
    payload = serialize_schedule(rows)
    written: list[Path] = []
    for path in paths:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(payload, encoding="utf-8")
        written.append(target)

    log.info("schedule_saved", rows=len(rows), paths=[str(p) for p in written])
    return written


def format_table(rows: Sequence[ScheduleRow]) -> str:
    """Format schedule rows as a human-readable table.

    Columns: Rider | Day | Time | Ring | Class
    """
    if not rows:
        return "(no rides scheduled)"

    headers = ["Rider", "Day", "Time", "Ring", "Class"]
    cells = [[row.rider_name, row.day, row.time, row.ring, row.class_] for row in rows]

    widths = [len(h) for h in headers]
    for line in cells:
        for i, cell in enumerate(line):
            widths[i] = max(widths[i], len(cell))

    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "-+-".join("-" * w for w in widths)
    row_lines = [
        " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(line)) for line in cells
    ]

    return "\n".join([header_line, separator, *row_lines])
