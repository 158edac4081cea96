"""ScheduleAssembler - builds the consolidated schedule for configured riders.

Run sequence (one request in flight at a time):
  1. fetch the show roster (failure aborts the run)
  2. match configured names against the roster
  3. fetch class metadata (failure degrades to an empty lookup)
  4. for each matched rider: fetch raw entries, convert them to rows,
     then pause before the next rider
"""

import asyncio
from collections.abc import Awaitable, Callable, Mapping, Sequence

import httpx

from src.rider_schedule.api import DEFAULT_BASE_URL, ShowApi
from src.rider_schedule.classes import build_class_lookup, format_class_string
from src.rider_schedule.config import ShowConfig
from src.rider_schedule.errors import ClassDataFetchError, DateParseError, RiderFetchError
from src.rider_schedule.fetch import DEFAULT_HEADERS, DEFAULT_TIMEOUT
from src.rider_schedule.logging import get_logger
from src.rider_schedule.matcher import find_riders_by_names
from src.rider_schedule.models import ClassRecord, MatchedRider, RawScheduleEntry, ScheduleRow
from src.rider_schedule.text import (
    extract_class_number,
    format_time,
    get_french_day,
    normalize_ring_name,
)

log = get_logger(__name__)

DEFAULT_PACING_DELAY = 0.5

# Substituted for day/time values that cannot be parsed
INVALID_DAY = "[invalid date]"
INVALID_TIME = "[invalid time]"


def _day_or_placeholder(entry: RawScheduleEntry, rider: MatchedRider) -> str:
    try:
        return get_french_day(entry.day)
    except DateParseError as exc:
        log.warning(
            "invalid_datetime",
            field="day",
            value=entry.day,
            rider=rider.riderName,
            error=str(exc),
        )
        return INVALID_DAY


def _time_or_placeholder(entry: RawScheduleEntry, rider: MatchedRider) -> str:
    try:
        return format_time(entry.ride_time)
    except DateParseError as exc:
        log.warning(
            "invalid_datetime",
            field="rideTime",
            value=entry.ride_time,
            rider=rider.riderName,
            error=str(exc),
        )
        return INVALID_TIME


def build_row(
    rider: MatchedRider,
    entry: RawScheduleEntry,
    class_lookup: Mapping[str, ClassRecord],
    class_mapping: Mapping[str, str],
) -> ScheduleRow:
    """Convert one raw schedule entry into an output row."""
    class_id = extract_class_number(entry.class_text)
    return ScheduleRow(
        rider_name=rider.riderName,
        rider_id=rider.riderID,
        class_=format_class_string(class_id, entry.test, class_lookup, class_mapping),
        ring=normalize_ring_name(entry.ring),
        day=_day_or_placeholder(entry, rider),
        time=_time_or_placeholder(entry, rider),
    )


def extract_rider_schedule(
    rider: MatchedRider,
    entries: Sequence[RawScheduleEntry],
    class_lookup: Mapping[str, ClassRecord],
    class_mapping: Mapping[str, str],
) -> list[ScheduleRow]:
    """Convert a rider's raw entries to rows, keeping source order."""
    return [build_row(rider, entry, class_lookup, class_mapping) for entry in entries]


class ScheduleAssembler:
    """Runs one schedule build for a show configuration.

    The sleep callable is injectable so tests can skip the pacing delay.
    """

    def __init__(
        self,
        api: ShowApi,
        config: ShowConfig,
        *,
        pacing_delay: float = DEFAULT_PACING_DELAY,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self.api = api
        self.config = config
        self.pacing_delay = pacing_delay
        self._sleep = sleep

    async def run(self) -> list[ScheduleRow]:
        """Build the schedule.

        Returns:
            Rows ordered by matched rider, then by source entry order.

        Raises:
            RosterFetchError: If the roster cannot be fetched.
        """
        if not self.config.riderNames:
            log.info("no_rider_names", show_id=self.config.showId)
            return []

        log.info(
            "schedule_run_started",
            show_id=self.config.showId,
            riders=", ".join(self.config.riderNames),
        )

        roster = await self.api.get_roster()
        matched = find_riders_by_names(roster, self.config.riderNames)
        if not matched:
            log.info("no_matching_riders", targets=len(self.config.riderNames))
            return []

        class_lookup = await self._load_class_lookup()

        schedule: list[ScheduleRow] = []
        for rider in matched:
            schedule.extend(await self._rider_rows(rider, class_lookup))
            await self._sleep(self.pacing_delay)

        log.info("schedule_run_finished", riders=len(matched), rows=len(schedule))
        return schedule

    async def _load_class_lookup(self) -> dict[str, ClassRecord]:
        try:
            records = await self.api.get_classes()
        except ClassDataFetchError as exc:
            log.warning("class_data_unavailable", error=str(exc))
            records = []
        lookup = build_class_lookup(records)
        log.info("class_definitions_loaded", classes=len(lookup))
        return lookup

    async def _rider_rows(
        self, rider: MatchedRider, class_lookup: Mapping[str, ClassRecord]
    ) -> list[ScheduleRow]:
        try:
            entries = await self.api.get_rider_entries(rider.riderID)
        except RiderFetchError as exc:
            log.warning(
                "rider_fetch_failed",
                rider=rider.riderName,
                rider_id=rider.riderID,
                error=str(exc),
            )
            return []

        rows = extract_rider_schedule(rider, entries, class_lookup, self.config.classMapping)
        log.info(
            "rider_schedule_fetched",
            rider=rider.riderName,
            rider_id=rider.riderID,
            entries=len(rows),
        )
        return rows


async def build_schedule(
    config: ShowConfig,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    pacing_delay: float = DEFAULT_PACING_DELAY,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ScheduleRow]:
    """Open an HTTP client, run a ScheduleAssembler, and close the client.

    Args:
        config: Show id, rider names and class mapping for this run.
        base_url: Show site base URL.
        timeout: Per-request timeout in seconds.
        pacing_delay: Pause between per-rider fetches, in seconds.
        transport: Optional httpx transport (tests use httpx.MockTransport).

    Raises:
        RosterFetchError: If the roster cannot be fetched.
    """
    async with httpx.AsyncClient(
        headers=DEFAULT_HEADERS, follow_redirects=True, transport=transport
    ) as client:
        api = ShowApi(client, config.showId, base_url=base_url, timeout=timeout)
        assembler = ScheduleAssembler(api, config, pacing_delay=pacing_delay)
        return await assembler.run()
