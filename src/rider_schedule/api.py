"""ShowApi - the three show endpoints used to build a rider schedule.

Endpoints (all GET, JSON bodies):
  /show/GetRiderData?id={showId}&_={epoch_ms}        -> {"riderData": [...]}
  /show/GetClassData?id={showId}                     -> {"classData": [...]}
  /show/GetAllRiderData?show={showId}&id={riderID}   -> {"riderPageData": [...]}

riderData items:     {"riderID": 1234, "riderName": "<a ...>Jane Doe</a>", ...}
classData items:     {"classID": "412", "className": "Grand Prix 1.40m", ...}
riderPageData items: {"classText": "<a ...>412</a>", "test": "...", "ring": "...",
                      "day": "2025-05-09T00:00:00", "rideTime": "2025-05-09T08:30:00"}
"""

import time

import httpx
from pydantic import ValidationError

from src.rider_schedule.errors import (
    ClassDataFetchError,
    FetchError,
    RiderFetchError,
    RosterFetchError,
)
from src.rider_schedule.fetch import DEFAULT_TIMEOUT, expect_list, fetch_json
from src.rider_schedule.logging import get_logger
from src.rider_schedule.models import ClassRecord, RawScheduleEntry, RosterEntry

log = get_logger(__name__)

DEFAULT_BASE_URL = "https://www.foxvillage.com"


class ShowApi:
    """Client for one show's roster, class and per-rider schedule endpoints."""

    ROSTER_PATH = "/show/GetRiderData"
    CLASSES_PATH = "/show/GetClassData"
    RIDER_PATH = "/show/GetAllRiderData"

    def __init__(
        self,
        client: httpx.AsyncClient,
        show_id: int,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.client = client
        self.show_id = show_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def roster_url(self) -> str:
        # Trailing timestamp defeats intermediate caches
        return (
            f"{self.base_url}{self.ROSTER_PATH}"
            f"?id={self.show_id}&_={int(time.time() * 1000)}"
        )

    def classes_url(self) -> str:
        return f"{self.base_url}{self.CLASSES_PATH}?id={self.show_id}"

    def rider_url(self, rider_id: int) -> str:
        return f"{self.base_url}{self.RIDER_PATH}?show={self.show_id}&id={rider_id}"

    async def get_roster(self) -> list[RosterEntry]:
        """Fetch every rider registered for the show.

        Raises:
            RosterFetchError: If the roster cannot be fetched.
        """
        url = self.roster_url()
        log.info("fetching_roster", url=url)
        try:
            payload = await fetch_json(self.client, url, timeout=self.timeout)
        except FetchError as exc:
            raise RosterFetchError(str(exc), url=url) from exc

        roster: list[RosterEntry] = []
        for item in expect_list(payload, "riderData"):
            try:
                roster.append(RosterEntry.model_validate(item))
            except ValidationError as exc:
                log.warning("roster_entry_skipped", entry=item, error=str(exc))

        log.info("roster_loaded", riders=len(roster))
        return roster

    async def get_classes(self) -> list[ClassRecord]:
        """Fetch class metadata for the show.

        Raises:
            ClassDataFetchError: If the request fails.
        """
        url = self.classes_url()
        log.info("fetching_classes", url=url)
        try:
            payload = await fetch_json(self.client, url, timeout=self.timeout)
        except FetchError as exc:
            raise ClassDataFetchError(str(exc), url=url) from exc

        records: list[ClassRecord] = []
        for item in expect_list(payload, "classData"):
            try:
                records.append(ClassRecord.from_payload(item))
            except ValidationError as exc:
                log.warning("class_record_skipped", entry=item, error=str(exc))
        return records

    async def get_rider_entries(self, rider_id: int) -> list[RawScheduleEntry]:
        """Fetch one rider's raw schedule entries.

        Raises:
            RiderFetchError: If the request fails.
        """
        url = self.rider_url(rider_id)
        log.info("fetching_rider_schedule", url=url, rider_id=rider_id)
        try:
            payload = await fetch_json(self.client, url, timeout=self.timeout)
        except FetchError as exc:
            raise RiderFetchError(str(exc), url=url, rider_id=rider_id) from exc

        entries: list[RawScheduleEntry] = []
        for item in expect_list(payload, "riderPageData"):
            try:
                entries.append(RawScheduleEntry.model_validate(item))
            except ValidationError as exc:
                log.warning("schedule_entry_skipped", rider_id=rider_id, error=str(exc))
        return entries
