"""Error hierarchy for schedule retrieval failure classification.

Each failure kind decides how far it propagates:
  - RosterFetchError aborts the whole run (the CLI exits non-zero).
  - ClassDataFetchError degrades to an empty class lookup.
  - RiderFetchError drops a single rider's rows and the run continues.
  - MalformedResponseError is converted to "no data" at the API boundary.
  - DateParseError is replaced by a placeholder in the affected row.
  - ConfigLoadError is replaced by default configuration.

Example usage:
    try:
        entries = await api.get_rider_entries(rider.riderID)
    except RiderFetchError as exc:
        log.warning("rider_fetch_failed", rider=rider.riderName, error=str(exc))
"""


class ScheduleError(Exception):
    """Base exception for all schedule errors."""

    pass


class FetchError(ScheduleError):
    """Transport or HTTP failure while fetching a remote resource.

    Examples: connection refused, request timeout, 500 Internal Server Error.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class RosterFetchError(FetchError):
    """The show roster could not be fetched. Fatal for the run."""

    pass


class ClassDataFetchError(FetchError):
    """Class metadata could not be fetched.

    Callers fall back to an empty class lookup, so every class label uses the
    "classId - test" form.
    """

    pass


class RiderFetchError(FetchError):
    """A single rider's schedule could not be fetched."""

    def __init__(
        self, message: str, *, url: str | None = None, rider_id: int | None = None
    ) -> None:
        super().__init__(message, url=url)
        self.rider_id = rider_id


class MalformedResponseError(ScheduleError):
    """A payload does not have the expected shape (missing key, not a list, not JSON)."""

    pass


class DateParseError(ScheduleError, ValueError):
    """A date or time string could not be interpreted."""

    pass


class ConfigLoadError(ScheduleError):
    """The show configuration file is missing or invalid."""

    pass
