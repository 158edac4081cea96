"""Match configured rider names against the show roster."""

from collections.abc import Iterable, Sequence

from src.rider_schedule.logging import get_logger
from src.rider_schedule.models import MatchedRider, RosterEntry
from src.rider_schedule.text import extract_rider_name

log = get_logger(__name__)


def names_match(roster_name: str, target_name: str) -> bool:
    """Bidirectional, case-sensitive substring containment."""
    return target_name in roster_name or roster_name in target_name


def find_riders_by_names(
    roster: Sequence[RosterEntry], target_names: Iterable[str]
) -> list[MatchedRider]:
    """Find the first roster entry matching each target name.

    Target names are processed in order. Names without a match are logged and
    skipped. Several names may resolve to the same rider; no deduplication.

    Args:
        roster: Riders registered for the show.
        target_names: Configured rider names.

    Returns:
        One MatchedRider per target name that matched, in target order.
    """
    found: list[MatchedRider] = []

    for target in target_names:
        match = next(
            (
                entry
                for entry in roster
                if names_match(extract_rider_name(entry.riderName), target)
            ),
            None,
        )
        if match is None:
            log.info("rider_not_found", target=target)
            continue

        rider = MatchedRider(
            riderID=match.riderID,
            riderName=extract_rider_name(match.riderName),
            originalName=target,
        )
        found.append(rider)
        log.info("rider_found", rider=rider.riderName, rider_id=rider.riderID, target=target)

    return found
