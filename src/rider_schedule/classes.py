"""Class label resolution.

A schedule entry only carries a class number (and sometimes a test name).
The label shown to the user comes from, in order of precedence:
  1. the configured classMapping (first pattern found in the test name wins),
  2. "classId - className - test" built from the class lookup table.
"""

from collections.abc import Iterable, Mapping

from src.rider_schedule.models import ClassRecord


def build_class_lookup(records: Iterable[ClassRecord]) -> dict[str, ClassRecord]:
    """Key class records by classID. Later duplicates replace earlier ones."""
    lookup: dict[str, ClassRecord] = {}
    for record in records:
        lookup[record.classID] = record
    return lookup


def format_class_string(
    class_id: str,
    test: str | None,
    class_lookup: Mapping[str, ClassRecord],
    class_mapping: Mapping[str, str] | None = None,
) -> str:
    """Resolve the display label for one schedule entry.

    Args:
        class_id: Class number extracted from the entry's classText.
        test: Test name of the entry, if any.
        class_lookup: classID -> ClassRecord, from build_class_lookup().
        class_mapping: Ordered substring pattern -> replacement label.

    Returns:
        The mapped label if a pattern occurs in the test name (or in the class
        name when there is no test), otherwise "classId[ - className][ - test]".
    """
    record = class_lookup.get(class_id)
    class_name = record.className if record is not None and record.className else ""

    full_test_name = test if test else class_name

    # Insertion order is significant: first matching pattern wins
    for pattern, label in (class_mapping or {}).items():
        if pattern in full_test_name:
            return label

    result = class_id
    if class_name:
        result += " - " + class_name
    if test:
        result += " - " + test
    return result
