from datetime import datetime, timezone

import pytest

from src.rider_schedule.errors import DateParseError
from src.rider_schedule.text import (
    extract_class_number,
    extract_rider_name,
    format_time,
    get_french_day,
    normalize_ring_name,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (">Jane Doe<", "Jane Doe"),
        ('<a href="/show/rider/2">Jane Doe</a>', "Jane Doe"),
        (">Zoë Ångström<", "Zoë Ångström"),
        (">a>b<", "a>b"),
    ],
)
def test_extract_rider_name_unwraps_first_fragment(raw, expected):
    assert extract_rider_name(raw) == expected


@pytest.mark.parametrize("raw", ["Jane Doe", "", "<>", "Jane <Doe", "Jane> Doe"])
def test_extract_rider_name_returns_input_without_pattern(raw):
    assert extract_rider_name(raw) == raw


def test_extract_class_number():
    assert extract_class_number('<a href="/show/class/412">412</a>') == "412"
    assert extract_class_number(">7<") == "7"


def test_extract_class_number_requires_digits():
    assert extract_class_number(">Grand Prix<") == ">Grand Prix<"
    assert extract_class_number("412") == "412"


@pytest.mark.parametrize(
    "date_like, expected",
    [
        ("2025-05-09", "Vendredi"),
        ("2025-05-10T00:00:00", "Samedi"),
        ("2025-05-11", "Dimanche"),
        ("2025-05-07", "Wednesday"),
        ("2025-05-05", "Monday"),
    ],
)
def test_get_french_day(date_like, expected):
    assert get_french_day(date_like) == expected


def test_get_french_day_accepts_free_form_dates():
    assert get_french_day("May 9, 2025") == "Vendredi"


@pytest.mark.parametrize("bad", ["", "   ", "not a date", "2025-02-30"])
def test_get_french_day_rejects_garbage(bad):
    with pytest.raises(DateParseError):
        get_french_day(bad)


def test_format_time_naive_timestamp():
    assert format_time("2025-05-09T08:30:00") == "08:30"
    assert format_time("2025-05-09 17:05") == "17:05"


def test_format_time_converts_aware_timestamp_to_local():
    stamp = "2025-05-09T08:30:00+00:00"
    expected = datetime(2025, 5, 9, 8, 30, tzinfo=timezone.utc).astimezone().strftime("%H:%M")
    assert format_time(stamp) == expected


def test_format_time_rejects_garbage():
    with pytest.raises(DateParseError):
        format_time("soon")


def test_date_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        format_time("")


def test_normalize_ring_name():
    assert normalize_ring_name("Combine Obstacle") == "Combiné"
    assert normalize_ring_name("Main") == "Main"
    assert normalize_ring_name("combine obstacle") == "combine obstacle"
    assert normalize_ring_name("") == ""


def test_out_of_range_aware_timestamp_is_a_parse_error():
    # converting to local time steps before year 1
    with pytest.raises(DateParseError):
        get_french_day("0001-01-01T00:00:00+14:00")
    with pytest.raises(DateParseError):
        format_time("0001-01-01T00:00:00+14:00")
