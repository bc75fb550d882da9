"""
Shift clock arithmetic on "HH:MM" strings (24h, no seconds).
"""
from labourpay.core.exceptions import InvalidTimeFormat

MINUTES_PER_DAY = 24 * 60


def parse_time_to_minutes(value: str) -> int:
    """Converts "HH:MM" to minutes since midnight."""
    if not isinstance(value, str):
        raise InvalidTimeFormat(f"Invalid time format: {value!r}")

    parts = value.strip().split(":")
    if len(parts) != 2:
        raise InvalidTimeFormat(f"Invalid time format: {value!r}")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidTimeFormat(f"Invalid time format: {value!r}")

    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidTimeFormat(f"Invalid time format: {value!r}")
    return hours * 60 + minutes


def shift_minutes(start_time: str, end_time: str) -> int:
    """
    Length of a shift in minutes. An end at or before the start means the
    shift crossed midnight, so a full day is added to the end; identical
    start and end therefore count as 24 hours.
    """
    start = parse_time_to_minutes(start_time)
    end = parse_time_to_minutes(end_time)
    if end <= start:
        end += MINUTES_PER_DAY
    return end - start


def shift_hours(start_time: str, end_time: str) -> float:
    return shift_minutes(start_time, end_time) / 60
