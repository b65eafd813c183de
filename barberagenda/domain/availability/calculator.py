"""
Availability calculator

Pure functions that build the bookable slot grid for a day and mark which
slots are taken. No I/O happens here; occupied slots are fetched by the
booking service and passed in.
"""

from datetime import date, time
from typing import Iterable, Union

TimeOfDay = Union[str, time]


def to_minutes(value: TimeOfDay) -> int:
    """Convert HH:MM (or a time object) to minutes since midnight"""
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    hours, minutes = value.strip().split(":")
    return int(hours) * 60 + int(minutes)


def format_minutes(total_minutes: int) -> str:
    """Convert minutes since midnight to HH:MM"""
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def generate_slots(start: TimeOfDay, end: TimeOfDay, interval_minutes: int) -> list[str]:
    """
    Generate every slot start + k*interval that does not pass `end`.

    The closing time itself is bookable when it lands exactly on a step, so
    09:00-18:30 every 30 minutes yields 20 slots ending at 18:30.

    The interval is not validated: callers substitute a positive default for
    values <= 0 before calling.
    """
    start_min = to_minutes(start)
    end_min = to_minutes(end)

    slots = []
    current = start_min
    while current <= end_min:
        slots.append(format_minutes(current))
        current += interval_minutes
    return slots


def weekday_index(day: date) -> int:
    """Weekday of `day` with Sunday=0 .. Saturday=6"""
    # date.weekday() is Monday=0
    return (day.weekday() + 1) % 7


def is_date_open(day: date, open_weekdays: Iterable[int]) -> bool:
    return weekday_index(day) in set(open_weekdays)


def classify_occupancy(slots: Iterable[str], occupied_slots: Iterable[str]) -> list[dict]:
    """Mark each slot occupied iff it is one of `occupied_slots`"""
    occupied = set(occupied_slots)
    return [{"slot": slot, "occupied": slot in occupied} for slot in slots]
