"""Availability domain - slot grid generation and occupancy classification"""

from .calculator import (
    classify_occupancy,
    format_minutes,
    generate_slots,
    is_date_open,
    to_minutes,
    weekday_index,
)

__all__ = [
    "classify_occupancy",
    "format_minutes",
    "generate_slots",
    "is_date_open",
    "to_minutes",
    "weekday_index",
]
