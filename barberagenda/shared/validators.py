"""Shared validation utilities"""

import re
from datetime import datetime
from typing import Optional

TIME_OF_DAY_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_br_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate and normalize a Brazilian WhatsApp number to the (XX) XXXXX-XXXX mask.

    Args:
        phone: Phone number string in various formats

    Returns:
        Normalized phone number, e.g. (11) 98765-4321 or (11) 3456-7890 for landlines

    Raises:
        ValueError: If phone number is invalid
    """
    if not phone:
        return phone

    # Remove all non-digit characters
    digits = re.sub(r"\D", "", phone)

    # Handle +55 country prefix
    if digits.startswith("55") and len(digits) in (12, 13):
        digits = digits[2:]

    # Area code plus 8 (landline) or 9 (mobile) digits
    if len(digits) not in (10, 11):
        raise ValueError("Phone number must have area code plus 8 or 9 digits")

    return f"({digits[:2]}) {digits[2:-4]}-{digits[-4:]}"


def validate_time_of_day(value: Optional[str]) -> Optional[str]:
    """
    Validate a 24h HH:MM time-of-day string.

    Raises:
        ValueError: If the value is not HH:MM
    """
    if value is None:
        return value

    value = value.strip()
    if not TIME_OF_DAY_PATTERN.match(value):
        raise ValueError("Time must be in HH:MM format")
    return value


def validate_month(value: str) -> str:
    """Validate a YYYY-MM month string"""
    value = (value or "").strip()
    if not MONTH_PATTERN.match(value):
        raise ValueError("Month must be in YYYY-MM format")
    return value


def current_month() -> str:
    """Current month as YYYY-MM"""
    return datetime.now().strftime("%Y-%m")
