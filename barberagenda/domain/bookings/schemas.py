"""Booking domain schemas - Pydantic models for validation"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ...shared.validators import validate_br_phone, validate_time_of_day

REQUIRED_BOOKING_FIELDS = ["client_name", "client_phone", "service_name", "date", "time_slot"]


def _blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class BookingCreate(BaseModel):
    """Schema for the public booking form.

    Fields are optional here so that a missing field is reported by the service
    together with the full list of required fields.
    """

    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    service_name: Optional[str] = None
    date: Optional[dt.date] = None
    time_slot: Optional[str] = None

    @field_validator("client_name", "client_phone", "service_name", "time_slot", mode="before")
    @classmethod
    def strip_blank(cls, v):
        return _blank_to_none(v)

    @field_validator("client_phone")
    @classmethod
    def validate_phone(cls, v):
        if v:
            return validate_br_phone(v)
        return v

    @field_validator("time_slot")
    @classmethod
    def validate_slot(cls, v):
        return validate_time_of_day(v)

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_BOOKING_FIELDS if getattr(self, name) is None]


class BookingUpdate(BaseModel):
    """Schema for an admin edit; status changes go through cancel/finalize"""

    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    service_name: Optional[str] = None
    service_price: Optional[float] = None
    date: Optional[dt.date] = None
    time_slot: Optional[str] = None

    @field_validator("client_name", "client_phone", "service_name", "time_slot", mode="before")
    @classmethod
    def strip_blank(cls, v):
        return _blank_to_none(v)

    @field_validator("client_phone")
    @classmethod
    def validate_phone(cls, v):
        if v:
            return validate_br_phone(v)
        return v

    @field_validator("time_slot")
    @classmethod
    def validate_slot(cls, v):
        return validate_time_of_day(v)

    @field_validator("service_price")
    @classmethod
    def validate_price(cls, v):
        if v is not None and v < 0:
            raise ValueError("Price cannot be negative")
        return v


class BookingResponse(BaseModel):
    """Schema for booking response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    client_name: str
    client_phone: str
    service_name: str
    service_price: float
    date: dt.date
    time_slot: str
    status: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class BookingListResponse(BaseModel):
    total: int
    bookings: list[BookingResponse]


class SlotStatus(BaseModel):
    slot: str
    occupied: bool


class AvailabilityResponse(BaseModel):
    """Slot grid for a date; closed days have open=False and no slots"""

    date: dt.date
    open: bool
    slots: list[SlotStatus]


class OccupiedSlotsResponse(BaseModel):
    date: dt.date
    occupied_slots: list[str]
