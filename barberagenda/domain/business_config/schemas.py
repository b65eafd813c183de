"""Business configuration schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...config import MIN_SLOT_INTERVAL_MINUTES
from ...shared.validators import validate_time_of_day


class ServiceItem(BaseModel):
    """One entry of the service catalog"""

    name: str
    price: float

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Service name is required")
        return v

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        if v < 0:
            raise ValueError("Price cannot be negative")
        return v


class BusinessConfigResponse(BaseModel):
    """Effective configuration (stored values merged over defaults)"""

    operating_start: str
    operating_end: str
    slot_interval_minutes: int
    open_weekdays: list[int]
    services: list[ServiceItem]
    updated_at: Optional[datetime] = None


class BusinessConfigUpdate(BaseModel):
    """Partial update of operating hours, weekdays and catalog"""

    operating_start: Optional[str] = None
    operating_end: Optional[str] = None
    slot_interval_minutes: Optional[int] = None
    open_weekdays: Optional[list[int]] = None
    services: Optional[list[ServiceItem]] = None

    @field_validator("operating_start", "operating_end")
    @classmethod
    def validate_times(cls, v):
        return validate_time_of_day(v)

    @field_validator("slot_interval_minutes")
    @classmethod
    def validate_interval(cls, v):
        if v is not None and v < MIN_SLOT_INTERVAL_MINUTES:
            raise ValueError(f"Slot interval must be at least {MIN_SLOT_INTERVAL_MINUTES} minutes")
        return v

    @field_validator("open_weekdays")
    @classmethod
    def validate_weekdays(cls, v):
        if v is None:
            return v
        if not v:
            raise ValueError("Select at least one open day")
        if any(day < 0 or day > 6 for day in v):
            raise ValueError("Weekdays must be between 0 (Sunday) and 6 (Saturday)")
        return sorted(set(v))
