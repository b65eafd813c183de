from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    Float,
    Index,
    Integer,
    String,
)
from sqlalchemy.sql import func

from .database import Base

BOOKING_STATUS_ACTIVE = "active"
BOOKING_STATUS_FINALIZED = "finalized"
BOOKING_STATUS_CANCELLED = "cancelled"

# Key of the single business configuration row
BUSINESS_CONFIG_KEY = "barbearia"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    client_name = Column(String(255), nullable=False)
    client_phone = Column(String(30), nullable=False)  # Stored as (XX) XXXXX-XXXX
    service_name = Column(String(255), nullable=False)
    service_price = Column(Float, nullable=False, default=0.0)
    date = Column(Date, nullable=False)
    time_slot = Column(String(5), nullable=False)  # HH:MM, one of the generated slots
    status = Column(String(20), nullable=False, default=BOOKING_STATUS_ACTIVE)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)

    # Lookup index for the occupancy check; not unique, occupancy is checked before insert
    __table_args__ = (Index("idx_booking_date_slot", "date", "time_slot"),)


class BusinessConfig(Base):
    __tablename__ = "business_config"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(50), unique=True, nullable=False, default=BUSINESS_CONFIG_KEY)
    operating_start = Column(String(5), nullable=True)  # HH:MM
    operating_end = Column(String(5), nullable=True)  # HH:MM
    slot_interval_minutes = Column(Integer, nullable=True)
    open_weekdays = Column(JSON, nullable=True)  # e.g. [1, 2, 3, 4, 5, 6], Sunday=0
    services = Column(JSON, nullable=True)  # e.g. [{"name": "Corte Tradicional", "price": 60}]
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
