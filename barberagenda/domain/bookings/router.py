"""Booking router - FastAPI endpoints for availability and bookings"""

import logging
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from .schemas import (
    AvailabilityResponse,
    BookingCreate,
    BookingListResponse,
    BookingResponse,
    BookingUpdate,
    OccupiedSlotsResponse,
)
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


# ============================================================================
# PUBLIC ROUTES
# ============================================================================


@router.get("/availability/{day}", response_model=AvailabilityResponse)
async def get_availability(day: date, service: BookingService = Depends(get_booking_service)):
    """Slot grid for a date (YYYY-MM-DD) with occupied slots flagged"""
    return service.get_availability(day)


@router.get("/occupied/{day}", response_model=OccupiedSlotsResponse)
async def get_occupied_slots(day: date, service: BookingService = Depends(get_booking_service)):
    """Time slots already taken on a date"""
    return {"date": day, "occupied_slots": service.get_occupied_slots(day)}


@router.post("", response_model=BookingResponse, status_code=201)
async def create_booking(
    data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """Public booking form submission"""
    return service.check_and_reserve(data)


# ============================================================================
# ADMIN ROUTES
# ============================================================================


@router.get("", response_model=BookingListResponse)
async def list_bookings(
    _admin: dict = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
):
    """All bookings, newest first"""
    bookings = service.list_bookings()
    return {"total": len(bookings), "bookings": bookings}


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    _admin: dict = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
):
    return service.get_booking(booking_id)


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int,
    data: BookingUpdate,
    _admin: dict = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
):
    """Edit client details, service, date or time slot"""
    return service.update_booking(booking_id, data)


@router.post("/{booking_id}/cancel", response_model=BookingResponse)
async def cancel_booking(
    booking_id: int,
    _admin: dict = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
):
    """Cancel an active booking and free its slot"""
    return service.cancel_booking(booking_id)


@router.post("/{booking_id}/finalize", response_model=BookingResponse)
async def finalize_booking(
    booking_id: int,
    _admin: dict = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
):
    """Mark an active booking as done"""
    return service.finalize_booking(booking_id)
