"""Booking service - Business logic for availability and reservations"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from ...errors import ConflictError, NotFoundError, ValidationError
from ...models import (
    BOOKING_STATUS_ACTIVE,
    BOOKING_STATUS_CANCELLED,
    BOOKING_STATUS_FINALIZED,
    Booking,
)
from ..availability import classify_occupancy, generate_slots, is_date_open
from ..business_config.schemas import BusinessConfigResponse
from ..business_config.service import BusinessConfigService, effective_interval
from .repository import BookingRepository
from .schemas import REQUIRED_BOOKING_FIELDS, BookingCreate, BookingUpdate

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()
        self.config_service = BusinessConfigService(db)

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    def get_occupied_slots(self, day: date) -> list[str]:
        """Slots held by non-cancelled bookings on `day`; cancelled bookings free their slot"""
        bookings = self.repo.list_bookings_for_date(self.db, day)
        return sorted({b.time_slot for b in bookings if b.status != BOOKING_STATUS_CANCELLED})

    def get_availability(self, day: date) -> dict:
        """Slot grid for `day` with each slot flagged occupied or free"""
        config = self.config_service.get_config()

        if not is_date_open(day, config.open_weekdays):
            logger.info(f"📅 Availability requested for closed day {day}")
            return {"date": day, "open": False, "slots": []}

        slots = self._slots_for(config)
        occupied = self.get_occupied_slots(day)
        return {"date": day, "open": True, "slots": classify_occupancy(slots, occupied)}

    # ------------------------------------------------------------------
    # Reservation
    # ------------------------------------------------------------------

    def check_and_reserve(self, data: BookingCreate) -> Booking:
        """
        Validate a public booking request, re-check the slot and insert it.

        The occupancy check and the insert are two separate round trips, not a
        transaction: two clients submitting the same slot at the same moment can
        both pass the check. This is an accepted limitation.
        """
        missing = data.missing_fields()
        if missing:
            raise ValidationError(
                f"All fields are required: {', '.join(REQUIRED_BOOKING_FIELDS)}. "
                f"Missing: {', '.join(missing)}"
            )

        config = self.config_service.get_config()
        self._ensure_bookable(config, data.date, data.time_slot)

        service_item = self.config_service.find_service(data.service_name, config)
        if service_item is None:
            raise ValidationError(f"Unknown service: {data.service_name}")

        if self.repo.find_occupying_bookings(self.db, data.date, data.time_slot):
            logger.info(f"⛔ Slot {data.date} {data.time_slot} already taken")
            raise ConflictError()

        booking = self.repo.insert_booking(
            self.db,
            client_name=data.client_name,
            client_phone=data.client_phone,
            service_name=service_item.name,
            service_price=service_item.price,
            date=data.date,
            time_slot=data.time_slot,
        )
        logger.info(
            f"✅ New booking {booking.id}: {booking.client_name} on {booking.date} at {booking.time_slot}"
        )
        return booking

    # ------------------------------------------------------------------
    # Admin operations
    # ------------------------------------------------------------------

    def list_bookings(self) -> list[Booking]:
        return self.repo.list_bookings(self.db)

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if not booking:
            raise NotFoundError()
        return booking

    def update_booking(self, booking_id: int, data: BookingUpdate) -> Booking:
        """Admin edit of client, service, date or slot"""
        booking = self.get_booking(booking_id)
        updates = data.model_dump(exclude_none=True)

        new_date = updates.get("date", booking.date)
        new_slot = updates.get("time_slot", booking.time_slot)
        moved = new_date != booking.date or new_slot != booking.time_slot

        if moved and booking.status == BOOKING_STATUS_ACTIVE:
            config = self.config_service.get_config()
            self._ensure_bookable(config, new_date, new_slot)
            if self.repo.find_occupying_bookings(
                self.db, new_date, new_slot, exclude_id=booking.id
            ):
                raise ConflictError()

        if "service_name" in updates and "service_price" not in updates:
            service_item = self.config_service.find_service(updates["service_name"])
            if service_item is None:
                raise ValidationError(f"Unknown service: {updates['service_name']}")
            updates["service_name"] = service_item.name
            updates["service_price"] = service_item.price

        logger.info(f"✏️ Updating booking {booking.id}: {sorted(updates)}")
        return self.repo.update_booking(self.db, booking, **updates)

    def cancel_booking(self, booking_id: int) -> Booking:
        return self._transition(booking_id, BOOKING_STATUS_CANCELLED)

    def finalize_booking(self, booking_id: int) -> Booking:
        return self._transition(booking_id, BOOKING_STATUS_FINALIZED)

    def _transition(self, booking_id: int, new_status: str) -> Booking:
        """active -> finalized | cancelled; both targets are terminal"""
        booking = self.get_booking(booking_id)
        if booking.status != BOOKING_STATUS_ACTIVE:
            raise ValidationError(
                f"Booking is already {booking.status} and cannot be marked {new_status}"
            )

        logger.info(f"🔁 Booking {booking.id}: {booking.status} -> {new_status}")
        return self.repo.update_booking(self.db, booking, status=new_status)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _slots_for(config: BusinessConfigResponse) -> list[str]:
        return generate_slots(
            config.operating_start,
            config.operating_end,
            effective_interval(config.slot_interval_minutes),
        )

    def _ensure_bookable(self, config: BusinessConfigResponse, day: date, time_slot: str) -> None:
        if not is_date_open(day, config.open_weekdays):
            raise ValidationError("The barbershop is closed on this day.")
        if time_slot not in self._slots_for(config):
            raise ValidationError(f"{time_slot} is not a bookable time slot.")
