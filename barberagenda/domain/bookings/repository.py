"""Booking repository - Database operations for bookings"""

from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from ...models import BOOKING_STATUS_ACTIVE, BOOKING_STATUS_CANCELLED, Booking
from ...shared.persistence import upstream_guard


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def list_bookings(db: Session) -> list[Booking]:
        """All bookings, newest first"""
        with upstream_guard(db, "list bookings"):
            return db.query(Booking).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    @staticmethod
    def list_bookings_for_date(db: Session, day: date) -> list[Booking]:
        with upstream_guard(db, f"list bookings for {day}"):
            return (
                db.query(Booking)
                .filter(Booking.date == day)
                .order_by(Booking.time_slot.asc())
                .all()
            )

    @staticmethod
    def list_bookings_for_range(db: Session, start: date, end: date) -> list[Booking]:
        """Bookings with start <= date < end"""
        with upstream_guard(db, f"list bookings between {start} and {end}"):
            return (
                db.query(Booking)
                .filter(Booking.date >= start, Booking.date < end)
                .order_by(Booking.date.asc(), Booking.time_slot.asc())
                .all()
            )

    @staticmethod
    def find_occupying_bookings(
        db: Session, day: date, time_slot: str, exclude_id: Optional[int] = None
    ) -> list[Booking]:
        """Non-cancelled bookings holding (day, time_slot)"""
        with upstream_guard(db, f"check slot {day} {time_slot}"):
            query = db.query(Booking).filter(
                Booking.date == day,
                Booking.time_slot == time_slot,
                Booking.status != BOOKING_STATUS_CANCELLED,
            )
            if exclude_id is not None:
                query = query.filter(Booking.id != exclude_id)
            return query.all()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        with upstream_guard(db, f"load booking {booking_id}"):
            return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def insert_booking(db: Session, **booking_data) -> Booking:
        """Insert a new booking; status is always active, id and created_at come from the database"""
        with upstream_guard(db, "insert booking"):
            booking = Booking(status=BOOKING_STATUS_ACTIVE, **booking_data)
            db.add(booking)
            db.commit()
            db.refresh(booking)
            return booking

    @staticmethod
    def update_booking(db: Session, booking: Booking, **updates) -> Booking:
        """Update a booking with provided fields and stamp updated_at"""
        with upstream_guard(db, f"update booking {booking.id}"):
            for key, value in updates.items():
                if value is not None and hasattr(booking, key):
                    setattr(booking, key, value)
            booking.updated_at = datetime.now(timezone.utc)

            db.commit()
            db.refresh(booking)
            return booking
