"""Bookings domain - public reservations and admin booking management"""

from .router import router
from .service import BookingService

__all__ = ["router", "BookingService"]
