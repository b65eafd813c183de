"""Dashboard service - Monthly booking statistics for the admin panel"""

import logging
from collections import Counter
from datetime import date, datetime

from sqlalchemy.orm import Session

from ...errors import ValidationError
from ...models import BOOKING_STATUS_ACTIVE, BOOKING_STATUS_CANCELLED, BOOKING_STATUS_FINALIZED
from ...shared.validators import validate_month
from ..bookings.repository import BookingRepository

logger = logging.getLogger(__name__)

TOP_DAYS_LIMIT = 5


def month_bounds(month: str) -> tuple[date, date]:
    """First day of `month` (YYYY-MM) and first day of the following month"""
    try:
        month = validate_month(month)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    start = datetime.strptime(month, "%Y-%m").date()
    if start.month == 12:
        end = date(start.year + 1, 1, 1)
    else:
        end = date(start.year, start.month + 1, 1)
    return start, end


class DashboardService:
    """Service layer for dashboard statistics"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()

    def monthly_summary(self, month: str) -> dict:
        """Status counts, bookings per day and busiest days for a month"""
        start, end = month_bounds(month)
        bookings = self.repo.list_bookings_for_range(self.db, start, end)

        statuses = Counter(b.status for b in bookings)
        per_day = Counter(b.date for b in bookings)

        by_day = [{"date": day, "total": per_day[day]} for day in sorted(per_day)]
        # Ties keep chronological order
        top_days = sorted(by_day, key=lambda d: -d["total"])[:TOP_DAYS_LIMIT]

        logger.info(f"📊 Dashboard summary for {month}: {len(bookings)} bookings")

        return {
            "month": start.strftime("%Y-%m"),
            "total": len(bookings),
            "active": statuses[BOOKING_STATUS_ACTIVE],
            "finalized": statuses[BOOKING_STATUS_FINALIZED],
            "cancelled": statuses[BOOKING_STATUS_CANCELLED],
            "by_day": by_day,
            "top_days": top_days,
        }
