"""Dashboard router - admin statistics endpoints"""

import datetime as dt
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...shared.validators import current_month
from .service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


class DayCount(BaseModel):
    date: dt.date
    total: int


class MonthlySummaryResponse(BaseModel):
    month: str
    total: int
    active: int
    finalized: int
    cancelled: int
    by_day: list[DayCount]
    top_days: list[DayCount]


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardService:
    """Dependency injection for DashboardService"""
    return DashboardService(db)


@router.get("/summary", response_model=MonthlySummaryResponse)
async def get_monthly_summary(
    month: Optional[str] = Query(None, description="Month as YYYY-MM, defaults to the current month"),
    _admin: dict = Depends(require_admin),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.monthly_summary(month or current_month())
