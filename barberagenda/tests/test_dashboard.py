import importlib
from datetime import date

import pytest

from barberagenda.domain.bookings.repository import BookingRepository
from barberagenda.domain.dashboard.service import DashboardService, month_bounds
from barberagenda.errors import ValidationError


def _seed(db_session, day: date, time_slot: str, status: str = "active") -> None:
    booking = BookingRepository.insert_booking(
        db_session,
        client_name="Cliente",
        client_phone="(11) 98765-4321",
        service_name="Corte Tradicional",
        service_price=50.0,
        date=day,
        time_slot=time_slot,
    )
    if status != "active":
        BookingRepository.update_booking(db_session, booking, status=status)


@pytest.fixture
def june_bookings(db_session):
    _seed(db_session, date(2024, 6, 3), "09:00")
    _seed(db_session, date(2024, 6, 3), "09:30", status="finalized")
    _seed(db_session, date(2024, 6, 3), "10:00", status="cancelled")
    _seed(db_session, date(2024, 6, 5), "09:00")
    _seed(db_session, date(2024, 6, 5), "11:00", status="finalized")
    _seed(db_session, date(2024, 6, 1), "14:00")
    # Outside June
    _seed(db_session, date(2024, 7, 1), "09:00")
    _seed(db_session, date(2024, 5, 31), "09:00")


def test_summary_counts_statuses(db_session, june_bookings) -> None:
    summary = DashboardService(db_session).monthly_summary("2024-06")

    assert summary["month"] == "2024-06"
    assert summary["total"] == 6
    assert summary["active"] == 3
    assert summary["finalized"] == 2
    assert summary["cancelled"] == 1


def test_summary_groups_by_day(db_session, june_bookings) -> None:
    summary = DashboardService(db_session).monthly_summary("2024-06")

    assert summary["by_day"] == [
        {"date": date(2024, 6, 1), "total": 1},
        {"date": date(2024, 6, 3), "total": 3},
        {"date": date(2024, 6, 5), "total": 2},
    ]
    assert [d["date"] for d in summary["top_days"]] == [
        date(2024, 6, 3),
        date(2024, 6, 5),
        date(2024, 6, 1),
    ]


def test_top_days_are_capped_and_ties_stay_chronological(db_session) -> None:
    for day in range(3, 10):
        _seed(db_session, date(2024, 6, day), "09:00")
    _seed(db_session, date(2024, 6, 8), "10:00")

    top_days = DashboardService(db_session).monthly_summary("2024-06")["top_days"]

    assert len(top_days) == 5
    assert [d["date"].day for d in top_days] == [8, 3, 4, 5, 6]


def test_empty_month(db_session) -> None:
    summary = DashboardService(db_session).monthly_summary("2024-02")

    assert summary["total"] == 0
    assert summary["by_day"] == []
    assert summary["top_days"] == []


def test_december_rolls_into_next_year() -> None:
    assert month_bounds("2024-12") == (date(2024, 12, 1), date(2025, 1, 1))


@pytest.mark.parametrize("month", ["2024-13", "2024-6", "junho", ""])
def test_invalid_month_is_rejected(month: str) -> None:
    with pytest.raises(ValidationError):
        month_bounds(month)


def test_summary_endpoint(client, admin_headers, june_bookings) -> None:
    response = client.get("/dashboard/summary", params={"month": "2024-06"}, headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 6
    assert body["top_days"][0] == {"date": "2024-06-03", "total": 3}


def test_summary_endpoint_rejects_bad_month(client, admin_headers) -> None:
    response = client.get("/dashboard/summary", params={"month": "2024-00"}, headers=admin_headers)

    assert response.status_code == 400


def test_summary_defaults_to_current_month(client, admin_headers, monkeypatch) -> None:
    router_module = importlib.import_module("barberagenda.domain.dashboard.router")
    monkeypatch.setattr(router_module, "current_month", lambda: "2024-06")

    response = client.get("/dashboard/summary", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["month"] == "2024-06"


def test_summary_requires_admin(client) -> None:
    assert client.get("/dashboard/summary").status_code == 401
