"""End-to-end booking flow through the HTTP API"""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

MONDAY = "2024-06-03"
SUNDAY = "2024-06-02"


def _booking(time_slot: str, day: str = MONDAY, **overrides) -> dict:
    payload = {
        "client_name": "João Silva",
        "client_phone": "(11) 98765-4321",
        "service_name": "Corte Tradicional",
        "date": day,
        "time_slot": time_slot,
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def _config(short_day_config):
    return short_day_config


def test_availability_for_open_day_without_bookings(client) -> None:
    response = client.get(f"/bookings/availability/{MONDAY}")

    assert response.status_code == 200
    body = response.json()
    assert body["open"] is True
    assert [s["slot"] for s in body["slots"]] == ["09:00", "09:30", "10:00", "10:30", "11:00"]
    assert not any(s["occupied"] for s in body["slots"])


def test_booked_slot_is_marked_and_rejected(client) -> None:
    created = client.post("/bookings", json=_booking("10:00"))
    assert created.status_code == 201
    assert created.json()["status"] == "active"

    slots = client.get(f"/bookings/availability/{MONDAY}").json()["slots"]
    assert [s["slot"] for s in slots if s["occupied"]] == ["10:00"]

    conflict = client.post("/bookings", json=_booking("10:00", client_name="Pedro"))
    assert conflict.status_code == 409
    assert "already taken" in conflict.json()["detail"]

    other = client.post("/bookings", json=_booking("10:30", client_name="Pedro"))
    assert other.status_code == 201


def test_occupied_endpoint_lists_taken_slots(client) -> None:
    client.post("/bookings", json=_booking("11:00"))
    client.post("/bookings", json=_booking("09:00"))

    response = client.get(f"/bookings/occupied/{MONDAY}")

    assert response.status_code == 200
    assert response.json() == {"date": MONDAY, "occupied_slots": ["09:00", "11:00"]}


def test_cancelled_booking_frees_its_slot(client, admin_headers) -> None:
    booking_id = client.post("/bookings", json=_booking("09:30")).json()["id"]

    cancelled = client.post(f"/bookings/{booking_id}/cancel", headers=admin_headers)
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelled"

    slots = client.get(f"/bookings/availability/{MONDAY}").json()["slots"]
    assert not any(s["occupied"] for s in slots)
    assert client.post("/bookings", json=_booking("09:30")).status_code == 201


def test_closed_day_has_no_slots_and_rejects_bookings(client) -> None:
    availability = client.get(f"/bookings/availability/{SUNDAY}").json()
    assert availability == {"date": SUNDAY, "open": False, "slots": []}

    response = client.post("/bookings", json=_booking("10:00", day=SUNDAY))
    assert response.status_code == 400
    assert "closed" in response.json()["detail"]


def test_missing_fields_are_listed(client) -> None:
    response = client.post("/bookings", json={"client_name": "João", "date": MONDAY})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert "client_phone" in detail
    assert "service_name" in detail
    assert "time_slot" in detail


def test_blank_name_counts_as_missing(client) -> None:
    response = client.post("/bookings", json=_booking("10:00", client_name="   "))

    assert response.status_code == 400
    assert "client_name" in response.json()["detail"]


def test_slot_off_the_grid_is_rejected(client) -> None:
    response = client.post("/bookings", json=_booking("10:15"))

    assert response.status_code == 400
    assert "not a bookable time slot" in response.json()["detail"]


def test_unknown_service_is_rejected(client) -> None:
    response = client.post("/bookings", json=_booking("10:00", service_name="Massagem"))

    assert response.status_code == 400


def test_price_comes_from_catalog(client) -> None:
    response = client.post("/bookings", json=_booking("10:00", service_name="corte + barba"))

    assert response.status_code == 201
    body = response.json()
    assert body["service_name"] == "Corte + Barba"
    assert body["service_price"] == 95.0


def test_phone_is_normalized(client) -> None:
    response = client.post("/bookings", json=_booking("10:00", client_phone="+55 11 987654321"))

    assert response.status_code == 201
    assert response.json()["client_phone"] == "(11) 98765-4321"


def test_malformed_phone_fails_validation(client) -> None:
    response = client.post("/bookings", json=_booking("10:00", client_phone="12345"))

    assert response.status_code == 422


def test_admin_lists_bookings_newest_first(client, admin_headers) -> None:
    first = client.post("/bookings", json=_booking("09:00")).json()
    second = client.post("/bookings", json=_booking("09:30")).json()

    response = client.get("/bookings", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [b["id"] for b in body["bookings"]] == [second["id"], first["id"]]


def test_admin_edit_moves_booking_and_stamps_update(client, admin_headers) -> None:
    booking = client.post("/bookings", json=_booking("09:00")).json()
    assert booking["updated_at"] is None

    response = client.patch(
        f"/bookings/{booking['id']}",
        json={"time_slot": "10:30", "client_name": "João S."},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["time_slot"] == "10:30"
    assert body["client_name"] == "João S."
    assert body["updated_at"] is not None


def test_admin_edit_onto_taken_slot_conflicts(client, admin_headers) -> None:
    booking = client.post("/bookings", json=_booking("09:00")).json()
    client.post("/bookings", json=_booking("10:00"))

    response = client.patch(
        f"/bookings/{booking['id']}", json={"time_slot": "10:00"}, headers=admin_headers
    )

    assert response.status_code == 409


def test_finalize_then_cancel_is_rejected(client, admin_headers) -> None:
    booking_id = client.post("/bookings", json=_booking("09:00")).json()["id"]

    finalized = client.post(f"/bookings/{booking_id}/finalize", headers=admin_headers)
    assert finalized.status_code == 200
    assert finalized.json()["status"] == "finalized"

    response = client.post(f"/bookings/{booking_id}/cancel", headers=admin_headers)
    assert response.status_code == 400


def test_unknown_booking_is_404(client, admin_headers) -> None:
    assert client.get("/bookings/999", headers=admin_headers).status_code == 404


def test_admin_routes_require_token(client) -> None:
    booking_id = client.post("/bookings", json=_booking("09:00")).json()["id"]

    assert client.get("/bookings").status_code == 401
    assert client.post(f"/bookings/{booking_id}/cancel").status_code == 401
    assert client.patch(f"/bookings/{booking_id}", json={"client_name": "X"}).status_code == 401


def test_database_failure_returns_503(client, monkeypatch) -> None:
    def broken_commit(self):
        raise OperationalError("INSERT INTO bookings", {}, Exception("database is locked"))

    monkeypatch.setattr(Session, "commit", broken_commit)

    response = client.post("/bookings", json=_booking("09:00"))

    assert response.status_code == 503
    assert response.json()["detail"] == "Could not reach the booking store. Please try again."


def test_admin_edit_to_unknown_service_is_rejected(client, admin_headers) -> None:
    booking_id = client.post("/bookings", json=_booking("09:00")).json()["id"]

    response = client.patch(
        f"/bookings/{booking_id}", json={"service_name": "Massagem"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert client.get(f"/bookings/{booking_id}", headers=admin_headers).json()["service_name"] == (
        "Corte Tradicional"
    )
