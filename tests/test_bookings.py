import re

import pytest

from hotel_api.core.config import settings
from hotel_api.models.booking import Booking, BookingAddon
from hotel_api.models.guest import Guest
from hotel_api.services import booking_service

from conftest import booking_payload

PNR_RE = re.compile(r"^[A-Z0-9]{6}$")


def _create(client, payload):
    r = client.post("/api/bookings", json=payload)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_booking_room_only(client, db, catalog):
    data = _create(client, booking_payload(catalog["deluxe"]))
    assert PNR_RE.match(data["pnr"])

    booking = db.query(Booking).filter(Booking.pnr == data["pnr"]).one()
    assert booking.id == data["booking_id"]
    assert float(booking.total_amount) == 100.0
    assert booking.booking_status == "confirmed"
    assert booking.booking_source == "website"


def test_create_booking_prices_rooms_and_addons(client, db, catalog):
    payload = booking_payload(
        catalog["suite"],
        booking={"total_rooms": 2},
        addons=[{"addon_id": catalog["breakfast"], "quantity": 3}],
    )
    data = _create(client, payload)

    booking = db.query(Booking).filter(Booking.pnr == data["pnr"]).one()
    assert float(booking.room_price) == 250.0
    assert float(booking.total_amount) == 250.0 * 2 + 20.0 * 3
    line = db.query(BookingAddon).filter(BookingAddon.booking_id == booking.id).one()
    assert line.quantity == 3
    assert float(line.unit_price) == 20.0
    assert float(line.total_price) == 60.0


def test_create_booking_rejects_inverted_dates(client, db, catalog):
    payload = booking_payload(catalog["deluxe"], booking={"check_in_date": "2030-05-03", "check_out_date": "2030-05-01"})
    r = client.post("/api/bookings", json=payload)
    assert r.status_code == 400
    assert r.json()["error"] == "Check-out date must be after check-in date"
    assert db.query(Booking).count() == 0


def test_create_booking_rejects_bad_date_format(client, catalog):
    payload = booking_payload(catalog["deluxe"], booking={"check_in_date": "2030/05/01"})
    r = client.post("/api/bookings", json=payload)
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid date format. Please use YYYY-MM-DD format"


def test_create_booking_requires_guest_name(client, catalog):
    r = client.post("/api/bookings", json=booking_payload(catalog["deluxe"], guest={"name": ""}))
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Guest name is required", "error_code": "validation_error"}


def test_create_booking_requires_booking_fields(client, catalog):
    r = client.post("/api/bookings", json=booking_payload(catalog["deluxe"], booking={"adults": 0}))
    assert r.status_code == 400
    assert r.json()["error"] == "Missing required booking information"


def test_inactive_addon_aborts_whole_booking(client, db, catalog):
    payload = booking_payload(
        catalog["deluxe"],
        addons=[{"addon_id": catalog["breakfast"], "quantity": 1}, {"addon_id": catalog["spa"], "quantity": 1}],
    )
    r = client.post("/api/bookings", json=payload)
    assert r.status_code == 400
    assert r.json()["error"] == f"Addon with ID {catalog['spa']} not found or is inactive"
    assert db.query(Booking).count() == 0
    assert db.query(BookingAddon).count() == 0
    assert db.query(Guest).count() == 0


def test_bad_addon_quantity(client, catalog):
    payload = booking_payload(catalog["deluxe"], addons=[{"addon_id": catalog["breakfast"], "quantity": 0}])
    r = client.post("/api/bookings", json=payload)
    assert r.status_code == 400
    assert "Invalid quantity" in r.json()["error"]


def test_unknown_room_type_rolls_back_guest(client, db, catalog):
    r = client.post("/api/bookings", json=booking_payload(catalog["deleted"]))
    assert r.status_code == 404
    assert r.json()["error"] == f"Room type with ID {catalog['deleted']} not found"
    assert db.query(Guest).count() == 0


def test_returning_guest_matched_by_phone_and_updated(client, db, catalog):
    _create(client, booking_payload(catalog["deluxe"]))
    _create(client, booking_payload(catalog["deluxe"], guest={"name": "Ana S. Silva", "email": "ana@new.example.com"}))

    guests = db.query(Guest).all()
    assert len(guests) == 1
    assert guests[0].name == "Ana S. Silva"
    assert guests[0].email == "ana@new.example.com"
    assert db.query(Booking).filter(Booking.guest_id == guests[0].id).count() == 2


def test_returning_guest_matched_by_email(client, db, catalog):
    _create(client, booking_payload(catalog["deluxe"], guest={"phone": None}))
    _create(client, booking_payload(catalog["deluxe"], guest={"phone": None, "address": "Rua Nova 1"}))

    guest = db.query(Guest).one()
    assert guest.address == "Rua Nova 1"


def test_pnr_allocation_gives_up(client, db, catalog, monkeypatch):
    first = _create(client, booking_payload(catalog["deluxe"]))
    monkeypatch.setattr(booking_service, "make_pnr", lambda: first["pnr"])
    monkeypatch.setattr(settings, "PNR_MAX_ATTEMPTS", 3)

    r = client.post("/api/bookings", json=booking_payload(catalog["deluxe"], guest={"phone": "+351900000002"}))
    assert r.status_code == 409
    assert r.json()["error_code"] == "conflict"
    assert db.query(Booking).count() == 1


def test_get_booking_details(client, catalog):
    payload = booking_payload(catalog["deluxe"], addons=[{"addon_id": catalog["breakfast"], "quantity": 2}])
    pnr = _create(client, payload)["pnr"]

    r = client.get(f"/api/bookings/{pnr}")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["pnr"] == pnr
    assert data["check_in_date"] == payload["booking"]["check_in_date"]
    assert data["guest"]["name"] == "Ana Silva"
    assert data["room_type"]["name"] == "Deluxe"
    assert data["addons"] == [
        {
            "id": catalog["breakfast"],
            "name": "Breakfast",
            "description": None,
            "price": 20.0,
            "unit": "person",
            "is_active": True,
            "quantity": 2,
            "unit_price": 20.0,
            "total_price": 40.0,
        }
    ]


def test_get_unknown_booking(client, catalog):
    r = client.get("/api/bookings/ZZZZZZ")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "No booking found with PNR ZZZZZZ", "error_code": "not_found"}


def test_patch_booking(client, db, catalog):
    pnr = _create(client, booking_payload(catalog["deluxe"]))["pnr"]
    r = client.patch(f"/api/bookings/{pnr}", json={"special_requests": "Late arrival", "total_amount": 1})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["special_requests"] == "Late arrival"
    assert data["total_amount"] == 100.0


def test_patch_with_only_disallowed_fields(client, db, catalog):
    pnr = _create(client, booking_payload(catalog["deluxe"]))["pnr"]
    r = client.patch(f"/api/bookings/{pnr}", json={"pnr": "AAAAAA", "total_amount": 1})
    assert r.status_code == 400
    assert r.json()["error"] == "No valid fields to update"

    booking = db.query(Booking).one()
    assert booking.pnr == pnr
    assert float(booking.total_amount) == 100.0


def test_patch_rejects_unknown_status(client, catalog):
    pnr = _create(client, booking_payload(catalog["deluxe"]))["pnr"]
    r = client.patch(f"/api/bookings/{pnr}", json={"booking_status": "pending"})
    assert r.status_code == 400
    assert r.json()["error_code"] == "validation_error"


def test_patch_unknown_booking(client, catalog):
    r = client.patch("/api/bookings/ZZZZZZ", json={"special_requests": "x"})
    assert r.status_code == 404


def test_cancel_booking_twice(client, catalog):
    pnr = _create(client, booking_payload(catalog["deluxe"]))["pnr"]

    for _ in range(2):
        r = client.delete(f"/api/bookings/{pnr}")
        assert r.status_code == 200
        assert r.json() == {"success": True, "data": {"success": True}}

    assert client.get(f"/api/bookings/{pnr}").json()["data"]["booking_status"] == "cancelled"


def test_cancel_unknown_booking(client, catalog):
    r = client.delete("/api/bookings/ZZZZZZ")
    assert r.status_code == 404
    assert r.json()["error"] == "No booking found with PNR ZZZZZZ"


@pytest.mark.parametrize(
    "fields,error",
    [
        ({"adults": -1}, "At least 1 adult is required"),
        ({"children": -3}, "Children count cannot be negative"),
        ({"total_rooms": -2}, "At least 1 room is required"),
    ],
)
def test_create_booking_rejects_bad_party(client, db, catalog, fields, error):
    r = client.post("/api/bookings", json=booking_payload(catalog["deluxe"], booking=fields))
    assert r.status_code == 400
    assert r.json()["error"] == error
    assert db.query(Booking).count() == 0


def test_create_booking_rejects_unknown_status(client, db, catalog):
    r = client.post("/api/bookings", json=booking_payload(catalog["deluxe"], booking={"booking_status": "teleported"}))
    assert r.status_code == 400
    assert r.json()["error_code"] == "validation_error"
    assert db.query(Booking).count() == 0


def test_create_booking_accepts_explicit_status(client, db, catalog):
    data = _create(client, booking_payload(catalog["deluxe"], booking={"booking_status": "cancelled"}))
    assert db.query(Booking).filter(Booking.pnr == data["pnr"]).one().booking_status == "cancelled"


def test_phone_match_wins_over_email(client, db, catalog):
    _create(client, booking_payload(catalog["deluxe"], guest={"phone": "+351900000010", "email": "a@example.com"}))
    _create(client, booking_payload(catalog["deluxe"], guest={"phone": "+351900000020", "email": "b@example.com"}))
    guest_a = db.query(Guest).filter(Guest.phone == "+351900000010").one()

    data = _create(client, booking_payload(catalog["deluxe"], guest={"phone": "+351900000010", "email": "b@example.com"}))

    db.expire_all()
    assert db.query(Guest).count() == 2
    assert db.query(Booking).filter(Booking.pnr == data["pnr"]).one().guest_id == guest_a.id
    assert db.get(Guest, guest_a.id).email == "b@example.com"


def test_guest_without_phone_or_email_is_always_new(client, db, catalog):
    for _ in range(2):
        _create(client, booking_payload(catalog["deluxe"], guest={"phone": None, "email": None}))

    assert db.query(Guest).count() == 2
    assert db.query(Booking).count() == 2


def test_patch_null_clears_special_requests(client, db, catalog):
    pnr = _create(client, booking_payload(catalog["deluxe"], booking={"special_requests": "Quiet room"}))["pnr"]

    r = client.patch(f"/api/bookings/{pnr}", json={"special_requests": None})

    assert r.status_code == 200
    assert r.json()["data"]["special_requests"] is None
    db.expire_all()
    assert db.query(Booking).one().special_requests is None
