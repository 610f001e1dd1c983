import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from hotel_api.core.errors import ConflictError, StoreError, handle_db_error


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unknown_route(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Not Found"}


def test_bad_query_type(client, catalog):
    r = client.get("/api/room-types/availability?check_in=2030-01-01&check_out=2030-01-02&adults=two")
    assert r.status_code == 400
    assert r.json()["error_code"] == "validation_error"
    assert r.json()["error"].startswith("Invalid request data")


def test_cors_allowed_origin(client, catalog):
    r = client.get("/api/addons", headers={"Origin": "http://localhost:5173"})
    assert r.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_preflight(client):
    r = client.options(
        "/api/bookings",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert "POST" in r.headers["access-control-allow-methods"]


def test_unhandled_error_is_enveloped(client, monkeypatch):
    def broken(db, offset, limit):
        raise RuntimeError("kaboom")

    monkeypatch.setattr("hotel_api.api.routes.addons.list_addons", broken)

    r = client.get("/api/addons")
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Internal Server Error"}


def test_store_error_hides_driver_text(client, monkeypatch):
    def broken(db, offset, limit):
        handle_db_error(OperationalError("SELECT", {}, Exception("disk I/O error")), "Failed to fetch addons")

    monkeypatch.setattr("hotel_api.api.routes.addons.list_addons", broken)

    r = client.get("/api/addons")
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Failed to fetch addons", "error_code": "store_error"}


def test_handle_db_error_kinds():
    with pytest.raises(ConflictError):
        handle_db_error(IntegrityError("INSERT", {}, Exception("duplicate")), "dup")
    with pytest.raises(StoreError):
        handle_db_error(OperationalError("SELECT", {}, Exception("gone")), "gone")
