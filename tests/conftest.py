import os

# Settings are read at import time; point the app at a throwaway database first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CONTACT_NOTIFY_EMAIL"] = ""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import hotel_api.models  # noqa: F401
from hotel_api.db.session import Base, get_db
from hotel_api.main import app
from hotel_api.models.addon import Addon
from hotel_api.models.room_type import RoomType, RoomTypeImage

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(db):
    """Two bookable room types, one soft-deleted, one active and one retired addon."""
    deluxe = RoomType(name="Deluxe", max_adults=2, max_children=1, base_price=Decimal("100.00"))
    suite = RoomType(name="Suite", max_adults=4, max_children=2, base_price=Decimal("250.00"))
    gone = RoomType(name="Old Wing", max_adults=6, max_children=6, base_price=Decimal("10.00"), is_deleted=True)
    breakfast = Addon(name="Breakfast", price=Decimal("20.00"), unit="person")
    spa = Addon(name="Spa", price=Decimal("50.00"), unit="session", is_active=False)
    db.add_all([deluxe, suite, gone, breakfast, spa])
    db.flush()
    db.add_all([
        RoomTypeImage(room_type_id=deluxe.id, image_url="/img/c.jpg", display_order=2),
        RoomTypeImage(room_type_id=deluxe.id, image_url="/img/a.jpg", display_order=0),
        RoomTypeImage(room_type_id=deluxe.id, image_url="/img/b.jpg", display_order=1),
    ])
    db.commit()
    return {
        "deluxe": deluxe.id,
        "suite": suite.id,
        "deleted": gone.id,
        "breakfast": breakfast.id,
        "spa": spa.id,
    }


def stay(days_ahead: int = 10, nights: int = 2) -> tuple[str, str]:
    cin = date.today() + timedelta(days=days_ahead)
    return cin.isoformat(), (cin + timedelta(days=nights)).isoformat()


def booking_payload(room_type_id: int, **overrides) -> dict:
    cin, cout = stay()
    guest = {"name": "Ana Silva", "email": "ana@example.com", "phone": "+351900000001"}
    guest.update(overrides.pop("guest", {}))
    booking = {
        "room_type_id": room_type_id,
        "check_in_date": cin,
        "check_out_date": cout,
        "adults": 2,
        "children": 0,
        "total_rooms": 1,
    }
    booking.update(overrides.pop("booking", {}))
    payload = {"guest": guest, "booking": booking}
    payload.update(overrides)
    return payload
