from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.orm import Session

from hotel_api.core.config import settings
from hotel_api.db.session import SessionLocal
from hotel_api.models.addon import Addon
from hotel_api.models.room_type import RoomType, RoomTypeImage

ROOM_TYPES = [
    # name, description, max_adults, max_children, base_price, images
    ("Deluxe Room", "Garden-facing room with a king bed.", 2, 1, "180.00",
     ["/images/deluxe-1.jpg", "/images/deluxe-2.jpg"]),
    ("Premier Room", "Lake view, separate sitting area.", 3, 1, "260.00",
     ["/images/premier-1.jpg", "/images/premier-2.jpg"]),
    ("Luxury Suite", "Living room, dining area and private terrace.", 4, 2, "520.00",
     ["/images/suite-1.jpg", "/images/suite-2.jpg", "/images/suite-3.jpg"]),
]

ADDONS = [
    # name, description, price, unit
    ("Breakfast", "Buffet breakfast at the main restaurant.", "25.00", "person"),
    ("Airport Transfer", "One-way private car transfer.", "60.00", "trip"),
    ("Spa Session", "60-minute massage.", "90.00", "session"),
    ("Extra Bed", "Rollaway bed for one.", "40.00", "night"),
]


def seed_room_types(db: Session) -> int:
    if db.query(RoomType).first():
        return 0
    for name, description, max_adults, max_children, price, images in ROOM_TYPES:
        rt = RoomType(
            hotel_id=settings.HOTEL_ID,
            name=name,
            description=description,
            max_adults=max_adults,
            max_children=max_children,
            base_price=Decimal(price),
            main_image_url=images[0],
        )
        db.add(rt)
        db.flush()
        for order, url in enumerate(images):
            db.add(RoomTypeImage(room_type_id=rt.id, image_url=url, alt_text=name, display_order=order))
    db.commit()
    return len(ROOM_TYPES)


def seed_addons(db: Session) -> int:
    if db.query(Addon).first():
        return 0
    for name, description, price, unit in ADDONS:
        db.add(Addon(name=name, description=description, price=Decimal(price), unit=unit, is_active=True))
    db.commit()
    return len(ADDONS)


def run(db=None):
    if db is None:
        db = SessionLocal()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM room_types LIMIT 1"))
        except (ProgrammingError, OperationalError):
            db.rollback()
            print("[seed] room_types table not found yet. Skipping seeding (run alembic upgrade head).")
            return
        seed_room_types(db)
        seed_addons(db)
    finally:
        db.close()


if __name__ == "__main__":
    run()
