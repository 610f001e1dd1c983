from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_api.core.errors import handle_db_error
from hotel_api.models.addon import Addon
from hotel_api.models.booking import Booking, BookingAddon, BOOKING_CONFIRMED, BOOKING_CANCELLED
from hotel_api.models.guest import Guest
from hotel_api.models.room_type import RoomType


def find_pnr(db: Session, pnr: str) -> bool:
    try:
        return db.execute(select(Booking.id).where(Booking.pnr == pnr).limit(1)).first() is not None
    except SQLAlchemyError as e:
        handle_db_error(e, f"Failed to check if PNR {pnr} exists")


def create_booking(
    db: Session,
    *,
    pnr: str,
    guest_id: int,
    room_type_id: int,
    check_in_date: date,
    check_out_date: date,
    adults: int,
    children: int,
    total_rooms: int,
    room_price: Decimal,
    total_amount: Decimal,
    booking_status: str | None = None,
    booking_source: str | None = None,
    special_requests: str | None = None,
) -> Booking:
    try:
        booking = Booking(
            pnr=pnr,
            guest_id=guest_id,
            room_type_id=room_type_id,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
            adults=adults,
            children=children or 0,
            total_rooms=total_rooms,
            room_price=room_price,
            total_amount=total_amount,
            booking_status=booking_status or BOOKING_CONFIRMED,
            booking_source=booking_source or "website",
            special_requests=special_requests or None,
        )
        db.add(booking)
        db.flush()
        return booking
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to create booking")


def add_booking_addons(db: Session, booking_id: int, lines: list[tuple[int, int, Decimal]]) -> list[BookingAddon]:
    """Insert one row per (addon_id, quantity, unit_price) line, each with its own price snapshot."""
    added_at = datetime.now(timezone.utc)
    try:
        rows = [
            BookingAddon(
                booking_id=booking_id,
                addon_id=addon_id,
                quantity=quantity,
                unit_price=unit_price,
                total_price=unit_price * quantity,
                added_at=added_at,
            )
            for addon_id, quantity, unit_price in lines
        ]
        db.add_all(rows)
        db.flush()
        return rows
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to add booking addons")


def get_booking_by_pnr(db: Session, pnr: str) -> dict | None:
    """Booking with its guest, room type and addon lines.

    Inner joins: a booking whose guest or room type row is gone is not returned.
    """
    try:
        row = db.execute(
            select(Booking, Guest, RoomType)
            .join(Guest, Booking.guest_id == Guest.id)
            .join(RoomType, Booking.room_type_id == RoomType.id)
            .where(Booking.pnr == pnr)
        ).first()
        if row is None:
            return None
        booking, guest, room_type = row

        addon_rows = db.execute(
            select(BookingAddon, Addon)
            .join(Addon, BookingAddon.addon_id == Addon.id)
            .where(BookingAddon.booking_id == booking.id)
            .order_by(BookingAddon.id.asc())
        ).all()
    except SQLAlchemyError as e:
        handle_db_error(e, f"Failed to fetch booking with PNR {pnr}")

    return {
        "booking": booking,
        "guest": guest,
        "room_type": room_type,
        "addons": [
            {
                "id": a.id,
                "name": a.name,
                "description": a.description,
                "price": a.price,
                "unit": a.unit,
                "is_active": a.is_active,
                "quantity": ba.quantity,
                "unit_price": ba.unit_price,
                "total_price": ba.total_price,
            }
            for ba, a in addon_rows
        ],
    }


def update_booking(db: Session, pnr: str, changes: dict) -> Booking | None:
    """Apply already-filtered changes; returns None when the PNR does not exist."""
    try:
        booking = db.query(Booking).filter(Booking.pnr == pnr).first()
        if not booking:
            return None
        for field, value in changes.items():
            setattr(booking, field, value)
        booking.updated_at = datetime.now(timezone.utc)
        db.flush()
        return booking
    except SQLAlchemyError as e:
        handle_db_error(e, f"Failed to update booking with PNR {pnr}")


def cancel_booking(db: Session, pnr: str) -> bool:
    try:
        result = db.query(Booking).filter(Booking.pnr == pnr).update(
            {Booking.booking_status: BOOKING_CANCELLED, Booking.updated_at: datetime.now(timezone.utc)},
            synchronize_session=False,
        )
        return bool(result)
    except SQLAlchemyError as e:
        handle_db_error(e, f"Failed to cancel booking with PNR {pnr}")
