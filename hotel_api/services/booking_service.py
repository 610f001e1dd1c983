import logging
import random
import string
from decimal import Decimal

from sqlalchemy.orm import Session

from hotel_api.core.config import settings
from hotel_api.core.errors import ConflictError, NotFoundError, StoreError, ValidationError
from hotel_api.crud import addons as addons_crud
from hotel_api.crud import bookings as crud
from hotel_api.crud import guests as guests_crud
from hotel_api.crud import room_types as room_types_crud
from hotel_api.schemas.booking import (
    BookingCreate,
    BookingDetailsOut,
    BookingOut,
    BookingPatch,
    GuestOut,
)
from hotel_api.schemas.room_type import RoomTypeOut
from hotel_api.services.room_type_service import parse_stay_dates, validate_party

logger = logging.getLogger(__name__)

PNR_ALPHABET = string.ascii_uppercase + string.digits


def make_pnr() -> str:
    return "".join(random.choices(PNR_ALPHABET, k=settings.PNR_LENGTH))


def allocate_pnr(db: Session) -> str:
    """Draw PNRs until one is not in the bookings table.

    Nothing is reserved: two requests can still draw the same code between this
    check and the insert, in which case the unique index rejects the second.
    """
    for _ in range(settings.PNR_MAX_ATTEMPTS):
        pnr = make_pnr()
        if not crud.find_pnr(db, pnr):
            return pnr
    raise ConflictError("Could not allocate a booking reference")


def _validate_create(payload: BookingCreate):
    if not payload.guest.name:
        raise ValidationError("Guest name is required")
    b = payload.booking
    if not (b.room_type_id and b.check_in_date and b.check_out_date and b.adults and b.total_rooms):
        raise ValidationError("Missing required booking information")
    validate_party(b.adults, b.children)
    if b.total_rooms < 1:
        raise ValidationError("At least 1 room is required")
    for line in payload.addons or []:
        if line.addon_id <= 0:
            raise ValidationError(f"Invalid addon ID provided: {line.addon_id}")
        if line.quantity <= 0:
            raise ValidationError(f"Invalid quantity provided for addon ID {line.addon_id}: {line.quantity}")


def _price_addons(db: Session, payload: BookingCreate) -> tuple[list[tuple[int, int, Decimal]], Decimal]:
    lines = payload.addons or []
    if not lines:
        return [], Decimal("0")
    prices = addons_crud.get_active_addon_prices(db, [line.addon_id for line in lines])
    priced = []
    for line in lines:
        if line.addon_id not in prices:
            raise ValidationError(f"Addon with ID {line.addon_id} not found or is inactive")
        priced.append((line.addon_id, line.quantity, prices[line.addon_id]))
    return priced, sum((price * qty for _, qty, price in priced), Decimal("0"))


def create_booking(db: Session, payload: BookingCreate) -> dict:
    """Create a booking with its guest and addon lines in one transaction.

    total_amount = base_price * total_rooms + sum(addon price * quantity), using
    prices as they are now. The stay length does not enter the price.
    """
    _validate_create(payload)
    b = payload.booking
    check_in, check_out = parse_stay_dates(b.check_in_date, b.check_out_date)

    try:
        pnr = allocate_pnr(db)

        guest = guests_crud.find_guest_and_update(db, payload.guest)
        if guest is None:
            guest = guests_crud.create_guest(db, payload.guest)
        if guest is None or not guest.id:
            raise StoreError("Failed to create guest record")

        room_type = room_types_crud.get_room_type_by_id(db, b.room_type_id)
        if not room_type:
            raise NotFoundError(f"Room type with ID {b.room_type_id} not found")
        room_price = Decimal(room_type.base_price)
        room_total = room_price * b.total_rooms

        addon_lines, addon_total = _price_addons(db, payload)

        booking = crud.create_booking(
            db,
            pnr=pnr,
            guest_id=guest.id,
            room_type_id=room_type.id,
            check_in_date=check_in,
            check_out_date=check_out,
            adults=b.adults,
            children=b.children,
            total_rooms=b.total_rooms,
            room_price=room_price,
            total_amount=room_total + addon_total,
            booking_status=b.booking_status,
            booking_source=b.booking_source,
            special_requests=b.special_requests,
        )
        if addon_lines:
            crud.add_booking_addons(db, booking.id, addon_lines)

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Booking %s created for guest %s (room type %s, total %s)", pnr, guest.id, room_type.id, booking.total_amount)
    return {"pnr": pnr, "booking_id": booking.id}


def get_booking_by_pnr(db: Session, pnr: str) -> dict:
    if not pnr:
        raise ValidationError("PNR is required")
    found = crud.get_booking_by_pnr(db, pnr)
    if not found:
        raise NotFoundError(f"No booking found with PNR {pnr}")
    details = BookingOut.model_validate(found["booking"]).model_dump()
    details["guest"] = GuestOut.model_validate(found["guest"]).model_dump()
    details["room_type"] = RoomTypeOut.model_validate(found["room_type"]).model_dump()
    details["addons"] = found["addons"]
    return BookingDetailsOut.model_validate(details).model_dump()


def update_booking(db: Session, pnr: str, patch: BookingPatch) -> dict:
    """Change special_requests and/or booking_status; an empty patch is rejected.

    An explicit null clears special_requests; a null booking_status is dropped.
    """
    if not pnr:
        raise ValidationError("PNR is required")
    changes = patch.model_dump(exclude_unset=True)
    if changes.get("booking_status", "") is None:
        del changes["booking_status"]
    if not changes:
        raise ValidationError("No valid fields to update")

    try:
        booking = crud.update_booking(db, pnr, changes)
        if not booking:
            raise NotFoundError(f"No booking found with PNR {pnr}")
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(booking)
    return BookingOut.model_validate(booking).model_dump()


def cancel_booking(db: Session, pnr: str) -> dict:
    """Mark a booking cancelled. Cancelling an already cancelled booking succeeds again."""
    if not pnr:
        raise ValidationError("PNR is required")
    try:
        if not crud.cancel_booking(db, pnr):
            raise NotFoundError(f"No booking found with PNR {pnr}")
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Booking %s cancelled", pnr)
    return {"success": True}
