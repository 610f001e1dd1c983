from datetime import date, datetime

from sqlalchemy.orm import Session

from hotel_api.core.errors import NotFoundError, ValidationError
from hotel_api.crud import room_types as crud
from hotel_api.schemas.room_type import RoomTypeOut, RoomTypeImageOut, RoomPricingOut

DATE_FORMAT_ERROR = "Invalid date format. Please use YYYY-MM-DD format"


def parse_stay_dates(check_in: str | None, check_out: str | None) -> tuple[date, date]:
    """Parse a YYYY-MM-DD stay window; check-out must fall after check-in."""
    try:
        cin = datetime.strptime(str(check_in), "%Y-%m-%d").date()
        cout = datetime.strptime(str(check_out), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(DATE_FORMAT_ERROR)
    if cin >= cout:
        raise ValidationError("Check-out date must be after check-in date")
    return cin, cout


def validate_party(adults: int, children: int):
    if adults < 1:
        raise ValidationError("At least 1 adult is required")
    if children < 0:
        raise ValidationError("Children count cannot be negative")


def list_room_types(db: Session, offset: int, limit: int) -> tuple[list[dict], int]:
    rows, count = crud.get_room_types(db, offset, limit)
    return [RoomTypeOut.model_validate(r).model_dump() for r in rows], count


def get_room_type(db: Session, room_type_id: int) -> dict:
    rt = crud.get_room_type_by_id(db, room_type_id)
    if not rt:
        raise NotFoundError(f"Room type with ID {room_type_id} not found")
    return RoomTypeOut.model_validate(rt).model_dump()


def get_room_type_images(db: Session, room_type_id: int) -> list[dict]:
    if not crud.get_room_type_by_id(db, room_type_id):
        raise NotFoundError(f"Room type with ID {room_type_id} not found")
    return [RoomTypeImageOut.model_validate(i).model_dump() for i in crud.get_room_type_images(db, room_type_id)]


def check_availability(db: Session, check_in: str | None, check_out: str | None, adults: int, children: int) -> list[dict]:
    """Room types that can hold the party, cheapest first.

    Only capacity is considered; occupied date ranges are not checked.
    """
    if not check_in or not check_out:
        raise ValidationError("Check-in and check-out dates are required")
    cin, _ = parse_stay_dates(check_in, check_out)
    if cin < date.today():
        raise ValidationError("Check-in date cannot be in the past")
    validate_party(adults, children)

    rows = crud.check_availability(db, adults, children)
    return [RoomTypeOut.model_validate(r).model_dump() for r in rows]


def get_room_pricing(db: Session, room_type_id: int | None, check_in: str | None, check_out: str | None,
                     adults: int, children: int) -> dict:
    if not room_type_id or not check_in or not check_out:
        raise ValidationError("Room type ID, check-in, and check-out dates are required")
    parse_stay_dates(check_in, check_out)
    validate_party(adults, children)

    pricing = crud.get_room_pricing(db, room_type_id)
    if pricing is None:
        raise NotFoundError(f"Room type with ID {room_type_id} not found")
    return RoomPricingOut(**pricing).model_dump()
