from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_api.core.errors import handle_db_error
from hotel_api.models.guest import Guest
from hotel_api.schemas.booking import GuestIn

# Fields refreshed on a returning guest when the new booking carries a different value.
_MUTABLE_GUEST_FIELDS = ("name", "email", "address", "id_proof_type", "id_proof_number", "date_of_birth")


def find_guest_and_update(db: Session, data: GuestIn) -> Guest | None:
    """Find a returning guest by phone, then by email, and refresh their details.

    Returns None when neither phone nor email is given or nobody matches; the
    caller then creates a new guest. Only fields that are provided and differ
    from the stored value are written, in a single UPDATE at flush time.
    """
    if not data.phone and not data.email:
        return None
    try:
        guest = None
        if data.phone:
            guest = db.query(Guest).filter(Guest.phone == data.phone).first()
        if guest is None and data.email:
            guest = db.query(Guest).filter(Guest.email == data.email).first()
        if guest is None:
            return None

        changed = False
        for field in _MUTABLE_GUEST_FIELDS:
            value = getattr(data, field)
            if value and value != getattr(guest, field):
                setattr(guest, field, value)
                changed = True
        if changed:
            db.flush()
        return guest
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to find or update guest with provided information")


def create_guest(db: Session, data: GuestIn) -> Guest:
    try:
        guest = Guest(
            name=data.name,
            email=data.email or None,
            phone=data.phone or None,
            address=data.address or None,
            id_proof_type=data.id_proof_type or None,
            id_proof_number=data.id_proof_number or None,
            date_of_birth=data.date_of_birth or None,
        )
        db.add(guest)
        db.flush()
        return guest
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to create guest")
