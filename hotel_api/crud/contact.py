from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_api.core.errors import handle_db_error
from hotel_api.models.contact_message import ContactMessage


def create_contact_message(db: Session, name: str, email: str, phone: str | None, subject: str, message: str) -> ContactMessage:
    try:
        msg = ContactMessage(name=name, email=email, phone=phone or None, subject=subject, message=message)
        db.add(msg)
        db.flush()
        return msg
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to save contact message")
