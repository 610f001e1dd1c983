import logging
import re

from sqlalchemy.orm import Session

from hotel_api.core.config import settings
from hotel_api.core.errors import ValidationError
from hotel_api.crud.contact import create_contact_message
from hotel_api.schemas.contact import ContactIn
from hotel_api.services.email_service import queue_email

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
THANK_YOU = "Thank you for your inquiry. We will get back to you soon."


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def submit_contact_form(db: Session, form: ContactIn) -> dict:
    name = (form.name or "").strip()
    email = (form.email or "").strip()
    subject = (form.subject or "").strip()
    message = (form.message or "").strip()

    if not name:
        raise ValidationError("Name is required")
    if not email:
        raise ValidationError("Email is required")
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
    if not subject:
        raise ValidationError("Subject is required")
    if not message:
        raise ValidationError("Message is required")

    try:
        msg = create_contact_message(db, name, email, (form.phone or "").strip(), subject, message)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Contact form submitted by %s <%s>: %s", name, email, subject)

    if settings.CONTACT_NOTIFY_EMAIL:
        body = (
            f"New contact form message\n\n"
            f"From: {name} <{email}>\n"
            f"Phone: {form.phone or '-'}\n"
            f"Subject: {subject}\n\n"
            f"{message}\n"
        )
        queue_email(db, settings.CONTACT_NOTIFY_EMAIL, f"[Contact] {subject}", body, related_contact_id=msg.id)

    return {"message": THANK_YOU}
