from sqlalchemy.exc import ProgrammingError, OperationalError
from sqlalchemy.orm import Session

from hotel_api.db.session import SessionLocal
from hotel_api.services.email_service import process_pending_emails


def process_email_queue(limit: int = 50, db: Session | None = None) -> dict:
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        try:
            return process_pending_emails(db, limit=limit)
        except (ProgrammingError, OperationalError):
            # DB not migrated yet; don't crash the worker.
            db.rollback()
            return {"skipped": True, "reason": "missing_tables"}
    finally:
        if own_session:
            db.close()
