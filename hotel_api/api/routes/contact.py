from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hotel_api.db.session import get_db
from hotel_api.schemas.contact import ContactIn
from hotel_api.services.contact_service import submit_contact_form
from hotel_api.utils.response import api_response

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("")
def submit_contact(body: ContactIn, db: Session = Depends(get_db)):
    return api_response(data=submit_contact_form(db, body))
