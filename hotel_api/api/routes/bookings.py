from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hotel_api.db.session import get_db
from hotel_api.schemas.booking import BookingCreate, BookingPatch
from hotel_api.services import booking_service
from hotel_api.utils.response import api_response

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("")
def create_booking(body: BookingCreate, db: Session = Depends(get_db)):
    return api_response(data=booking_service.create_booking(db, body), status_code=201)


@router.get("/{pnr}")
def get_booking(pnr: str, db: Session = Depends(get_db)):
    return api_response(data=booking_service.get_booking_by_pnr(db, pnr))


@router.patch("/{pnr}")
def update_booking(pnr: str, body: BookingPatch, db: Session = Depends(get_db)):
    return api_response(data=booking_service.update_booking(db, pnr, body))


@router.delete("/{pnr}")
def cancel_booking(pnr: str, db: Session = Depends(get_db)):
    return api_response(data=booking_service.cancel_booking(db, pnr))
