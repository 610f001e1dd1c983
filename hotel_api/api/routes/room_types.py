from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hotel_api.api.deps import pagination
from hotel_api.core.errors import ValidationError
from hotel_api.db.session import get_db
from hotel_api.schemas.common import Pagination
from hotel_api.services import room_type_service
from hotel_api.utils.response import api_response

router = APIRouter(prefix="/room-types", tags=["room-types"])


def _room_type_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError("Invalid room type ID")
    if value <= 0:
        raise ValidationError("Invalid room type ID")
    return value


@router.get("")
def list_room_types(page: Pagination = Depends(pagination), db: Session = Depends(get_db)):
    items, count = room_type_service.list_room_types(db, page.offset, page.limit)
    return api_response(data=items, count=count)


# Static paths must be declared before /{room_type_id}
@router.get("/availability")
def check_availability(
    check_in: Optional[str] = None,
    check_out: Optional[str] = None,
    adults: int = 1,
    children: int = 0,
    db: Session = Depends(get_db),
):
    """Room types whose capacity fits the party, cheapest first."""
    items = room_type_service.check_availability(db, check_in, check_out, max(1, adults), max(0, children))
    return api_response(data=items, count=len(items))


@router.get("/pricing")
def get_room_pricing(
    room_type_id: Optional[int] = None,
    check_in: Optional[str] = None,
    check_out: Optional[str] = None,
    adults: int = 1,
    children: int = 0,
    db: Session = Depends(get_db),
):
    pricing = room_type_service.get_room_pricing(db, room_type_id, check_in, check_out, max(1, adults), max(0, children))
    return api_response(data=pricing)


@router.get("/{room_type_id}/images")
def get_room_type_images(room_type_id: str, db: Session = Depends(get_db)):
    images = room_type_service.get_room_type_images(db, _room_type_id(room_type_id))
    return api_response(data=images, count=len(images))


@router.get("/{room_type_id}")
def get_room_type(room_type_id: str, db: Session = Depends(get_db)):
    return api_response(data=room_type_service.get_room_type(db, _room_type_id(room_type_id)))
