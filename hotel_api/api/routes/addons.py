from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hotel_api.api.deps import pagination
from hotel_api.db.session import get_db
from hotel_api.schemas.common import Pagination
from hotel_api.services.addon_service import list_addons
from hotel_api.utils.response import api_response

router = APIRouter(prefix="/addons", tags=["addons"])


@router.get("")
def get_addons(page: Pagination = Depends(pagination), db: Session = Depends(get_db)):
    items, count = list_addons(db, page.offset, page.limit)
    return api_response(data=items, count=count)
