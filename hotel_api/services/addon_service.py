from sqlalchemy.orm import Session

from hotel_api.crud import addons as crud
from hotel_api.schemas.addon import AddonOut


def list_addons(db: Session, offset: int, limit: int) -> tuple[list[dict], int]:
    rows, count = crud.get_addons(db, offset, limit)
    return [AddonOut.model_validate(a).model_dump() for a in rows], count
