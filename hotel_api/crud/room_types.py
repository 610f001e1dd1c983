from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_api.core.errors import handle_db_error
from hotel_api.models.room_type import RoomType, RoomTypeImage


def _live(db: Session):
    return db.query(RoomType).filter(RoomType.is_deleted == False)  # noqa: E712


def get_room_types(db: Session, offset: int = 0, limit: int = 10) -> tuple[list[RoomType], int]:
    try:
        rows = _live(db).order_by(RoomType.id.asc()).limit(limit).offset(offset).all()
        count = db.query(func.count(RoomType.id)).filter(RoomType.is_deleted == False).scalar()  # noqa: E712
        return rows, int(count or 0)
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to fetch room types")


def get_room_type_by_id(db: Session, room_type_id: int) -> RoomType | None:
    try:
        return _live(db).filter(RoomType.id == room_type_id).first()
    except SQLAlchemyError as e:
        handle_db_error(e, f"Failed to fetch room type with id {room_type_id}")


def get_room_type_images(db: Session, room_type_id: int) -> list[RoomTypeImage]:
    try:
        return (
            db.query(RoomTypeImage)
            .filter(RoomTypeImage.room_type_id == room_type_id)
            .order_by(RoomTypeImage.display_order.asc(), RoomTypeImage.id.asc())
            .all()
        )
    except SQLAlchemyError as e:
        handle_db_error(e, f"Failed to fetch images for room type with id {room_type_id}")


def check_availability(db: Session, adults: int, children: int) -> list[RoomType]:
    # Capacity filter only; existing bookings are not consulted for the date range.
    try:
        return (
            _live(db)
            .filter(RoomType.max_adults >= adults, RoomType.max_children >= children)
            .order_by(RoomType.base_price.asc())
            .all()
        )
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to check availability")


def get_room_pricing(db: Session, room_type_id: int) -> dict | None:
    """Quote for a room type. total_price is the base price until dynamic pricing exists."""
    try:
        rt = _live(db).filter(RoomType.id == room_type_id).first()
    except SQLAlchemyError as e:
        handle_db_error(e, f"Failed to get pricing for room type with id {room_type_id}")
    if not rt:
        return None
    return {"base_price": rt.base_price, "total_price": rt.base_price}
