from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_api.core.errors import handle_db_error
from hotel_api.models.addon import Addon


def get_addons(db: Session, offset: int = 0, limit: int = 10) -> tuple[list[Addon], int]:
    try:
        q = db.query(Addon).filter(Addon.is_active == True)  # noqa: E712
        rows = q.order_by(Addon.id.asc()).limit(limit).offset(offset).all()
        count = db.query(func.count(Addon.id)).filter(Addon.is_active == True).scalar()  # noqa: E712
        return rows, int(count or 0)
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to fetch addons")


def get_active_addon_prices(db: Session, addon_ids: list[int]) -> dict[int, Decimal]:
    """Map addon id -> current price for the ids that exist and are active."""
    if not addon_ids:
        return {}
    try:
        rows = db.execute(
            select(Addon.id, Addon.price).where(Addon.id.in_(set(addon_ids)), Addon.is_active == True)  # noqa: E712
        ).all()
        return {int(r.id): Decimal(r.price) for r in rows}
    except SQLAlchemyError as e:
        handle_db_error(e, "Failed to fetch addon prices")
