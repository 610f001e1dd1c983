from fastapi import Query

from hotel_api.core.config import settings
from hotel_api.schemas.common import Pagination


def pagination(offset: int = Query(0), limit: int | None = Query(None)) -> Pagination:
    """offset >= 0; limit defaults to DEFAULT_LIMIT and is clamped to [1, MAX_LIMIT]."""
    if limit is None:
        limit = settings.DEFAULT_LIMIT
    return Pagination(offset=max(0, offset), limit=min(settings.MAX_LIMIT, max(1, limit)))
