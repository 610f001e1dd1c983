from fastapi import APIRouter
from hotel_api.core.config import settings
from hotel_api.api.routes.room_types import router as room_types_router
from hotel_api.api.routes.addons import router as addons_router
from hotel_api.api.routes.bookings import router as bookings_router
from hotel_api.api.routes.contact import router as contact_router

api_router = APIRouter(prefix=settings.API_PREFIX)
api_router.include_router(room_types_router)
api_router.include_router(addons_router)
api_router.include_router(bookings_router)
api_router.include_router(contact_router)
