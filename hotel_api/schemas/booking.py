from datetime import date, datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Literal, Optional

from hotel_api.schemas.addon import AddonOut
from hotel_api.schemas.room_type import RoomTypeOut

# Request fields are loose on purpose: presence and date checks happen in the
# booking service so every failure comes back in the same envelope.

class GuestIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    id_proof_type: Optional[str] = None
    id_proof_number: Optional[str] = None
    date_of_birth: Optional[str] = None

class BookingIn(BaseModel):
    room_type_id: Optional[int] = None
    check_in_date: Optional[str] = None
    check_out_date: Optional[str] = None
    adults: Optional[int] = None
    children: int = 0
    total_rooms: Optional[int] = None
    booking_status: Optional[Literal["confirmed", "cancelled"]] = None
    booking_source: Optional[str] = None
    special_requests: Optional[str] = None

class AddonLineIn(BaseModel):
    addon_id: int
    quantity: int = 1

class BookingCreate(BaseModel):
    guest: GuestIn = GuestIn()
    booking: BookingIn = BookingIn()
    addons: Optional[List[AddonLineIn]] = None

class BookingPatch(BaseModel):
    """The only booking fields a client may change after creation; anything else is dropped."""
    model_config = ConfigDict(extra="ignore")

    special_requests: Optional[str] = None
    booking_status: Optional[Literal["confirmed", "cancelled"]] = None

class BookingCreatedOut(BaseModel):
    pnr: str
    booking_id: int

class GuestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    id_proof_type: Optional[str] = None
    id_proof_number: Optional[str] = None
    date_of_birth: Optional[str] = None

class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    pnr: str
    guest_id: int
    room_type_id: int
    check_in_date: date
    check_out_date: date
    adults: int
    children: int
    total_rooms: int
    room_price: float
    total_amount: float
    booking_status: str
    booking_source: str
    special_requests: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class BookingAddonOut(AddonOut):
    quantity: int
    unit_price: float
    total_price: float

class BookingDetailsOut(BookingOut):
    guest: GuestOut
    room_type: RoomTypeOut
    addons: List[BookingAddonOut] = []
