from pydantic import BaseModel, ConfigDict
from typing import Optional

class RoomTypeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hotel_id: int
    name: str
    description: Optional[str] = None
    max_adults: int
    max_children: int
    base_price: float
    main_image_url: Optional[str] = None
    is_deleted: bool = False

class RoomTypeImageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    room_type_id: int
    image_url: str
    alt_text: Optional[str] = None
    display_order: int

class RoomPricingOut(BaseModel):
    base_price: float
    total_price: float
