from .room_type import RoomType, RoomTypeImage
from .addon import Addon
from .guest import Guest
from .booking import Booking, BookingAddon, BOOKING_CONFIRMED, BOOKING_CANCELLED
from .contact_message import ContactMessage
from .email_log import EmailLog
