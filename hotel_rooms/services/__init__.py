"""Data access layer and application facade."""

from hotel_rooms.services.hotel import HotelService
from hotel_rooms.services.repository import HotelRepository, UsernameTakenError

__all__ = ["HotelRepository", "HotelService", "UsernameTakenError"]
