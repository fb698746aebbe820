"""Pydantic domain records returned by the data access layer and the facade."""

from hotel_rooms.schemas.room import (
    ROOM_AVAILABILITY_FILTERS,
    RoomAvailabilityFilter,
    RoomItem,
)
from hotel_rooms.schemas.user import UserItem

__all__ = [
    "ROOM_AVAILABILITY_FILTERS",
    "RoomAvailabilityFilter",
    "RoomItem",
    "UserItem",
]
