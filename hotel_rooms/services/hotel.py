"""Application facade consumed by presentation code.

Pass-through to HotelRepository plus two derived queries over the full room
listing. Filtering happens here, not in SQL; the room table is a handful of
seeded rows.
"""

from hotel_rooms.schemas.room import (
    ROOM_AVAILABILITY_FILTERS,
    RoomAvailabilityFilter,
    RoomItem,
)
from hotel_rooms.schemas.user import UserItem
from hotel_rooms.services.repository import HotelRepository


class HotelService:
    """Stateless entry point for login, registration and room browsing."""

    def __init__(self, repository: HotelRepository) -> None:
        self._repository = repository

    def login(self, username: str, password: str) -> UserItem | None:
        return self._repository.authenticate(username, password)

    def register(self, username: str, password: str, fullname: str) -> None:
        """Register a user. Raises UsernameTakenError if the username exists."""
        self._repository.create_user(username, password, fullname)

    def list_all_rooms(self) -> list[RoomItem]:
        return self._repository.list_rooms()

    def get_room(self, room_id: int) -> RoomItem | None:
        return self._repository.get_room(room_id)

    def search_available(self, min_guests: int) -> list[RoomItem]:
        """Available rooms that fit at least ``min_guests`` guests, ascending id."""
        if min_guests < 0:
            raise ValueError("min_guests must be >= 0")
        return [
            room
            for room in self._repository.list_rooms()
            if room.is_available and room.capacity >= min_guests
        ]

    def filter_rooms(self, availability: RoomAvailabilityFilter = "all") -> list[RoomItem]:
        """All rooms, or only the available / unavailable ones, ascending id."""
        if availability not in ROOM_AVAILABILITY_FILTERS:
            raise ValueError(
                f"availability must be one of {sorted(ROOM_AVAILABILITY_FILTERS)}, got {availability!r}"
            )
        rooms = self._repository.list_rooms()
        if availability == "available":
            return [room for room in rooms if room.is_available]
        if availability == "unavailable":
            return [room for room in rooms if not room.is_available]
        return rooms
