"""SQLAlchemy ORM models."""

from hotel_rooms.models.base import Base
from hotel_rooms.models.room import Room
from hotel_rooms.models.user import User

__all__ = ["Base", "Room", "User"]
