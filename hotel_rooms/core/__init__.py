"""Core app configuration, database handle and schema management."""

from hotel_rooms.core.config import get_settings, settings
from hotel_rooms.core.database import SessionLocal, engine

__all__ = ["get_settings", "settings", "SessionLocal", "engine"]
