"""Application wiring. No business logic; opens the database once and builds the facade."""

import logging

from hotel_rooms.core.config import Settings, get_settings
from hotel_rooms.core.database import create_db_engine, create_session_factory
from hotel_rooms.core.schema import ensure_schema
from hotel_rooms.services.hotel import HotelService
from hotel_rooms.services.repository import HotelRepository

logger = logging.getLogger(__name__)


def build_hotel_service(settings: Settings | None = None) -> HotelService:
    """
    Create the engine, bring the schema up to date and return the facade.

    Raises SchemaInitializationError when the database cannot be created or
    migrated; callers treat that as fatal.
    """
    settings = settings or get_settings()
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    version = ensure_schema(engine)
    logger.info("Database ready: url=%s, schema_version=%s", engine.url, version)
    return HotelService(HotelRepository(create_session_factory(engine)))
