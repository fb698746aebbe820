"""
CLI entrypoint that creates or migrates the database. Run from the project root:

  python -m hotel_rooms.init_db

Safe to run repeatedly; an up-to-date database is left untouched.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import sys

from hotel_rooms.core.config import get_settings
from hotel_rooms.core.database import check_db_connected, engine
from hotel_rooms.core.schema import SchemaInitializationError, ensure_schema

settings = get_settings()

logging.basicConfig(
    level=settings.log_level_value,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Ensure the schema is current and report the resulting version."""
    if not check_db_connected(engine):
        logger.error("Cannot open database: url=%s", engine.url)
        return 1
    try:
        version = ensure_schema(engine)
    except SchemaInitializationError as e:
        logger.error("Database setup failed: %s", e.message)
        return 1
    logger.info("Database setup completed: url=%s, schema_version=%s", engine.url, version)
    return 0


if __name__ == "__main__":
    sys.exit(main())
