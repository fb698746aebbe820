"""Schema management: create, seed and migrate the embedded database.

Schema versions map one-to-one onto the Alembic revisions shipped in
``hotel_rooms/migrations/versions``:

  1  users + rooms, seed rows
  2  rooms.amenities
  3  rooms.imageRes

Every migration step inspects the live schema before altering it and only
fills values that are still NULL, so re-running a step, including one that
failed halfway, converges on the same result as a fresh database.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy import Engine, inspect
from sqlalchemy.engine import Connection
from sqlalchemy.orm import Session

from hotel_rooms.core.fixtures import FIXTURE_ROOMS, FIXTURE_USERS
from hotel_rooms.models import Base, Room, User

logger = logging.getLogger(__name__)

# Installed with the package: hotel_rooms/migrations (env.py + versions/).
ALEMBIC_SCRIPT_LOCATION = Path(__file__).resolve().parent.parent / "migrations"

SCHEMA_REVISIONS: dict[int, str] = {
    1: "20260301000000",
    2: "20260305000000",
    3: "20260310000000",
}
CURRENT_SCHEMA_VERSION = max(SCHEMA_REVISIONS)

_VERSIONS_BY_REVISION = {revision: version for version, revision in SCHEMA_REVISIONS.items()}


class SchemaInitializationError(Exception):
    """Raised when the database schema cannot be created or migrated. Fatal at startup."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


def _alembic_config(connection: Connection) -> Config:
    """Programmatic Alembic config that runs on the caller's connection."""
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_SCRIPT_LOCATION))
    config.attributes["connection"] = connection
    return config


def current_version(engine: Engine) -> int | None:
    """Schema version recorded in alembic_version, or None for an unversioned database."""
    with engine.connect() as connection:
        revision = MigrationContext.configure(connection).get_current_revision()
    if revision is None:
        return None
    if revision not in _VERSIONS_BY_REVISION:
        raise SchemaInitializationError(f"Unknown schema revision in database: {revision}")
    return _VERSIONS_BY_REVISION[revision]


def initialize(engine: Engine) -> None:
    """Create both tables at the current version, insert the seed rows and stamp head."""
    try:
        # One transaction: seed rows and the version stamp commit together.
        with engine.begin() as connection:
            Base.metadata.create_all(connection)
            with Session(bind=connection, join_transaction_mode="rollback_only") as session:
                session.add_all([User(**user) for user in FIXTURE_USERS])
                session.add_all([Room(**room) for room in FIXTURE_ROOMS])
                session.flush()
            command.stamp(_alembic_config(connection), SCHEMA_REVISIONS[CURRENT_SCHEMA_VERSION])
    except Exception as e:
        logger.exception("Database initialization failed: %s", e)
        raise SchemaInitializationError("Database initialization failed.", cause=e) from e

    logger.info(
        "Database initialized at schema version %s: users=%s, rooms=%s",
        CURRENT_SCHEMA_VERSION,
        len(FIXTURE_USERS),
        len(FIXTURE_ROOMS),
    )


def migrate(engine: Engine, to_version: int = CURRENT_SCHEMA_VERSION) -> None:
    """Apply the migration steps between the recorded version and ``to_version``. Forward only."""
    if to_version not in SCHEMA_REVISIONS:
        raise ValueError(f"to_version must be one of {sorted(SCHEMA_REVISIONS)}, got {to_version}")

    try:
        from_version = current_version(engine)
        if from_version is not None and from_version >= to_version:
            logger.debug("Schema already at version %s; nothing to migrate", from_version)
            return

        logger.info("Migrating database schema: from_version=%s, to_version=%s", from_version, to_version)
        # engine.begin() commits once the command returns; Alembic joins the open transaction.
        with engine.begin() as connection:
            command.upgrade(_alembic_config(connection), SCHEMA_REVISIONS[to_version])
    except SchemaInitializationError:
        raise
    except Exception as e:
        logger.exception("Database migration failed: %s", e)
        raise SchemaInitializationError(
            f"Database migration to version {to_version} failed.", cause=e
        ) from e


def ensure_schema(engine: Engine) -> int:
    """
    Bring the database file to the current schema; returns the resulting version.

    Empty database: initialize. Anything else, including databases created
    before versioning was recorded or left behind by an interrupted run, goes
    through the idempotent migrations.
    """
    try:
        tables = set(inspect(engine).get_table_names())
    except Exception as e:
        logger.exception("Cannot open database: %s", e)
        raise SchemaInitializationError("Cannot open database.", cause=e) from e

    if not tables & {"users", "rooms"}:
        initialize(engine)
    else:
        if "alembic_version" not in tables:
            logger.info("Unversioned database found; applying all migration steps")
        migrate(engine)

    try:
        version = current_version(engine)
    except SchemaInitializationError:
        raise
    except Exception as e:
        logger.exception("Cannot read schema version: %s", e)
        raise SchemaInitializationError("Cannot read schema version.", cause=e) from e
    return version if version is not None else CURRENT_SCHEMA_VERSION
