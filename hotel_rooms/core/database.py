"""SQLite engine and session factory."""

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from hotel_rooms.core.config import settings


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for the embedded database file at ``url``."""
    return create_engine(url, echo=echo)


def create_session_factory(bind: Engine) -> sessionmaker[Session]:
    """Session factory used by the repository; one short-lived session per call."""
    return sessionmaker(bind=bind, autocommit=False, autoflush=False, expire_on_commit=False)


# Process-wide handle, opened lazily on first use and never explicitly disposed.
engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = create_session_factory(engine)


def check_db_connected(bind: Engine) -> bool:
    """Run a trivial query to verify the database file can be opened."""
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
