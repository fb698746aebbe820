"""Data access layer: typed queries over the users and rooms tables.

Each method opens its own session and closes it before returning.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from hotel_rooms.models import Room, User
from hotel_rooms.schemas.room import RoomItem
from hotel_rooms.schemas.user import UserItem

logger = logging.getLogger(__name__)


class UsernameTakenError(Exception):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str) -> None:
        self.username = username
        self.message = f"Username '{username}' is already taken."
        super().__init__(self.message)


class HotelRepository:
    """Queries for authentication, registration and room lookup."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def authenticate(self, username: str, password: str) -> UserItem | None:
        """Return the user whose username and password both match exactly, else None."""
        with self._session_factory() as db:
            user = (
                db.query(User)
                .filter(User.username == username, User.password == password)
                .order_by(User.id)
                .first()
            )
            return UserItem.model_validate(user) if user is not None else None

    def create_user(self, username: str, password: str, fullname: str) -> None:
        """Insert a new user. Raises UsernameTakenError on a duplicate username."""
        with self._session_factory() as db:
            db.add(User(username=username, password=password, fullname=fullname))
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                logger.warning("Registration rejected, username exists: username=%s", username)
                raise UsernameTakenError(username) from e
        logger.info("User registered: username=%s", username)

    def list_rooms(self) -> list[RoomItem]:
        """All rooms, ascending id."""
        with self._session_factory() as db:
            rooms = db.query(Room).order_by(Room.id).all()
            return [RoomItem.model_validate(room) for room in rooms]

    def get_room(self, room_id: int) -> RoomItem | None:
        with self._session_factory() as db:
            room = db.get(Room, room_id)
            return RoomItem.model_validate(room) if room is not None else None
