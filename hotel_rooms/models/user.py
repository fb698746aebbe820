"""ORM model for registered users."""

from sqlalchemy import Column, Integer, Text

from hotel_rooms.models.base import Base


class User(Base):
    """
    User account for login and registration.

    password is stored and compared verbatim (no hashing).
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True)
    password = Column(Text)
    fullname = Column(Text)
