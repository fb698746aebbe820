"""ORM model for hotel rooms."""

from sqlalchemy import Boolean, Column, Float, Integer, Text

from hotel_rooms.models.base import Base


class Room(Base):
    """
    Bookable hotel room. All rows come from the seed fixtures.

    Column names on disk keep the camelCase of databases created by the mobile
    app (isAvailable, imageRes); attributes are snake_case.
    """

    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(Text)
    capacity = Column(Integer)
    price = Column(Float)
    description = Column(Text, nullable=True)
    is_available = Column("isAvailable", Boolean)
    # Schema version 2
    amenities = Column(Text, nullable=True)
    # Schema version 3
    image_res = Column("imageRes", Text)
