"""Declarative base shared by the users and rooms tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base.metadata creates the current schema on a fresh database."""
