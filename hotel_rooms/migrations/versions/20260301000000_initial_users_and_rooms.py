"""Initial users and rooms tables with seed fixtures (schema version 1).

Revision ID: 20260301000000
Revises:
Create Date: 2026-03-01

"""
import logging
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from hotel_rooms.core.fixtures import FIXTURE_ROOMS, FIXTURE_USERS

revision: str = "20260301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

logger = logging.getLogger(__name__)

users = sa.table(
    "users",
    sa.column("username", sa.Text),
    sa.column("password", sa.Text),
    sa.column("fullname", sa.Text),
)
rooms = sa.table(
    "rooms",
    sa.column("number", sa.Text),
    sa.column("capacity", sa.Integer),
    sa.column("price", sa.Float),
    sa.column("description", sa.Text),
    sa.column("isAvailable", sa.Integer),
)


def _is_empty(table: sa.TableClause) -> bool:
    count = op.get_bind().execute(sa.select(sa.func.count()).select_from(table)).scalar_one()
    return count == 0


def upgrade() -> None:
    existing = set(sa.inspect(op.get_bind()).get_table_names())

    if "users" not in existing:
        op.create_table(
            "users",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("username", sa.Text(), nullable=True),
            sa.Column("password", sa.Text(), nullable=True),
            sa.Column("fullname", sa.Text(), nullable=True),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("username"),
        )
    if "rooms" not in existing:
        op.create_table(
            "rooms",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("number", sa.Text(), nullable=True),
            sa.Column("capacity", sa.Integer(), nullable=True),
            sa.Column("price", sa.Float(), nullable=True),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("isAvailable", sa.Integer(), nullable=True),
            sa.PrimaryKeyConstraint("id"),
        )

    # Seed only empty tables; existing rows are never touched.
    if _is_empty(users):
        op.bulk_insert(users, FIXTURE_USERS)
    else:
        logger.info("users already populated; skipping seed")

    if _is_empty(rooms):
        op.bulk_insert(
            rooms,
            [
                {
                    "number": room["number"],
                    "capacity": room["capacity"],
                    "price": room["price"],
                    "description": room["description"],
                    "isAvailable": int(room["is_available"]),
                }
                for room in FIXTURE_ROOMS
            ],
        )
    else:
        logger.info("rooms already populated; skipping seed")


def downgrade() -> None:
    op.drop_table("rooms")
    op.drop_table("users")
