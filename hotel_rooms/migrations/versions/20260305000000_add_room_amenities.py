"""Add rooms.amenities and backfill the seed rooms by row id (schema version 2).

Revision ID: 20260305000000
Revises: 20260301000000
Create Date: 2026-03-05

"""
import logging
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from hotel_rooms.core.fixtures import amenities_by_room_id

revision: str = "20260305000000"
down_revision: Union[str, None] = "20260301000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

logger = logging.getLogger(__name__)

rooms = sa.table("rooms", sa.column("id", sa.Integer), sa.column("amenities", sa.Text))


def upgrade() -> None:
    columns = {c["name"] for c in sa.inspect(op.get_bind()).get_columns("rooms")}
    if "amenities" in columns:
        logger.info("rooms.amenities already present; skipping add_column")
    else:
        op.add_column("rooms", sa.Column("amenities", sa.Text(), nullable=True))

    # SQLite commits the ALTER on its own, so a failed run can leave the column
    # without values. Fill only NULLs: completes such a run, keeps existing data.
    for room_id, amenities in amenities_by_room_id().items():
        op.execute(
            rooms.update()
            .where(rooms.c.id == op.inline_literal(room_id))
            .where(rooms.c.amenities.is_(None))
            .values(amenities=op.inline_literal(amenities))
        )


def downgrade() -> None:
    with op.batch_alter_table("rooms") as batch_op:
        batch_op.drop_column("amenities")
