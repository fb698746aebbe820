"""Add rooms.imageRes and backfill the seed rooms by room number (schema version 3).

Revision ID: 20260310000000
Revises: 20260305000000
Create Date: 2026-03-10

"""
import logging
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from hotel_rooms.core.fixtures import image_res_by_number

revision: str = "20260310000000"
down_revision: Union[str, None] = "20260305000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

logger = logging.getLogger(__name__)

rooms = sa.table("rooms", sa.column("number", sa.Text), sa.column("imageRes", sa.Text))


def upgrade() -> None:
    columns = {c["name"] for c in sa.inspect(op.get_bind()).get_columns("rooms")}
    if "imageRes" in columns:
        logger.info("rooms.imageRes already present; skipping add_column")
    else:
        op.add_column("rooms", sa.Column("imageRes", sa.Text(), nullable=True))

    # Fill only NULLs, same as the amenities step.
    for number, image_res in image_res_by_number().items():
        op.execute(
            rooms.update()
            .where(rooms.c.number == op.inline_literal(number))
            .where(rooms.c.imageRes.is_(None))
            .values(imageRes=op.inline_literal(image_res))
        )


def downgrade() -> None:
    with op.batch_alter_table("rooms") as batch_op:
        batch_op.drop_column("imageRes")
