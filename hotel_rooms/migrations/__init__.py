"""Alembic migration environment and revision scripts for the rooms database."""
