"""Seed rows inserted when the database is first created.

Migrations backfill added columns from the same values, so a migrated
database ends up identical to a freshly created one.
"""

from typing import Any

FIXTURE_USERS: list[dict[str, str]] = [
    {"username": "1", "password": "1", "fullname": "Иван Иванов"},
    {"username": "2", "password": "2", "fullname": "Пётр Петров"},
]

# Ordered: the n-th entry gets row id n + 1 on a fresh database.
FIXTURE_ROOMS: list[dict[str, Any]] = [
    {
        "number": "101",
        "capacity": 2,
        "price": 1500.0,
        "description": "Уютный номер с видом",
        "is_available": True,
        "amenities": "WiFi, Кондиционер, ТВ",
        "image_res": "room_101",
    },
    {
        "number": "102",
        "capacity": 4,
        "price": 2500.0,
        "description": "Семейный номер",
        "is_available": True,
        "amenities": "WiFi, Кондиционер, ТВ, Холодильник",
        "image_res": "room_102",
    },
    {
        "number": "201",
        "capacity": 2,
        "price": 1200.0,
        "description": "Эконом",
        "is_available": False,
        "amenities": "WiFi, ТВ",
        "image_res": "room_201",
    },
    {
        "number": "202",
        "capacity": 3,
        "price": 1800.0,
        "description": "Улучшенный",
        "is_available": True,
        "amenities": "WiFi, Кондиционер, ТВ, Минибар",
        "image_res": "room_202",
    },
]


def amenities_by_room_id() -> dict[int, str]:
    """Fixture amenities keyed by the row id each seed room receives."""
    return {index + 1: room["amenities"] for index, room in enumerate(FIXTURE_ROOMS)}


def image_res_by_number() -> dict[str, str]:
    """Fixture image identifiers keyed by room number."""
    return {room["number"]: room["image_res"] for room in FIXTURE_ROOMS}
