"""Domain record for a hotel room and the availability filter values."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Values accepted by HotelService.filter_rooms.
RoomAvailabilityFilter = Literal["all", "available", "unavailable"]

ROOM_AVAILABILITY_FILTERS: frozenset[str] = frozenset({"all", "available", "unavailable"})


class RoomItem(BaseModel):
    """Room as shown in listings and on the detail view."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    number: str = Field(..., description="Room label, e.g. '101'.")
    capacity: int = Field(..., description="Maximum number of guests.")
    price: float = Field(..., description="Rate per day.")
    description: str | None = None
    is_available: bool
    amenities: str | None = Field(
        default=None,
        description="Comma-separated amenities, e.g. 'WiFi, ТВ'.",
    )
    image_res: str | None = Field(
        default=None,
        description="Image identifier resolved by the presentation layer.",
    )
