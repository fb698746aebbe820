"""Domain record for a registered user."""

from pydantic import BaseModel, ConfigDict


class UserItem(BaseModel):
    """User as returned by login. password is the stored plaintext value."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    username: str
    password: str
    fullname: str
