from typing import List
from pydantic import BaseModel, Field, field_validator, ConfigDict


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=1, max_length=320)

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("Name must be a string")
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Name cannot be empty")
        return trimmed

    @field_validator("email", mode="before")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("Invalid email format")
        trimmed = value.strip()
        if "@" not in trimmed:
            raise ValueError("Invalid email format")
        return trimmed


class UserOut(BaseModel):
    """Registered user."""

    id: str
    name: str
    email: str


class GameSummaryOut(BaseModel):
    frames: List[List[int]]
    scores: List[int]
    cumulative: List[int]
    total: int = Field(..., ge=0, le=300)
    current_frame: int = Field(..., alias="currentFrame", ge=1, le=10)
    current_roll: int = Field(..., alias="currentRoll", ge=1)
    game_over: bool = Field(..., alias="gameOver")

    model_config = ConfigDict(populate_by_name=True)
