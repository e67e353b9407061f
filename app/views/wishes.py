"""Pydantic schemas for guestbook wishes."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WishCreateRequest(BaseModel):
    # Presence is checked by the create use case so blank and missing
    # fields share the same 400 response.
    name: Optional[str] = None
    message: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Alice", "message": "Congrats!"},
        }
    )


class WishRead(BaseModel):
    id: int
    name: str
    message: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class WishResetResponse(BaseModel):
    message: str
    count: int = Field(..., ge=0)
