from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


class Wish(BaseModel):
    """Domain model for a guestbook wish"""

    id: int
    name: str
    message: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @field_validator("timestamp")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; they are stored as UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
