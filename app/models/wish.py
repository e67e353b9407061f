"""SQLAlchemy model for guestbook wishes."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Text

from app.models.base import Base


def _utcnow() -> datetime:
    """Return a naive UTC datetime for persistence."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


class Wish(Base):
    __tablename__ = "wishes"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(DateTime, nullable=False, default=_utcnow, index=True)


__all__ = ["Wish"]
