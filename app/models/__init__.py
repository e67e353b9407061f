"""SQLAlchemy models for the MVC architecture."""

from .base import Base
from .wish import Wish  # noqa: F401

__all__ = [
    "Base",
    "Wish",
]
