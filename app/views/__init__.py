"""Pydantic schemas used as views in the MVC architecture."""

from .common import ErrorResponse, SuccessResponse
from .wishes import WishCreateRequest, WishRead, WishResetResponse

__all__ = [
    "WishCreateRequest",
    "WishRead",
    "WishResetResponse",
    "ErrorResponse",
    "SuccessResponse",
]
