"""Guestbook controller exposing list, create, delete and reset."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, status

from app.controllers.dependencies import (
    CreateWishDep,
    DeleteWishDep,
    ListWishesDep,
    ResetWishesDep,
)
from app.telemetry import increment_wishes_created, increment_wishes_deleted
from app.views import (
    ErrorResponse,
    SuccessResponse,
    WishCreateRequest,
    WishRead,
    WishResetResponse,
)

# SQLite INTEGER range; larger ids cannot reach the database.
WishIdPath = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]

router = APIRouter(
    prefix="/wishes",
    tags=["wishes"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[WishRead])
async def list_wishes(use_case: ListWishesDep) -> list[WishRead]:
    wishes = await use_case.execute()
    return [WishRead.model_validate(wish) for wish in wishes]


@router.post(
    "",
    response_model=WishRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_wish(payload: WishCreateRequest, use_case: CreateWishDep) -> WishRead:
    wish = await use_case.execute(payload.name, payload.message)
    increment_wishes_created()
    return WishRead.model_validate(wish)


@router.delete(
    "/{wish_id}",
    response_model=SuccessResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_wish(wish_id: WishIdPath, use_case: DeleteWishDep) -> SuccessResponse:
    await use_case.execute(wish_id)
    increment_wishes_deleted()
    return SuccessResponse(message="Wish deleted successfully")


@router.delete("", response_model=WishResetResponse)
async def reset_wishes(use_case: ResetWishesDep) -> WishResetResponse:
    count = await use_case.execute()
    increment_wishes_deleted(count)
    return WishResetResponse(message="Wishes reset successfully", count=count)
