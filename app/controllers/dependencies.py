"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces import WishRepositoryInterface
from app.application.use_cases.wish_use_cases import (
    CreateWishUseCase,
    DeleteWishUseCase,
    ListWishesUseCase,
    ResetWishesUseCase,
)


def get_wish_repository(request: Request) -> WishRepositoryInterface:
    """Return the wish store owned by the running application."""

    return request.app.state.wish_repository


RepositoryDep = Annotated[WishRepositoryInterface, Depends(get_wish_repository)]


def get_list_wishes(repository: RepositoryDep) -> ListWishesUseCase:
    return ListWishesUseCase(repository)


def get_create_wish(repository: RepositoryDep) -> CreateWishUseCase:
    return CreateWishUseCase(repository)


def get_delete_wish(repository: RepositoryDep) -> DeleteWishUseCase:
    return DeleteWishUseCase(repository)


def get_reset_wishes(repository: RepositoryDep) -> ResetWishesUseCase:
    return ResetWishesUseCase(repository)


ListWishesDep = Annotated[ListWishesUseCase, Depends(get_list_wishes)]
CreateWishDep = Annotated[CreateWishUseCase, Depends(get_create_wish)]
DeleteWishDep = Annotated[DeleteWishUseCase, Depends(get_delete_wish)]
ResetWishesDep = Annotated[ResetWishesUseCase, Depends(get_reset_wishes)]


__all__ = [
    "get_wish_repository",
    "RepositoryDep",
    "ListWishesDep",
    "CreateWishDep",
    "DeleteWishDep",
    "ResetWishesDep",
]
