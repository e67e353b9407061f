import logging
from typing import List, Optional

from app.application.interfaces import WishRepositoryInterface
from app.domain.errors import NotFoundError, ValidationError
from app.domain.models import Wish

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name and message are required"


class ListWishesUseCase:
    """Use case to retrieve every wish, newest first"""

    def __init__(self, repository: WishRepositoryInterface):
        self.repository = repository

    async def execute(self) -> List[Wish]:
        return await self.repository.list_all()


class CreateWishUseCase:
    """Use case to validate and persist a new wish"""

    def __init__(self, repository: WishRepositoryInterface):
        self.repository = repository

    async def execute(self, name: Optional[str], message: Optional[str]) -> Wish:
        clean_name = (name or "").strip()
        clean_message = (message or "").strip()
        if not clean_name or not clean_message:
            logger.info("Rejected wish with missing required fields")
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        return await self.repository.insert(clean_name, clean_message)


class DeleteWishUseCase:
    """Use case to remove a single wish by id"""

    def __init__(self, repository: WishRepositoryInterface):
        self.repository = repository

    async def execute(self, wish_id: int) -> None:
        deleted = await self.repository.delete(wish_id)
        if not deleted:
            raise NotFoundError("Wish not found")


class ResetWishesUseCase:
    """Use case to remove every wish"""

    def __init__(self, repository: WishRepositoryInterface):
        self.repository = repository

    async def execute(self) -> int:
        return await self.repository.delete_all()
