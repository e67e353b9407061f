from abc import ABC, abstractmethod
from typing import List

from app.domain.models import Wish


class WishRepositoryInterface(ABC):
    """Persistence contract for guestbook wishes"""

    @abstractmethod
    async def insert(self, name: str, message: str) -> Wish:
        ...

    @abstractmethod
    async def list_all(self) -> List[Wish]:
        ...

    @abstractmethod
    async def delete(self, wish_id: int) -> int:
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        ...
