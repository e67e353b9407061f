import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.interfaces import WishRepositoryInterface
from app.domain.errors import StorageError
from app.domain.models import Wish
from app.models.wish import Wish as WishEntity

logger = logging.getLogger(__name__)


class SQLAlchemyWishRepository(WishRepositoryInterface):
    """SQLAlchemy implementation of the wish store"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def insert(self, name: str, message: str) -> Wish:
        async with self.session_factory() as session:
            db_wish = WishEntity(name=name, message=message)
            session.add(db_wish)
            try:
                await session.commit()
                await session.refresh(db_wish)
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to insert wish")
                raise StorageError("Failed to save wish") from exc

            logger.info("Added new wish with ID: %s", db_wish.id)
            return Wish.model_validate(db_wish)

    async def list_all(self) -> List[Wish]:
        async with self.session_factory() as session:
            try:
                result = await session.execute(
                    select(WishEntity).order_by(
                        WishEntity.timestamp.desc(),
                        WishEntity.id.desc(),
                    )
                )
            except SQLAlchemyError as exc:
                logger.exception("Failed to read wishes")
                raise StorageError("Failed to read wishes") from exc

            rows = result.scalars().all()
            logger.debug("Retrieved %d wishes", len(rows))
            return [Wish.model_validate(row) for row in rows]

    async def delete(self, wish_id: int) -> int:
        return await self._execute_delete(
            delete(WishEntity).where(WishEntity.id == wish_id),
            f"wish {wish_id}",
        )

    async def delete_all(self) -> int:
        return await self._execute_delete(delete(WishEntity), "all wishes")

    async def _execute_delete(self, statement, label: str) -> int:
        async with self.session_factory() as session:
            try:
                result = await session.execute(statement)
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to delete %s", label)
                raise StorageError(f"Failed to delete {label}") from exc

            count = result.rowcount or 0
            logger.info("Deleted %s (%d row(s))", label, count)
            return count
