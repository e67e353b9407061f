"""SQLAlchemy wish store tests on a real SQLite file."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import OperationalError

from app.config.settings import DatabaseConfig
from app.database import create_engine, create_session_factory, dispose_engine, init_models
from app.domain.errors import StorageError
from app.infrastructure.persistence.repositories_sqlalchemy import SQLAlchemyWishRepository
from app.models.wish import Wish as WishEntity


def _run(db_path, scenario):
    """Run ``scenario(repository)`` against a freshly initialised database."""

    async def runner():
        engine = create_engine(DatabaseConfig(path=str(db_path)))
        try:
            await init_models(engine)
            return await scenario(SQLAlchemyWishRepository(create_session_factory(engine)))
        finally:
            await dispose_engine(engine)

    return asyncio.run(runner())


def test_insert_assigns_id_and_utc_timestamp(tmp_path):
    before = datetime.now(timezone.utc)

    async def scenario(repository):
        return await repository.insert("Alice", "Congrats!")

    wish = _run(tmp_path / "wishes.db", scenario)

    assert wish.id == 1
    assert wish.timestamp.tzinfo is not None
    assert wish.timestamp >= before


def test_list_all_newest_first(tmp_path):
    async def scenario(repository):
        for index in range(5):
            await repository.insert(f"guest {index}", "hello")
        return await repository.list_all()

    wishes = _run(tmp_path / "wishes.db", scenario)

    assert [wish.id for wish in wishes] == [5, 4, 3, 2, 1]


def test_list_all_breaks_timestamp_ties_by_id(tmp_path):
    shared = datetime(2024, 6, 1, 12, 0, 0)
    earlier = datetime(2024, 6, 1, 11, 59, 59)

    async def runner():
        engine = create_engine(DatabaseConfig(path=str(tmp_path / "wishes.db")))
        try:
            await init_models(engine)
            session_factory = create_session_factory(engine)
            async with session_factory() as session:
                for name, timestamp in (
                    ("first", shared),
                    ("older", earlier),
                    ("third", shared),
                    ("fourth", shared),
                ):
                    session.add(WishEntity(name=name, message="hello", timestamp=timestamp))
                    await session.flush()
                await session.commit()
            return await SQLAlchemyWishRepository(session_factory).list_all()
        finally:
            await dispose_engine(engine)

    wishes = asyncio.run(runner())

    assert [wish.id for wish in wishes] == [4, 3, 1, 2]
    assert [wish.name for wish in wishes] == ["fourth", "third", "first", "older"]


def test_delete_counts(tmp_path):
    async def scenario(repository):
        wish = await repository.insert("Bob", "hi")
        removed = await repository.delete(wish.id)
        missing = await repository.delete(wish.id)
        return removed, missing, await repository.list_all()

    removed, missing, remaining = _run(tmp_path / "wishes.db", scenario)

    assert removed == 1
    assert missing == 0
    assert remaining == []


def test_delete_all_counts_and_ids_keep_growing(tmp_path):
    async def scenario(repository):
        for index in range(3):
            await repository.insert(f"guest {index}", "hello")
        count = await repository.delete_all()
        fresh = await repository.insert("late guest", "sorry I'm late")
        return count, fresh

    count, fresh = _run(tmp_path / "wishes.db", scenario)

    assert count == 3
    assert fresh.id == 4


def test_data_survives_a_new_engine(tmp_path):
    db_path = tmp_path / "wishes.db"

    async def write(repository):
        await repository.insert("Carol", "Forever")

    async def read(repository):
        return await repository.list_all()

    _run(db_path, write)
    wishes = _run(db_path, read)

    assert [wish.name for wish in wishes] == ["Carol"]


def test_in_memory_database_is_shared_across_sessions():
    async def runner():
        engine = create_engine(DatabaseConfig(path=":memory:"))
        try:
            await init_models(engine)
            repository = SQLAlchemyWishRepository(create_session_factory(engine))
            await repository.insert("Dana", "Cheers")
            return await repository.list_all()
        finally:
            await dispose_engine(engine)

    wishes = asyncio.run(runner())

    assert len(wishes) == 1


def test_missing_table_raises_storage_error(tmp_path):
    async def runner():
        engine = create_engine(DatabaseConfig(path=str(tmp_path / "empty.db")))
        try:
            repository = SQLAlchemyWishRepository(create_session_factory(engine))
            return await repository.list_all()
        finally:
            await dispose_engine(engine)

    with pytest.raises(StorageError) as excinfo:
        asyncio.run(runner())

    assert isinstance(excinfo.value.__cause__, OperationalError)
    assert excinfo.value.message == "Failed to read wishes"
    assert "SELECT" not in str(excinfo.value)
