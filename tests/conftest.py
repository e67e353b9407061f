"""Shared fixtures for the guestbook test-suite."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.config.settings import DatabaseConfig, Settings  # noqa: E402
from app.main import create_app  # noqa: E402
from tests.fakes import InMemoryWishRepository  # noqa: E402


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database=DatabaseConfig(path=str(tmp_path / "wishes.db")),
        log_file=str(tmp_path / "logs" / "app.log"),
    )


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client over a fresh SQLite database."""

    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def memory_repository() -> InMemoryWishRepository:
    return InMemoryWishRepository()
