"""Root conftest: async DB + FastAPI test client shared by every test package.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not exercised)
    - Engine built with create_engine_for so foreign keys are enforced like production
"""

import os
from datetime import date

# Ensure tests never touch a developer database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from httpx import ASGITransport, AsyncClient

from stargate.db.base import Base
from stargate.infrastructure.database import (
    DatabaseSessionManager, create_engine_for, get_db,
)
import stargate.infrastructure.database as db_module
from stargate.models.astronaut_detail import AstronautDetail
from stargate.models.astronaut_duty import AstronautDuty
from stargate.models.person import Person
from stargate.main import app


@pytest.fixture
async def test_engine():
    engine = create_engine_for("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def seed_person(test_db):
    """Factory: insert a person directly, bypassing the pre-processors."""
    async def _seed(name: str) -> Person:
        person = Person(name=name)
        test_db.add(person)
        await test_db.commit()
        return person
    return _seed


@pytest.fixture
def seed_duty(test_db):
    """Factory: insert a duty row (and optionally a detail) directly."""
    async def _seed(
        person: Person,
        rank: str,
        duty_title: str,
        start: date,
        end: date | None = None,
        with_detail: bool = False,
    ) -> AstronautDuty:
        duty = AstronautDuty(
            person_id=person.id, rank=rank, duty_title=duty_title,
            duty_start_date=start, duty_end_date=end,
        )
        test_db.add(duty)
        if with_detail:
            test_db.add(AstronautDetail(
                person_id=person.id, current_rank=rank,
                current_duty_title=duty_title, career_start_date=start,
            ))
        await test_db.commit()
        return duty
    return _seed
