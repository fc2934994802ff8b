"""Database Session Manager: error mapping for failures escaping a session.

Tests cover:
    - IntegrityError maps to ConflictError (400), same as commit_or_raise
    - OperationalError maps to PersistenceError (500)
    - The failed transaction is rolled back
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from stargate.core.errors import ConflictError, PersistenceError
from stargate.infrastructure.database import DatabaseSessionManager
from stargate.models.person import Person


@pytest.fixture
def manager(test_engine, test_session_factory):
    mgr = DatabaseSessionManager.__new__(DatabaseSessionManager)
    mgr.engine = test_engine
    mgr._session_factory = test_session_factory
    return mgr


async def _person_count(manager) -> int:
    async with manager.session() as db:
        return (await db.execute(select(func.count(Person.id)))).scalar_one()


async def test_duplicate_name_commit_maps_to_conflict(manager):
    async with manager.session() as db:
        db.add(Person(name="Daniel Jackson"))
        await db.commit()

    with pytest.raises(ConflictError) as exc_info:
        async with manager.session() as db:
            db.add(Person(name="Daniel Jackson"))
            await db.commit()

    assert exc_info.value.http_status == 400
    assert await _person_count(manager) == 1


async def test_operational_error_maps_to_persistence(manager):
    with pytest.raises(PersistenceError) as exc_info:
        async with manager.session() as db:
            db.add(Person(name="Jonas Quinn"))
            await db.flush()
            raise OperationalError("INSERT", {}, Exception("database is locked"))

    assert exc_info.value.http_status == 500
    assert await _person_count(manager) == 0
