"""Request Dispatch: pre-processor then handler, explicit routing.

Invariants:
    - A failing pre-processor stops the request before the handler writes
    - Normalized requests (trimmed names) reach the handler
    - Unknown request types raise TypeError
"""

from datetime import date

import pytest
from sqlalchemy import func, select

from stargate.core.domain_types import (
    CreateAstronautDuty, CreatePerson, GetAstronautDutiesByName,
    GetPersonByName, UpdatePerson,
)
from stargate.core.errors import ConflictError, NotFoundError
from stargate.models.astronaut_detail import AstronautDetail
from stargate.models.astronaut_duty import AstronautDuty
from stargate.models.person import Person
from stargate.services.request_dispatch import RequestDispatch


async def test_create_then_create_again_conflicts(test_db):
    dispatch = RequestDispatch(test_db)
    await dispatch.send(CreatePerson(name="Jack O'Neill"))
    with pytest.raises(ConflictError):
        await dispatch.send(CreatePerson(name="  Jack O'Neill  "))
    assert await test_db.scalar(select(func.count()).select_from(Person)) == 1


async def test_rename_to_other_persons_name_conflicts(test_db):
    dispatch = RequestDispatch(test_db)
    await dispatch.send(CreatePerson(name="Samantha Carter"))
    await dispatch.send(CreatePerson(name="Daniel Jackson"))
    with pytest.raises(ConflictError):
        await dispatch.send(
            UpdatePerson(current_name="Samantha Carter", new_name="Daniel Jackson"),
        )


async def test_rename_to_own_name_succeeds(test_db):
    dispatch = RequestDispatch(test_db)
    created = await dispatch.send(CreatePerson(name="Samantha Carter"))
    updated = await dispatch.send(
        UpdatePerson(current_name="Samantha Carter", new_name="Samantha Carter"),
    )
    assert updated.id == created.id


async def test_duty_for_unknown_person_writes_nothing(test_db):
    with pytest.raises(NotFoundError):
        await RequestDispatch(test_db).send(CreateAstronautDuty(
            name="Nobody", rank="Major", duty_title="Pilot",
            duty_start_date=date(2024, 1, 1),
        ))
    assert await test_db.scalar(select(func.count()).select_from(AstronautDuty)) == 0
    assert await test_db.scalar(select(func.count()).select_from(AstronautDetail)) == 0


async def test_same_duty_twice_conflicts(test_db):
    dispatch = RequestDispatch(test_db)
    await dispatch.send(CreatePerson(name="Samantha Carter"))
    duty = CreateAstronautDuty(
        name="Samantha Carter", rank="Colonel", duty_title="Commander",
        duty_start_date=date(2024, 1, 1),
    )
    await dispatch.send(duty)
    with pytest.raises(ConflictError):
        await dispatch.send(duty)


async def test_full_career_roundtrip(test_db):
    dispatch = RequestDispatch(test_db)
    await dispatch.send(CreatePerson(name=" Jack O'Neill "))
    await dispatch.send(CreateAstronautDuty(
        name="Jack O'Neill", rank="Colonel", duty_title="Commander",
        duty_start_date=date(2024, 1, 1),
    ))
    await dispatch.send(CreateAstronautDuty(
        name="Jack O'Neill", rank="Colonel", duty_title="RETIRED",
        duty_start_date=date(2030, 1, 1),
    ))

    person = await dispatch.send(GetPersonByName(name="jack o'neill"))
    assert person.person.current_duty_title == "RETIRED"
    assert person.person.career_start_date == date(2024, 1, 1)
    assert person.person.career_end_date == date(2029, 12, 31)

    history = await dispatch.send(GetAstronautDutiesByName(name="Jack O'Neill"))
    assert [d.duty_title for d in history.astronaut_duties] == ["RETIRED", "Commander"]
    assert history.astronaut_duties[1].duty_end_date == date(2029, 12, 31)


async def test_unknown_request_type_raises(test_db):
    class _Unregistered:
        pass

    with pytest.raises(TypeError):
        await RequestDispatch(test_db).send(_Unregistered())
