"""Request Pre-processors: validation against store state before mutation.

Invariants:
    - Create/rename names are trimmed; the returned request carries the trimmed values
    - Duplicate names and duties raise ConflictError; unknown people raise NotFoundError
    - Pre-processors never write
"""

from datetime import date

import pytest
from sqlalchemy import func, select

from stargate.core.domain_types import CreateAstronautDuty, CreatePerson, UpdatePerson
from stargate.core.errors import ConflictError, NotFoundError, ValidationError
from stargate.models.person import Person
from stargate.services.validate_requests import RequestValidators


# ─── CreatePerson ────────────────────────────────────────────────

async def test_create_person_returns_trimmed_request(test_db):
    validated = await RequestValidators(test_db).validate_create_person(
        CreatePerson(name="  George Hammond  "),
    )
    assert validated == CreatePerson(name="George Hammond")


async def test_create_person_rejects_existing_trimmed_name(test_db, seed_person):
    await seed_person("Jack O'Neill")
    with pytest.raises(ConflictError):
        await RequestValidators(test_db).validate_create_person(
            CreatePerson(name=" Jack O'Neill "),
        )


async def test_create_person_rejects_blank_name(test_db):
    with pytest.raises(ValidationError):
        await RequestValidators(test_db).validate_create_person(CreatePerson(name="   "))


async def test_create_person_check_does_not_write(test_db):
    await RequestValidators(test_db).validate_create_person(CreatePerson(name="Vala"))
    count = await test_db.scalar(select(func.count()).select_from(Person))
    assert count == 0


# ─── UpdatePerson ────────────────────────────────────────────────

async def test_update_person_unknown_current_name(test_db):
    with pytest.raises(NotFoundError):
        await RequestValidators(test_db).validate_update_person(
            UpdatePerson(current_name="Nobody", new_name="Somebody"),
        )


async def test_update_person_target_taken_by_other(test_db, seed_person):
    await seed_person("Samantha Carter")
    await seed_person("Daniel Jackson")
    with pytest.raises(ConflictError):
        await RequestValidators(test_db).validate_update_person(
            UpdatePerson(current_name="Samantha Carter", new_name=" Daniel Jackson"),
        )


async def test_update_person_same_name_is_allowed(test_db, seed_person):
    await seed_person("Teal'c")
    validated = await RequestValidators(test_db).validate_update_person(
        UpdatePerson(current_name=" Teal'c", new_name="Teal'c  "),
    )
    assert validated == UpdatePerson(current_name="Teal'c", new_name="Teal'c")


async def test_update_person_rejects_blank_new_name(test_db, seed_person):
    await seed_person("Teal'c")
    with pytest.raises(ValidationError) as exc_info:
        await RequestValidators(test_db).validate_update_person(
            UpdatePerson(current_name="Teal'c", new_name=" "),
        )
    assert exc_info.value.field == "newName"


# ─── CreateAstronautDuty ─────────────────────────────────────────

async def test_duty_for_unknown_person(test_db):
    request = CreateAstronautDuty(
        name="Nonexistent Person", rank="Captain",
        duty_title="Commander", duty_start_date=date(2024, 1, 1),
    )
    with pytest.raises(NotFoundError):
        await RequestValidators(test_db).validate_create_astronaut_duty(request)


async def test_duty_duplicate_title_and_start(test_db, seed_person, seed_duty):
    person = await seed_person("Samantha Carter")
    await seed_duty(person, "Colonel", "Commander", date(2024, 1, 1))
    request = CreateAstronautDuty(
        name="Samantha Carter", rank="Colonel",
        duty_title="Commander", duty_start_date=date(2024, 1, 1),
    )
    with pytest.raises(ConflictError):
        await RequestValidators(test_db).validate_create_astronaut_duty(request)


async def test_duty_same_title_different_start_passes(test_db, seed_person, seed_duty):
    person = await seed_person("Samantha Carter")
    await seed_duty(person, "Colonel", "Commander", date(2024, 1, 1))
    request = CreateAstronautDuty(
        name="Samantha Carter", rank="Colonel",
        duty_title="Commander", duty_start_date=date(2025, 1, 1),
    )
    assert await RequestValidators(test_db).validate_create_astronaut_duty(request) == request


async def test_duty_person_match_is_exact(test_db, seed_person):
    await seed_person("Daniel Jackson")
    request = CreateAstronautDuty(
        name="daniel jackson", rank="Doctor",
        duty_title="Linguist", duty_start_date=date(2024, 2, 1),
    )
    with pytest.raises(NotFoundError):
        await RequestValidators(test_db).validate_create_astronaut_duty(request)
