"""Person Routes: list, look up, create, and rename people.

Invariants:
    - GET /person/{name} returns {"person": null} for an unknown name (never 404)
    - POST and PUT failures (taken name, unknown person, blank name) surface as 400
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.domain_types import (
    CreatePerson, GetPeople, GetPersonByName, UpdatePerson,
)
from stargate.infrastructure.database import get_db
from stargate.schemas.person import (
    CreatePersonResult, GetPeopleResult, GetPersonByNameResult,
    PersonCreate, PersonUpdate, UpdatePersonResult,
)
from stargate.services.request_dispatch import RequestDispatch

router = APIRouter(prefix="/person", tags=["person"])


@router.get("", response_model=GetPeopleResult)
async def get_people(db: AsyncSession = Depends(get_db)):
    """List every person with their current astronaut detail."""
    return await RequestDispatch(db).send(GetPeople())


@router.get("/{name}", response_model=GetPersonByNameResult)
async def get_person_by_name(name: str, db: AsyncSession = Depends(get_db)):
    """Look up one person by name (case-insensitive)."""
    return await RequestDispatch(db).send(GetPersonByName(name=name))


@router.post(
    "", response_model=CreatePersonResult,
    status_code=status.HTTP_201_CREATED,
)
async def create_person(body: PersonCreate, db: AsyncSession = Depends(get_db)):
    return await RequestDispatch(db).send(CreatePerson(name=body.name))


@router.put("", response_model=UpdatePersonResult)
async def update_person(body: PersonUpdate, db: AsyncSession = Depends(get_db)):
    return await RequestDispatch(db).send(
        UpdatePerson(current_name=body.current_name, new_name=body.new_name),
    )
