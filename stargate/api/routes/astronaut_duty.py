"""Astronaut Duty Routes: duty history lookup and duty recording.

Invariants:
    - GET for an unknown name returns an empty result (person null, no duties)
    - POST failures (unknown person, duplicate title + start date) surface as 400
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.domain_types import CreateAstronautDuty, GetAstronautDutiesByName
from stargate.infrastructure.database import get_db
from stargate.schemas.astronaut_duty import (
    AstronautDutyCreate, CreateAstronautDutyResult, GetAstronautDutiesByNameResult,
)
from stargate.services.request_dispatch import RequestDispatch

router = APIRouter(prefix="/astronaut-duty", tags=["astronaut-duty"])


@router.get("/{name}", response_model=GetAstronautDutiesByNameResult)
async def get_astronaut_duties_by_name(
    name: str, db: AsyncSession = Depends(get_db),
):
    """Person projection plus duty history, most recent first."""
    return await RequestDispatch(db).send(GetAstronautDutiesByName(name=name))


@router.post(
    "", response_model=CreateAstronautDutyResult,
    status_code=status.HTTP_201_CREATED,
)
async def create_astronaut_duty(
    body: AstronautDutyCreate, db: AsyncSession = Depends(get_db),
):
    """Record a new duty; closes the previous one and updates the detail."""
    return await RequestDispatch(db).send(
        CreateAstronautDuty(
            name=body.person_name,
            rank=body.rank,
            duty_title=body.duty_title,
            duty_start_date=body.duty_start_date,
        ),
    )
