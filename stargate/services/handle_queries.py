"""Query Handlers: read projections over people, details, and duties.

Invariants:
    - Queries never write and never raise for a missing person: they return
      None / empty collections instead
    - Person lookup is case-insensitive on the trimmed name; duties lookup is an
      exact, case-sensitive match
    - Every person projection comes from _person_astronaut_query (one canonical shape)
    - Duties are ordered by duty_start_date descending (most recent first)
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.domain_types import (
    GetAstronautDutiesByName, GetPeople, GetPersonByName,
)
from stargate.models.astronaut_detail import AstronautDetail
from stargate.models.astronaut_duty import AstronautDuty
from stargate.models.person import Person
from stargate.schemas.astronaut_duty import (
    AstronautDutyRead, GetAstronautDutiesByNameResult,
)
from stargate.schemas.person import (
    GetPeopleResult, GetPersonByNameResult, PersonAstronaut,
)

logger = logging.getLogger(__name__)


def _person_astronaut_query() -> Select:
    """Person LEFT JOIN AstronautDetail, projected to PersonAstronaut columns."""
    return (
        select(
            Person.id.label("person_id"),
            Person.name,
            AstronautDetail.current_rank,
            AstronautDetail.current_duty_title,
            AstronautDetail.career_start_date,
            AstronautDetail.career_end_date,
        )
        .outerjoin(AstronautDetail, AstronautDetail.person_id == Person.id)
    )


def _to_person_astronaut(row) -> PersonAstronaut:
    return PersonAstronaut(
        person_id=row.person_id,
        name=row.name,
        current_rank=row.current_rank,
        current_duty_title=row.current_duty_title,
        career_start_date=row.career_start_date,
        career_end_date=row.career_end_date,
    )


class QueryHandlers:
    """Read-only handlers; no pre-processing."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_people(self, request: GetPeople) -> GetPeopleResult:
        result = await self.db.execute(
            _person_astronaut_query().order_by(Person.id),
        )
        return GetPeopleResult(
            people=[_to_person_astronaut(row) for row in result.all()],
        )

    async def get_person_by_name(
        self, request: GetPersonByName,
    ) -> GetPersonByNameResult:
        name = request.name.strip()
        logger.info("Querying person", extra={"person_name": name})

        result = await self.db.execute(
            _person_astronaut_query()
            .where(func.lower(Person.name) == func.lower(name))
            .order_by(Person.id)
            .limit(1)
        )
        row = result.first()
        if row is None:
            logger.info("No person found", extra={"person_name": name})
            return GetPersonByNameResult(person=None)
        return GetPersonByNameResult(person=_to_person_astronaut(row))

    async def get_astronaut_duties_by_name(
        self, request: GetAstronautDutiesByName,
    ) -> GetAstronautDutiesByNameResult:
        logger.info("Querying duties", extra={"person_name": request.name})

        result = await self.db.execute(
            _person_astronaut_query().where(Person.name == request.name),
        )
        row = result.first()
        if row is None:
            logger.warning("No astronaut found", extra={"person_name": request.name})
            return GetAstronautDutiesByNameResult()

        duties = await self.db.execute(
            select(AstronautDuty)
            .where(AstronautDuty.person_id == row.person_id)
            .order_by(AstronautDuty.duty_start_date.desc())
        )
        astronaut_duties = [
            AstronautDutyRead(
                id=d.id,
                person_id=d.person_id,
                rank=d.rank,
                duty_title=d.duty_title,
                duty_start_date=d.duty_start_date,
                duty_end_date=d.duty_end_date,
            )
            for d in duties.scalars().all()
        ]

        logger.info(
            f"Retrieved {len(astronaut_duties)} duties",
            extra={"person_name": request.name, "person_id": row.person_id},
        )
        return GetAstronautDutiesByNameResult(
            person=_to_person_astronaut(row),
            astronaut_duties=astronaut_duties,
        )
