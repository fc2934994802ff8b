"""Astronaut Duty Handler: records a duty and advances the person's duty lifecycle.

Invariants:
    - Exactly one new duty row per call, inserted with duty_end_date = NULL
    - The previous current duty (latest start date) is closed at new start - 1 day
    - The detail row is created on the first duty and updated in place afterwards;
      career_start_date is never rewritten
    - All reads and integrity checks happen BEFORE any row is mutated, so a
      DataIntegrityError or a same-day ConflictError leaves the session clean
    - Detail update, duty close-out, and insert commit together or not at all
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.domain_types import CreateAstronautDuty
from stargate.core.duty_lifecycle import (
    closing_end_date, ensure_starts_apart_from_current, find_current_duty,
    resolve_career_end_date, truncate_to_date,
)
from stargate.core.errors import ErrorContext, NotFoundError
from stargate.models.astronaut_detail import AstronautDetail
from stargate.models.astronaut_duty import AstronautDuty
from stargate.schemas.astronaut_duty import CreateAstronautDutyResult
from stargate.services.person_lookup import find_person_by_name
from stargate.services.transaction import commit_or_raise

logger = logging.getLogger(__name__)


class AstronautDutyHandlers:
    """Write handler for the duty lifecycle."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_astronaut_duty(
        self, request: CreateAstronautDuty,
    ) -> CreateAstronautDutyResult:
        logger.info(
            "Handling CreateAstronautDuty", extra={"person_name": request.name},
        )
        start_date = truncate_to_date(request.duty_start_date)

        person = await find_person_by_name(self.db, request.name)
        if person is None:
            logger.warning(
                "Handler failed: person not found",
                extra={"person_name": request.name},
            )
            raise NotFoundError(
                "Person", request.name, ErrorContext(person_name=request.name),
            )

        detail = await self._get_detail(person.id)
        duties = await self._get_duties(person.id)
        current_duty = find_current_duty(duties, person.id)
        ensure_starts_apart_from_current(current_duty, start_date, person.id)

        if detail is None:
            detail = AstronautDetail(
                person_id=person.id,
                current_rank=request.rank,
                current_duty_title=request.duty_title,
                career_start_date=start_date,
                career_end_date=resolve_career_end_date(
                    request.duty_title, start_date, None,
                ),
            )
            self.db.add(detail)
        else:
            detail.current_rank = request.rank
            detail.current_duty_title = request.duty_title
            detail.career_end_date = resolve_career_end_date(
                request.duty_title, start_date, detail.career_end_date,
            )

        if current_duty is not None:
            current_duty.duty_end_date = closing_end_date(start_date)

        duty = AstronautDuty(
            person_id=person.id,
            rank=request.rank,
            duty_title=request.duty_title,
            duty_start_date=start_date,
            duty_end_date=None,
        )
        self.db.add(duty)

        await commit_or_raise(
            self.db, "create_astronaut_duty",
            f"Duty '{request.duty_title}' starting "
            f"{start_date.isoformat()} already recorded",
            ErrorContext(person_name=request.name, person_id=person.id),
        )

        logger.info(
            "CreateAstronautDuty succeeded",
            extra={
                "person_name": request.name,
                "person_id": person.id,
                "duty_id": duty.id,
            },
        )
        return CreateAstronautDutyResult(id=duty.id, response_code=201)

    async def _get_detail(self, person_id: int) -> AstronautDetail | None:
        result = await self.db.execute(
            select(AstronautDetail).where(AstronautDetail.person_id == person_id),
        )
        return result.scalar_one_or_none()

    async def _get_duties(self, person_id: int) -> list[AstronautDuty]:
        result = await self.db.execute(
            select(AstronautDuty)
            .where(AstronautDuty.person_id == person_id)
            .order_by(AstronautDuty.duty_start_date.desc())
        )
        return list(result.scalars().all())
