"""Person Lookup: shared store reads used by pre-processors and handlers.

Invariants:
    - find_person_by_name is an exact, case-sensitive match
"""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stargate.models.astronaut_duty import AstronautDuty
from stargate.models.person import Person


async def find_person_by_name(db: AsyncSession, name: str) -> Person | None:
    result = await db.execute(select(Person).where(Person.name == name))
    return result.scalar_one_or_none()


async def duty_exists(
    db: AsyncSession, person_id: int, duty_title: str, duty_start_date: date,
) -> bool:
    """True if the person already has a duty with this title and start date."""
    result = await db.execute(
        select(AstronautDuty.id)
        .where(AstronautDuty.person_id == person_id)
        .where(AstronautDuty.duty_title == duty_title)
        .where(AstronautDuty.duty_start_date == duty_start_date)
        .limit(1)
    )
    return result.scalar_one_or_none() is not None
