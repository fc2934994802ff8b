"""Person Command Handlers: create_person, update_person.

Invariants:
    - Handlers assume the pre-processor already ran; they still re-read the
      person inside the write transaction and raise NotFoundError if it vanished
    - Stored names are always trimmed
    - One commit per request via commit_or_raise (rollback on failure)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.domain_types import CreatePerson, UpdatePerson
from stargate.core.errors import ErrorContext, NotFoundError
from stargate.core.person_names import normalize_name
from stargate.models.person import Person
from stargate.schemas.person import CreatePersonResult, UpdatePersonResult
from stargate.services.person_lookup import find_person_by_name
from stargate.services.transaction import commit_or_raise

logger = logging.getLogger(__name__)


class PersonHandlers:
    """Write handlers for the people table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_person(self, request: CreatePerson) -> CreatePersonResult:
        name = normalize_name(request.name)
        logger.info("Starting CreatePerson handler", extra={"person_name": name})

        person = Person(name=name)
        self.db.add(person)
        await commit_or_raise(
            self.db, "create_person",
            f"Person '{name}' already exists",
            ErrorContext(person_name=name),
        )

        logger.info(
            f"Created person {person.id}",
            extra={"person_name": name, "person_id": person.id},
        )
        return CreatePersonResult(id=person.id, response_code=201)

    async def update_person(self, request: UpdatePerson) -> UpdatePersonResult:
        current_name = normalize_name(request.current_name, "currentName")
        new_name = normalize_name(request.new_name, "newName")
        logger.info(
            "Starting UpdatePerson handler", extra={"person_name": current_name},
        )

        person = await find_person_by_name(self.db, current_name)
        if person is None:
            logger.warning(
                "UpdatePerson handler could not find person",
                extra={"person_name": current_name},
            )
            raise NotFoundError(
                "Person", current_name, ErrorContext(person_name=current_name),
            )

        person.name = new_name
        await commit_or_raise(
            self.db, "update_person",
            f"Person '{new_name}' already exists",
            ErrorContext(person_name=new_name, person_id=person.id),
        )

        logger.info(
            f"Renamed person {person.id}",
            extra={"person_name": new_name, "person_id": person.id},
        )
        return UpdatePersonResult(id=person.id)
