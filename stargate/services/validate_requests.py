"""Request Pre-processors: validation run against current store state before mutation.

Invariants:
    - Pre-processors NEVER write; they return a normalized copy of the request
    - Create/rename names are trimmed before comparison and storage
    - Record-duty matches the person name exactly (no trimming)
    - Failures raise immediately: ValidationError, NotFoundError, ConflictError

Design Decisions:
    - Reads run in the request's session, so the handler's writes extend the same
      transaction; unique constraints still back up the checks at commit
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.domain_types import CreateAstronautDuty, CreatePerson, UpdatePerson
from stargate.core.errors import ConflictError, ErrorContext, NotFoundError
from stargate.core.person_names import is_same_name, normalize_name
from stargate.services.person_lookup import duty_exists, find_person_by_name

logger = logging.getLogger(__name__)


class RequestValidators:
    """Pre-processors for the three mutating requests."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def validate_create_person(self, request: CreatePerson) -> CreatePerson:
        name = normalize_name(request.name)
        if await find_person_by_name(self.db, name) is not None:
            logger.warning(
                "Validation failed for CreatePerson: name already taken",
                extra={"person_name": name},
            )
            raise ConflictError(
                f"Person '{name}' already exists", ErrorContext(person_name=name),
            )
        return CreatePerson(name=name)

    async def validate_update_person(self, request: UpdatePerson) -> UpdatePerson:
        current_name = normalize_name(request.current_name, "currentName")
        new_name = normalize_name(request.new_name, "newName")

        person = await find_person_by_name(self.db, current_name)
        if person is None:
            logger.warning(
                "Validation failed for UpdatePerson: person not found",
                extra={"person_name": current_name},
            )
            raise NotFoundError(
                "Person", current_name, ErrorContext(person_name=current_name),
            )

        if not is_same_name(current_name, new_name):
            existing = await find_person_by_name(self.db, new_name)
            if existing is not None and existing.id != person.id:
                logger.warning(
                    "Validation failed for UpdatePerson: duplicate target name",
                    extra={"person_name": new_name},
                )
                raise ConflictError(
                    f"Person '{new_name}' already exists",
                    ErrorContext(person_name=new_name, person_id=person.id),
                )

        return UpdatePerson(current_name=current_name, new_name=new_name)

    async def validate_create_astronaut_duty(
        self, request: CreateAstronautDuty,
    ) -> CreateAstronautDuty:
        logger.info("Validating duty", extra={"person_name": request.name})

        person = await find_person_by_name(self.db, request.name)
        if person is None:
            logger.warning(
                "Validation failed: person not found",
                extra={"person_name": request.name},
            )
            raise NotFoundError(
                "Person", request.name, ErrorContext(person_name=request.name),
            )

        if await duty_exists(
            self.db, person.id, request.duty_title, request.duty_start_date,
        ):
            logger.warning(
                "Validation failed: duplicate duty",
                extra={"person_name": request.name, "person_id": person.id},
            )
            raise ConflictError(
                f"Duty '{request.duty_title}' starting "
                f"{request.duty_start_date.isoformat()} already recorded",
                ErrorContext(person_name=request.name, person_id=person.id),
            )

        return request
