"""Request Dispatch: explicit routing from request type to pre-processor and handler.

Invariants:
    - Every request->handler mapping is visible; no getattr magic, no auto-discovery
    - Pre-processors run BEFORE the handler and may replace the request with a
      normalized copy; a raising pre-processor means the handler never runs
    - Queries have no pre-processor
    - Unknown request types raise TypeError (programming error, not a client error)

Design Decisions:
    - Explicit dicts over a registry decorator: adding a request means editing
      this file, and every route sees the same pipeline
    - Handlers instantiated per dispatch with the request's session
"""

import logging
from typing import Any, Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.domain_types import (
    CreateAstronautDuty, CreatePerson, GetAstronautDutiesByName,
    GetPeople, GetPersonByName, UpdatePerson,
)
from stargate.services.handle_astronaut_duty import AstronautDutyHandlers
from stargate.services.handle_person import PersonHandlers
from stargate.services.handle_queries import QueryHandlers
from stargate.services.validate_requests import RequestValidators

logger = logging.getLogger(__name__)


class RequestDispatch:
    """Routes request type -> (pre-processor, handler)."""

    def __init__(self, db: AsyncSession):
        validators = RequestValidators(db)
        persons = PersonHandlers(db)
        duties = AstronautDutyHandlers(db)
        queries = QueryHandlers(db)

        self._pre_processors: dict[type, Callable[[Any], Awaitable[Any]]] = {
            CreatePerson: validators.validate_create_person,
            UpdatePerson: validators.validate_update_person,
            CreateAstronautDuty: validators.validate_create_astronaut_duty,
        }

        self._handlers: dict[type, Callable[[Any], Awaitable[Any]]] = {
            # Commands
            CreatePerson: persons.create_person,
            UpdatePerson: persons.update_person,
            CreateAstronautDuty: duties.create_astronaut_duty,

            # Queries
            GetPeople: queries.get_people,
            GetPersonByName: queries.get_person_by_name,
            GetAstronautDutiesByName: queries.get_astronaut_duties_by_name,
        }

    async def send(self, request: Any) -> Any:
        """Run the pre-processor (if any), then the handler."""
        request_type = type(request)
        handler = self._handlers.get(request_type)
        if handler is None:
            raise TypeError(f"No handler registered for {request_type.__name__}")

        pre_processor = self._pre_processors.get(request_type)
        if pre_processor is not None:
            request = await pre_processor(request)

        logger.debug(f"Dispatching {request_type.__name__}")
        return await handler(request)
