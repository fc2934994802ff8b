"""Astronaut Duty Schemas: request body and history projection for /astronaut-duty.

Invariants:
    - dutyStartDate accepts an ISO date or datetime; time of day is dropped
    - AstronautDutyRead mirrors a stored duty row
"""

from datetime import date, datetime

from pydantic import Field, field_validator

from stargate.core.duty_lifecycle import truncate_to_date
from stargate.schemas.common import ApiModel, BaseResponse
from stargate.schemas.person import PersonAstronaut


class AstronautDutyCreate(ApiModel):
    """POST /astronaut-duty body."""
    person_name: str = Field(max_length=200)
    rank: str = Field(min_length=1, max_length=100)
    duty_title: str = Field(min_length=1, max_length=200)
    duty_start_date: date

    @field_validator("duty_start_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v):
        if isinstance(v, str):
            try:
                v = datetime.fromisoformat(v)
            except ValueError:
                return v  # let pydantic report the malformed value
        if isinstance(v, date):
            return truncate_to_date(v)
        return v


class AstronautDutyRead(ApiModel):
    """One row of a person's duty history."""
    id: int
    person_id: int
    rank: str
    duty_title: str
    duty_start_date: date
    duty_end_date: date | None = None


class GetAstronautDutiesByNameResult(BaseResponse):
    person: PersonAstronaut | None = None
    astronaut_duties: list[AstronautDutyRead] = []


class CreateAstronautDutyResult(BaseResponse):
    id: int
