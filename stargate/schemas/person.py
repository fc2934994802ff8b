"""Person Schemas: request bodies and projections for the /person endpoints.

Invariants:
    - PersonAstronaut is the single canonical read projection (person + optional detail)
    - Name trimming and blank checks happen in the pre-processors, not here:
      schemas only enforce shape and length
"""

from datetime import date

from pydantic import Field

from stargate.schemas.common import ApiModel, BaseResponse


class PersonCreate(ApiModel):
    """POST /person body."""
    name: str = Field(max_length=200)


class PersonUpdate(ApiModel):
    """PUT /person body."""
    current_name: str = Field(max_length=200)
    new_name: str = Field(max_length=200)


class PersonAstronaut(ApiModel):
    """Person merged with their astronaut detail; detail fields None when absent."""
    person_id: int
    name: str
    current_rank: str | None = None
    current_duty_title: str | None = None
    career_start_date: date | None = None
    career_end_date: date | None = None


class GetPeopleResult(BaseResponse):
    people: list[PersonAstronaut] = []


class GetPersonByNameResult(BaseResponse):
    person: PersonAstronaut | None = None


class CreatePersonResult(BaseResponse):
    id: int


class UpdatePersonResult(BaseResponse):
    id: int
