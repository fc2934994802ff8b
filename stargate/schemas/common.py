"""Common Schema Pieces: camelCase base model and the shared response envelope.

Invariants:
    - Every response carries success, message, responseCode
    - Aliases are generated, never hand-written per field
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all API schemas: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class BaseResponse(ApiModel):
    """Envelope fields present on every successful response."""
    success: bool = True
    message: str = "Successful"
    response_code: int = 200
