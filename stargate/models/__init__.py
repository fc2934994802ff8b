"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Person is the aggregate root; details and duties are scoped by person_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from stargate.models.person import Person  # noqa: F401
from stargate.models.astronaut_detail import AstronautDetail  # noqa: F401
from stargate.models.astronaut_duty import AstronautDuty  # noqa: F401
