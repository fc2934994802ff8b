"""Person ORM: persists a tracked person, the aggregate root.

Invariants:
    - id is an integer primary key assigned by the store
    - name is non-nullable and UNIQUE (store-level guard behind the pre-check)
    - A person owns at most one AstronautDetail and any number of AstronautDuty rows

Design Decisions:
    - cascade delete for detail and duties: no delete endpoint exists, but the
      ownership is encoded so a future one cannot orphan rows
    - lazy="raise" on collections: async sessions cannot lazy-load, queries must
      select what they need explicitly
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stargate.db.base import Base


class Person(Base):
    """Person aggregate root: owns the astronaut detail and duty history."""
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)

    # Relationships
    astronaut_detail: Mapped[Optional["AstronautDetail"]] = relationship(
        "AstronautDetail", back_populates="person", uselist=False,
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
    astronaut_duties: Mapped[list["AstronautDuty"]] = relationship(
        "AstronautDuty", back_populates="person",
        cascade="all, delete-orphan", passive_deletes=True, lazy="raise",
    )
