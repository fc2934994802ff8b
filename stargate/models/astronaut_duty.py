"""AstronautDuty ORM: one entry in a person's append-only duty history.

Invariants:
    - Always belongs to a Person (person_id FK)
    - duty_end_date is NULL only for the most recently started duty
    - (person_id, duty_title, duty_start_date) is UNIQUE

Design Decisions:
    - Composite unique constraint backs up the duplicate-duty pre-check
    - Index on (person_id, duty_start_date): history reads and current-duty
      lookups both order by start date within a person
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stargate.db.base import Base


class AstronautDuty(Base):
    """A single duty assignment with its start and (optional) end date."""
    __tablename__ = "astronaut_duties"
    __table_args__ = (
        UniqueConstraint(
            "person_id", "duty_title", "duty_start_date",
            name="uq_astronaut_duties_person_title_start",
        ),
        Index("ix_astronaut_duties_person_start", "person_id", "duty_start_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("people.id", ondelete="CASCADE"), nullable=False,
    )
    rank: Mapped[str] = mapped_column(String(100), nullable=False)
    duty_title: Mapped[str] = mapped_column(String(200), nullable=False)
    duty_start_date: Mapped[date] = mapped_column(Date, nullable=False)
    duty_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    person: Mapped["Person"] = relationship(
        "Person", back_populates="astronaut_duties",
    )
