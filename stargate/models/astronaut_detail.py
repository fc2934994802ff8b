"""AstronautDetail ORM: the current assignment snapshot for a person.

Invariants:
    - At most one row per person (person_id UNIQUE)
    - Exists iff the person has at least one recorded duty
    - career_start_date is the first duty's start date and never changes
    - career_end_date is only set by a RETIRED duty
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stargate.db.base import Base


class AstronautDetail(Base):
    """Current rank, title, and career dates for one person."""
    __tablename__ = "astronaut_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    current_rank: Mapped[str] = mapped_column(String(100), nullable=False)
    current_duty_title: Mapped[str] = mapped_column(String(200), nullable=False)
    career_start_date: Mapped[date] = mapped_column(Date, nullable=False)
    career_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    person: Mapped["Person"] = relationship(
        "Person", back_populates="astronaut_detail",
    )
