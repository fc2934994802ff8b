"""Duty Lifecycle Rules: pure decisions for recording a new astronaut duty.

Invariants:
    - All functions are PURE: they compute values, the shell applies them to rows
    - The current duty is the one with the maximum duty_start_date, regardless
      of whether its end date is set
    - A tie on the maximum start date is a data-integrity violation, never resolved silently
    - A new duty may not start on the current duty's start date (ConflictError)
    - career_end_date is only ever SET (by a RETIRED duty), never cleared

Design Decisions:
    - DutyLike Protocol over ORM import: core stays free of SQLAlchemy
    - Closing a duty always uses (new start - 1 day), even when the new duty is
      backdated before the current one; ordering is the caller's responsibility
"""

from datetime import date, datetime, timedelta
from typing import Protocol, Sequence, TypeVar

from stargate.core.domain_types import RETIRED_DUTY_TITLE
from stargate.core.errors import ConflictError, DataIntegrityError, ErrorContext


class DutyLike(Protocol):
    """Structural contract for duty rows inspected by the lifecycle rules."""
    duty_start_date: date
    duty_end_date: date | None


D = TypeVar("D", bound=DutyLike)


def truncate_to_date(value: date | datetime) -> date:
    """Drop the time-of-day component, if any."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_before(value: date) -> date:
    return value - timedelta(days=1)


def is_retirement(duty_title: str) -> bool:
    return duty_title == RETIRED_DUTY_TITLE


def resolve_career_end_date(
    duty_title: str, duty_start_date: date, current_end_date: date | None,
) -> date | None:
    """Career end date after recording a duty. Non-retirement keeps the stored value."""
    if is_retirement(duty_title):
        return day_before(duty_start_date)
    return current_end_date


def closing_end_date(new_duty_start_date: date) -> date:
    """End date assigned to the previous current duty."""
    return day_before(new_duty_start_date)


def find_current_duty(
    duties: Sequence[D], person_id: int | None = None,
) -> D | None:
    """Return the duty with the latest start date, or None for an empty history.

    Raises DataIntegrityError when more than one duty shares the latest start date.
    """
    if not duties:
        return None
    latest_start = max(d.duty_start_date for d in duties)
    latest = [d for d in duties if d.duty_start_date == latest_start]
    if len(latest) > 1:
        raise DataIntegrityError(
            f"{len(latest)} duties share the latest start date {latest_start.isoformat()}",
            ErrorContext(person_id=person_id),
        )
    return latest[0]


def ensure_starts_apart_from_current(
    current_duty: DutyLike | None, new_duty_start_date: date, person_id: int | None = None,
) -> None:
    """Reject a new duty that starts on the same day as the current one.

    Closing the current duty would set its end before its own start, and the
    history would be left with two duties tied on the latest start date.
    """
    if current_duty is None or current_duty.duty_start_date != new_duty_start_date:
        return
    raise ConflictError(
        f"A duty already starts on {new_duty_start_date.isoformat()}",
        ErrorContext(person_id=person_id),
    )
