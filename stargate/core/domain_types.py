"""Domain Types: request objects and sentinel values shared across layers.

Invariants:
    - RETIRED_DUTY_TITLE is the single source of truth for the retirement sentinel title

Design Decisions:
    - Request objects are frozen dataclasses: pre-processors return a normalized
      copy instead of mutating the caller's instance
"""

from dataclasses import dataclass
from datetime import date


# ─── Constants ───────────────────────────────────────────────────

RETIRED_DUTY_TITLE = "RETIRED"


# ─── Commands ────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreatePerson:
    name: str


@dataclass(frozen=True)
class UpdatePerson:
    current_name: str
    new_name: str


@dataclass(frozen=True)
class CreateAstronautDuty:
    name: str
    rank: str
    duty_title: str
    duty_start_date: date


# ─── Queries ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class GetPeople:
    pass


@dataclass(frozen=True)
class GetPersonByName:
    name: str


@dataclass(frozen=True)
class GetAstronautDutiesByName:
    name: str
