#!/usr/bin/env python3
"""
Matcher Models - Input data structures for matching.

Candidates and criteria arrive from the search/booking layer as camelCase
payloads. They are validated here, once, so the scorers can assume sane
numbers: coordinates in range, non-negative rates and counts, no NaN.
"""

from typing import Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from pro_scout.exceptions import InvalidMatchInputError

ExperienceLevel = Literal["any", "beginner", "intermediate", "expert"]
VerificationLevel = Literal["basic", "enhanced", "background-check"]
TimeSlot = Literal["morning", "afternoon", "evening"]


class _InputModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


class GeoPoint(_InputModel):
    """Latitude/longitude pair in decimal degrees."""
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class BudgetRange(_InputModel):
    """Acceptable hourly-rate range, same currency unit as candidate rates."""
    min: float = Field(ge=0)
    max: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "BudgetRange":
        if self.min > self.max:
            raise ValueError(f"budget min {self.min} is greater than max {self.max}")
        return self


class Availability(_InputModel):
    morning: bool = False
    afternoon: bool = False
    evening: bool = False

    def is_available(self, slot: str) -> bool:
        return bool(getattr(self, slot, False))

    def slots(self) -> List[str]:
        return [slot for slot in ("morning", "afternoon", "evening") if self.is_available(slot)]


class Candidate(_InputModel):
    """Immutable snapshot of a service professional being evaluated."""
    id: str
    services: Tuple[str, ...]
    location: GeoPoint
    hourly_rate: float = Field(ge=0)
    languages: Tuple[str, ...]
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(ge=0)
    experience_years: float = Field(ge=0)
    verification_level: VerificationLevel
    availability: Availability
    response_time_minutes: float = Field(ge=0)
    on_time_rate: float = Field(ge=0, le=100)


class Criteria(_InputModel):
    """
    Requester match preferences.

    Every field is optional; None means "this criterion does not apply",
    which is distinct from a criterion that applied and scored zero.
    """
    service_type: Optional[str] = None
    location: Optional[GeoPoint] = None
    budget: Optional[BudgetRange] = None
    languages: Optional[Tuple[str, ...]] = None
    preferred_times: Optional[Tuple[TimeSlot, ...]] = None
    experience_level: Optional[ExperienceLevel] = None
    verification_required: Optional[bool] = None


def as_candidate(obj: Any, position: Optional[int] = None) -> Candidate:
    """Return obj as a validated Candidate, accepting models or mappings."""
    if isinstance(obj, Candidate):
        return obj
    try:
        return Candidate.model_validate(obj)
    except ValidationError as e:
        where = f"candidate at position {position}" if position is not None else "candidate"
        raise InvalidMatchInputError(f"Invalid {where}: {e}", item=obj) from e


def as_criteria(obj: Any) -> Criteria:
    """Return obj as validated Criteria; None means no criteria at all."""
    if obj is None:
        return Criteria()
    if isinstance(obj, Criteria):
        return obj
    try:
        return Criteria.model_validate(obj)
    except ValidationError as e:
        raise InvalidMatchInputError(f"Invalid criteria: {e}", item=obj) from e
