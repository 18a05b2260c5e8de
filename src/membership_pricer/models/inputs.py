"""Input records — what the form layer hands to the engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from membership_pricer.config.locations import Location
from membership_pricer.errors import InvalidInputError


def _check_child_ages(children_count: int, child_ages: tuple[int, ...]) -> None:
    if len(child_ages) != children_count:
        raise ValueError(
            f"child_ages has {len(child_ages)} entries but children_count is {children_count}"
        )
    for age in child_ages:
        if not 0 <= age <= 17:
            raise ValueError(f"child age {age} is outside 0-17")


class FamilyComposition(BaseModel):
    """Who is visiting.  ``child_ages`` must have exactly ``children_count`` entries."""

    model_config = ConfigDict(frozen=True)

    adult_count: int = Field(default=2, ge=1, description="Adults in the household")
    children_count: int = Field(default=0, ge=0, description="Children in the household")
    child_ages: tuple[int, ...] = Field(default=(), description="One age (0–17) per child")

    @model_validator(mode="after")
    def _ages_match_count(self) -> FamilyComposition:
        _check_child_ages(self.children_count, self.child_ages)
        return self

    @property
    def total_members(self) -> int:
        return self.adult_count + self.children_count

    def eligible_children(self, free_age_threshold: int) -> int:
        """Children old enough to need a paid ticket."""
        return sum(1 for age in self.child_ages if age >= free_age_threshold)


class VisitPlan(BaseModel):
    """Planned visits per site over one membership year."""

    model_config = ConfigDict(frozen=True)

    science_visits: int = Field(default=0, ge=0)
    dpkh_visits: int = Field(default=0, ge=0)
    dpkr_visits: int = Field(default=0, ge=0)

    def visits_at(self, location: Location) -> int:
        if location == Location.SCIENCE:
            return self.science_visits
        if location == Location.DPKH:
            return self.dpkh_visits
        if location == Location.DPKR:
            return self.dpkr_visits
        raise ValueError(f"unknown location {location!r}")

    @property
    def total_visits(self) -> int:
        return self.science_visits + self.dpkh_visits + self.dpkr_visits

    def capped(self, max_visits: int) -> VisitPlan:
        return VisitPlan(
            science_visits=min(self.science_visits, max_visits),
            dpkh_visits=min(self.dpkh_visits, max_visits),
            dpkr_visits=min(self.dpkr_visits, max_visits),
        )


class EligibilityFlags(BaseModel):
    """Independent yes/no answers from the 'special options' step."""

    model_config = ConfigDict(frozen=True)

    is_richmond_resident: bool = False
    needs_flexibility: bool = False
    is_welcome_eligible: bool = False
    include_parking: bool = False


class MembershipInput(BaseModel):
    """Flat boundary record for ``calculate_membership_costs``."""

    model_config = ConfigDict(frozen=True)

    adult_count: int = Field(default=2, ge=1)
    children_count: int = Field(default=0, ge=0)
    child_ages: tuple[int, ...] = ()
    science_visits: int = Field(default=0, ge=0)
    dpkh_visits: int = Field(default=0, ge=0)
    dpkr_visits: int = Field(default=0, ge=0)
    is_richmond_resident: bool = False
    needs_flexibility: bool = False
    is_welcome_eligible: bool = False
    include_parking: bool = False

    @model_validator(mode="after")
    def _ages_match_count(self) -> MembershipInput:
        _check_child_ages(self.children_count, self.child_ages)
        return self

    @property
    def family(self) -> FamilyComposition:
        return FamilyComposition(
            adult_count=self.adult_count,
            children_count=self.children_count,
            child_ages=self.child_ages,
        )

    @property
    def visits(self) -> VisitPlan:
        return VisitPlan(
            science_visits=self.science_visits,
            dpkh_visits=self.dpkh_visits,
            dpkr_visits=self.dpkr_visits,
        )

    @property
    def flags(self) -> EligibilityFlags:
        return EligibilityFlags(
            is_richmond_resident=self.is_richmond_resident,
            needs_flexibility=self.needs_flexibility,
            is_welcome_eligible=self.is_welcome_eligible,
            include_parking=self.include_parking,
        )


def parse_membership_input(data: dict[str, Any]) -> MembershipInput:
    """Build a ``MembershipInput`` from a plain mapping, raising ``InvalidInputError`` on bad data."""
    try:
        return MembershipInput(**data)
    except ValidationError as exc:
        raise InvalidInputError(str(exc)) from exc
