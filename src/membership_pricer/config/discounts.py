"""Promotional, guest-admission and Welcome Program discount settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from membership_pricer.config.locations import SCIENCE_KIDS_SITE, Location


class PromotionBannerConfig(BaseModel):
    """Copy for the limited-time promotion banner."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""


class PromotionConfig(BaseModel):
    """Current membership promotion."""

    model_config = ConfigDict(frozen=True)

    current_rate: float = Field(ge=0, lt=1, description="Fraction taken off eligible membership prices")
    minimum_members: int = Field(ge=1, description="Household size needed to qualify")
    eligible_locations: frozenset[str] = Field(
        description="Location codes (and the aggregate 'ScienceKids') that qualify",
    )
    banner: PromotionBannerConfig = Field(default_factory=PromotionBannerConfig)

    @field_validator("eligible_locations")
    @classmethod
    def _known_sites(cls, value: frozenset[str]) -> frozenset[str]:
        known = {location.value for location in Location} | {SCIENCE_KIDS_SITE}
        unknown = sorted(value - known)
        if unknown:
            raise ValueError(f"unknown promotion sites {unknown}; expected any of {sorted(known)}")
        return value


class GuestDiscountConfig(BaseModel):
    """Member discounts on admission at other sites.

    ``primary_rate`` / ``secondary_rate`` drive the savings estimate:
    the family's most-visited site gets the larger break.  ``matrix``
    holds the published per-ticket rate by (home, visited) site.
    """

    model_config = ConfigDict(frozen=True)

    primary_rate: float = Field(ge=0, lt=1, description="Guest discount at the family's primary site")
    secondary_rate: float = Field(ge=0, lt=1, description="Guest discount at every other site")
    matrix: dict[Location, dict[Location, float]] = Field(default_factory=dict)

    @field_validator("matrix")
    @classmethod
    def _rates_in_unit_interval(
        cls, value: dict[Location, dict[Location, float]],
    ) -> dict[Location, dict[Location, float]]:
        for home, row in value.items():
            for visited, rate in row.items():
                if not 0 <= rate < 1:
                    raise ValueError(
                        f"guest discount {home.value}->{visited.value} must be in [0, 1), got {rate}"
                    )
        return value


class WelcomeProgramConfig(BaseModel):
    """Income-eligible (EBT / WIC) pricing track."""

    model_config = ConfigDict(frozen=True)

    membership_price: float = Field(ge=0, description="Flat annual Welcome membership ($)")
    single_visit_price: float = Field(ge=0, description="Per-person admission ($)")
    max_people: int = Field(ge=1, description="People covered by one Welcome membership")
    max_adults: int = Field(ge=1)
    max_children: int = Field(ge=0)
    max_single_visit_group: int = Field(ge=1, description="People admitted on one single-visit purchase")
    purchase_links: dict[Location, str] = Field(default_factory=dict)
    info_links: dict[Location, str] = Field(default_factory=dict)
