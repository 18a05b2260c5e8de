"""Top-level pricing configuration — bundles every price, rate and limit.

One ``PricingConfiguration`` value is one immutable snapshot.  Engine
functions take it as an explicit argument; nothing reads it as global
state.  Accessors raise ``ConfigurationError`` for undefined keys.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from membership_pricer.config.admission import LocationAdmission
from membership_pricer.config.discounts import (
    GuestDiscountConfig,
    PromotionConfig,
    WelcomeProgramConfig,
)
from membership_pricer.config.locations import Location
from membership_pricer.config.memberships import MembershipTierConfig
from membership_pricer.errors import ConfigurationError

VisitorClass = Literal["adult", "child"]
ParkingContext = Literal["standard", "welcome"]


class ParkingConfig(BaseModel):
    """Flat per-visit parking rates at the Science garage."""

    model_config = ConfigDict(frozen=True)

    standard: float = Field(ge=0, description="Regular visitors and members ($/visit)")
    welcome: float = Field(ge=0, description="Welcome Program visitors ($/visit)")


class ConstraintsConfig(BaseModel):
    """Global input limits."""

    model_config = ConfigDict(frozen=True)

    max_adults: int = Field(ge=1)
    max_children: int = Field(ge=0)
    max_visits_per_location: int = Field(
        ge=0, description="Visits per site that count toward guest-discount savings",
    )


class PricingConfiguration(BaseModel):
    """Complete, versioned pricing snapshot."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(min_length=1, description="Snapshot identifier, e.g. '2025.1'")
    admission: dict[Location, LocationAdmission]
    memberships: dict[str, MembershipTierConfig]
    promotion: PromotionConfig
    guest_discounts: GuestDiscountConfig
    welcome_program: WelcomeProgramConfig
    parking: ParkingConfig
    constraints: ConstraintsConfig

    # ── Admission ──────────────────────────────────────────────────────

    def _location(self, location: Location | str) -> LocationAdmission:
        try:
            return self.admission[Location(location)]
        except (KeyError, ValueError):
            raise ConfigurationError(f"no admission prices configured for location {location!r}") from None

    def admission_price(
        self,
        location: Location | str,
        visitor_class: VisitorClass,
        resident: bool = False,
    ) -> float:
        """Single-visit price for one visitor; ``resident`` selects the resident tier when one exists."""
        prices = self._location(location)
        tier = prices.resident if resident and prices.resident is not None else prices
        if visitor_class == "adult":
            return tier.adult
        if visitor_class == "child":
            return tier.child
        raise ConfigurationError(f"unknown visitor class {visitor_class!r}")

    def child_free_age_threshold(self, location: Location | str) -> int:
        return self._location(location).child_free_age_threshold

    # ── Memberships ────────────────────────────────────────────────────

    def _tier(self, tier: str) -> MembershipTierConfig:
        key = getattr(tier, "value", tier)
        try:
            return self.memberships[key]
        except KeyError:
            raise ConfigurationError(f"no membership tier configured for {key!r}") from None

    def membership_price(self, tier: str) -> float:
        return self._tier(tier).price

    def membership_label(self, tier: str) -> str:
        return self._tier(tier).label

    def flexibility_upgrade(self, tier: str) -> float:
        return self._tier(tier).flexibility_upgrade

    # ── Promotion ──────────────────────────────────────────────────────

    def discount_rate(self) -> float:
        return self.promotion.current_rate

    def discount_minimum_members(self) -> int:
        return self.promotion.minimum_members

    def discount_eligible_locations(self) -> frozenset[str]:
        return self.promotion.eligible_locations

    # ── Guest admission ────────────────────────────────────────────────

    def guest_discount_rate(self, home: Location | str, visited: Location | str) -> float:
        """Published per-ticket guest discount; an absent pair means no discount."""
        try:
            row = self.guest_discounts.matrix.get(Location(home), {})
            return row.get(Location(visited), 0.0)
        except ValueError:
            return 0.0

    def guest_savings_rate(self, is_primary: bool) -> float:
        return self.guest_discounts.primary_rate if is_primary else self.guest_discounts.secondary_rate

    # ── Welcome Program / parking / limits ─────────────────────────────

    def welcome_program_params(self) -> WelcomeProgramConfig:
        return self.welcome_program

    def parking_rate(self, context: ParkingContext) -> float:
        if context == "standard":
            return self.parking.standard
        if context == "welcome":
            return self.parking.welcome
        raise ConfigurationError(f"unknown parking context {context!r}")
