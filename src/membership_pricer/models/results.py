"""Result types — the contract between the engine and its callers.

Every result is a frozen, derived value constructed fresh per call.
Money is in whole currency units; negative ``cost`` on a line item
denotes a saving.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from membership_pricer.config.locations import Location
from membership_pricer.models.options import MembershipType, WelcomeMode


class CostLineItem(BaseModel):
    """One row of a cost breakdown."""

    model_config = ConfigDict(frozen=True)

    label: str
    cost: float
    details: str | None = None
    sub_items: tuple[CostLineItem, ...] = ()
    informational: bool = False
    """True for rows shown for comparison only; they are not part of the total."""


# ═══════════════════════════════════════════════════════════════════════════
# Discount service outputs
# ═══════════════════════════════════════════════════════════════════════════

class GuestSavings(BaseModel):
    """Guest-admission savings across all three sites."""

    model_config = ConfigDict(frozen=True)

    total: float
    breakdown: tuple[CostLineItem, ...]
    """One row per site with a strictly positive saving, in Science → DPKH → DPKR order."""
    primary_location: Location
    by_location: dict[Location, float] = Field(default_factory=dict)
    """Saving per site (0 where nothing was saved)."""


class WelcomeRecommendation(BaseModel):
    """Welcome Program pricing in membership or single-visit mode."""

    model_config = ConfigDict(frozen=True)

    mode: WelcomeMode
    membership_type: MembershipType
    label: str
    location: Location
    location_label: str

    base_price: float = 0.0
    """Flat membership price (membership mode)."""
    price_per_person: float = 0.0
    admission_cost: float = 0.0
    """People × per-person price (single-visit mode)."""
    parking_cost: float = 0.0
    cross_location_visits: int = 0
    cross_location_cost: float = 0.0
    people_included: int = 0
    max_people: int = 0
    total_price: float

    regular_admission_cost: float = 0.0
    savings: float = 0.0
    savings_percentage: int = 0

    purchase_link: str
    info_link: str
    explanation: str
    cost_breakdown: tuple[CostLineItem, ...] = ()


class PromotionBanner(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    discount_rate: float
    is_active: bool


# ═══════════════════════════════════════════════════════════════════════════
# Membership price calculator outputs
# ═══════════════════════════════════════════════════════════════════════════

class PlanQuote(BaseModel):
    """One fully priced candidate plan."""

    model_config = ConfigDict(frozen=True)

    membership_type: MembershipType
    label: str
    preference_rank: int
    base_price: float
    """Tier price before the promotional discount."""
    discounted_price: float
    """Tier price after the discount (equals ``base_price`` when ineligible)."""
    discount_eligible: bool
    add_ons: tuple[CostLineItem, ...] = ()
    general_admission_cost: float = 0.0
    """Admission at sites the plan does not cover, after guest discounts."""
    general_admission_note: str = ""
    total_price: float
    breakdown: tuple[CostLineItem, ...] = ()


class Recommendation(BaseModel):
    """Engine output for one family / visit plan / configuration snapshot."""

    model_config = ConfigDict(frozen=True)

    best_membership_type: MembershipType
    best_membership_label: str
    primary_location: Location

    base_membership_price: float
    base_membership_discount: float
    """Post-discount membership price; equals ``base_membership_price`` when not eligible."""
    discount_eligible: bool
    total_family_members: int

    additional_costs: tuple[CostLineItem, ...] = ()
    general_admission_costs: float = 0.0
    general_admission_note: str = ""
    total_price: float

    regular_admission_cost: float
    """What Pay-As-You-Go (admission + parking) would cost for the same plan."""
    best_membership_savings: float
    savings_percentage: int

    guest_savings: GuestSavings
    welcome_program_option: WelcomeRecommendation | None = None
    candidates: tuple[PlanQuote, ...] = ()
    """Every priced candidate, cheapest first."""
    cost_breakdown: tuple[CostLineItem, ...] = ()
    config_version: str
