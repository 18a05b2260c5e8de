"""Display helpers for callers that render a recommendation."""

from __future__ import annotations

import math

from pydantic import BaseModel

from membership_pricer.config.locations import LOCATION_ORDER, LOCATION_SHORT_LABELS, Location, get_location_label
from membership_pricer.models.inputs import VisitPlan
from membership_pricer.models.options import MembershipType

# Upper bound for any amount shown on screen ($)
MAX_DISPLAY_AMOUNT = 100_000

LOCATION_ICONS: dict[Location, str] = {
    Location.SCIENCE: "science",
    Location.DPKH: "kids-huntersville",
    Location.DPKR: "kids-rockingham",
}


class VisitShare(BaseModel):
    name: str
    short_name: str
    location: Location
    value: int


def display_amount(amount: float) -> float:
    """Clamp a monetary figure to ``[0, MAX_DISPLAY_AMOUNT]``; NaN shows as 0."""
    if math.isnan(amount):
        return 0.0
    return min(max(0.0, amount), MAX_DISPLAY_AMOUNT)


def location_icon(location: Location) -> str:
    return LOCATION_ICONS[location]


def visit_distribution(visits: VisitPlan) -> list[VisitShare]:
    """Visited sites with their counts; empty when nothing is planned."""
    if visits.total_visits == 0:
        return []
    return [
        VisitShare(
            name=get_location_label(location),
            short_name=LOCATION_SHORT_LABELS[location],
            location=location,
            value=visits.visits_at(location),
        )
        for location in LOCATION_ORDER
        if visits.visits_at(location) > 0
    ]


def membership_price_label(membership_type: MembershipType) -> str:
    if membership_type.value.startswith("Basic"):
        return "Basic Membership:"
    if membership_type == MembershipType.WELCOME:
        return "Welcome Program:"
    if membership_type == MembershipType.PAY_AS_YOU_GO:
        return "Regular Admission:"
    return "Membership:"


def price_period(membership_type: MembershipType) -> str:
    return "for all visits" if membership_type == MembershipType.PAY_AS_YOU_GO else "per year"
