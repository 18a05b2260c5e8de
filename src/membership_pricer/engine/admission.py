"""Admission cost calculator — pay-as-you-go totals, parking, primary site.

Pure arithmetic over a ``PricingConfiguration``; no visit cap is applied
here.  These figures are the uncapped "no membership" baseline.
"""

from __future__ import annotations

from membership_pricer.config.locations import LOCATION_ORDER, Location, get_location_label
from membership_pricer.config.pricing import PricingConfiguration
from membership_pricer.models.inputs import FamilyComposition, VisitPlan
from membership_pricer.models.results import CostLineItem


def determine_primary_location(science_visits: int, dpkh_visits: int, dpkr_visits: int) -> Location:
    """Site with the most planned visits.

    Ties go to the first site in Science → DPKH → DPKR order, and a
    family with no visits at all defaults to Science.
    """
    counts = {
        Location.SCIENCE: science_visits,
        Location.DPKH: dpkh_visits,
        Location.DPKR: dpkr_visits,
    }
    primary = Location.SCIENCE
    for location in LOCATION_ORDER:
        if counts[location] > counts[primary]:
            primary = location
    return primary


def calculate_location_admission_cost(
    config: PricingConfiguration,
    location: Location,
    visits: int,
    family: FamilyComposition,
    is_richmond_resident: bool = False,
) -> float:
    """Regular admission for ``visits`` trips to one site."""
    if visits <= 0:
        return 0.0
    resident = is_richmond_resident and location == Location.DPKR
    adult_price = config.admission_price(location, "adult", resident=resident)
    child_price = config.admission_price(location, "child", resident=resident)
    paying_children = family.eligible_children(config.child_free_age_threshold(location))
    return visits * (family.adult_count * adult_price + paying_children * child_price)


def calculate_regular_admission_breakdown(
    config: PricingConfiguration,
    family: FamilyComposition,
    visits: VisitPlan,
    is_richmond_resident: bool = False,
) -> list[CostLineItem]:
    """One line per visited site, Science → DPKH → DPKR."""
    items: list[CostLineItem] = []
    for location in LOCATION_ORDER:
        count = visits.visits_at(location)
        if count <= 0:
            continue
        cost = calculate_location_admission_cost(config, location, count, family, is_richmond_resident)
        paying = family.adult_count + family.eligible_children(config.child_free_age_threshold(location))
        items.append(CostLineItem(
            label=f"Admission at {get_location_label(location)}",
            cost=cost,
            details=f"{count} visits × {paying} people",
        ))
    return items


def calculate_regular_admission_cost(
    config: PricingConfiguration,
    family: FamilyComposition,
    visits: VisitPlan,
    is_richmond_resident: bool = False,
) -> float:
    """Pay-as-you-go admission total across all sites (parking excluded)."""
    return sum(
        calculate_location_admission_cost(
            config, location, visits.visits_at(location), family, is_richmond_resident,
        )
        for location in LOCATION_ORDER
    )


def calculate_parking_cost(
    config: PricingConfiguration,
    visits: int,
    is_welcome_context: bool = False,
) -> float:
    """Flat parking per visit; Welcome visitors may have their own rate."""
    if visits <= 0:
        return 0.0
    return visits * config.parking_rate("welcome" if is_welcome_context else "standard")
