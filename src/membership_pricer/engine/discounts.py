"""Discount service — promotion eligibility, guest savings, Welcome Program.

Every function is pure: inputs + a ``PricingConfiguration`` snapshot in,
a plain value out.  Rounding to whole currency units happens once per
monetary figure, at the point the figure is produced.
"""

from __future__ import annotations

import math

from membership_pricer.config.locations import (
    LOCATION_ORDER,
    LOCATION_SHORT_LABELS,
    SCIENCE_KIDS_SITE,
    Location,
    get_location_label,
)
from membership_pricer.config.pricing import PricingConfiguration
from membership_pricer.engine.admission import (
    calculate_parking_cost,
    calculate_regular_admission_cost,
)
from membership_pricer.models.inputs import FamilyComposition, VisitPlan
from membership_pricer.models.options import MembershipType, WelcomeMode
from membership_pricer.models.results import (
    CostLineItem,
    GuestSavings,
    PromotionBanner,
    WelcomeRecommendation,
)

# Display ceiling for savings percentages
MAX_SAVINGS_PERCENTAGE = 90


def round_currency(amount: float) -> int:
    """Round half-up to the nearest whole currency unit."""
    return int(math.floor(amount + 0.5))


def format_money(amount: float) -> str:
    if float(amount).is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def savings_percentage(savings: float, baseline: float) -> int:
    """``savings`` as a percentage of ``baseline``, capped for display; 0 when there is no baseline."""
    if baseline <= 0 or savings <= 0:
        return 0
    return min(MAX_SAVINGS_PERCENTAGE, round_currency(savings / baseline * 100))


def _site_key(code: Location | MembershipType | str) -> str:
    # Eligible sites are configured as plain strings
    return code.value if isinstance(code, (Location, MembershipType)) else code


# ═══════════════════════════════════════════════════════════════════════════
# Promotional membership discount
# ═══════════════════════════════════════════════════════════════════════════

def is_eligible_for_discount(
    config: PricingConfiguration,
    member_count: int,
    location: Location | str,
    membership_type: MembershipType | str | None = None,
) -> bool:
    """Whether a membership qualifies for the current promotion.

    Kids-Rockingham never qualifies.  The ScienceKids tier is judged on
    its aggregate site key rather than the family's home site.
    """
    if _site_key(location) == Location.DPKR.value:
        return False

    if member_count < config.discount_minimum_members():
        return False

    eligible = config.discount_eligible_locations()
    if membership_type is not None and _site_key(membership_type) == MembershipType.SCIENCE_KIDS.value:
        return SCIENCE_KIDS_SITE in eligible
    return _site_key(location) in eligible


def apply_discount(
    config: PricingConfiguration,
    price: float,
    member_count: int,
    location: Location | str,
    membership_type: MembershipType | str | None = None,
) -> float:
    """Promotional price when eligible, otherwise ``price`` unchanged."""
    if is_eligible_for_discount(config, member_count, location, membership_type):
        return round_currency(price * (1 - config.discount_rate()))
    return price


def get_eligibility_message(
    config: PricingConfiguration,
    member_count: int,
    location: Location | str,
    membership_type: MembershipType | str | None = None,
) -> str:
    minimum = config.discount_minimum_members()

    if not is_eligible_for_discount(config, member_count, location, membership_type):
        if member_count < minimum:
            return f"Not eligible for discount: requires {minimum} or more people."
        if _site_key(location) == Location.DPKR.value:
            return (
                "Not eligible for discount: Rockingham memberships do not "
                "qualify for the promotional discount."
            )
        return "Not eligible for current discount."

    discount_percent = round_currency(config.discount_rate() * 100)
    message = f"Eligible for {discount_percent}% membership discount!"

    try:
        row = config.guest_discounts.matrix.get(Location(_site_key(location)), {})
    except ValueError:
        row = {}
    guest_details = ", ".join(
        f"{round_currency(rate * 100)}% off at {visited.value}" for visited, rate in row.items()
    )
    if guest_details:
        message += f" Guest admission benefits: {guest_details}."
    return message


def get_promotion_banner(config: PricingConfiguration) -> PromotionBanner:
    banner = config.promotion.banner
    rate = config.discount_rate()
    return PromotionBanner(
        title=banner.title,
        description=banner.description,
        discount_rate=rate,
        is_active=rate > 0 and bool(banner.title or banner.description),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Guest admission
# ═══════════════════════════════════════════════════════════════════════════

def calculate_guest_admission(
    config: PricingConfiguration,
    regular_price: float,
    member_location: Location | str,
    visit_location: Location | str,
) -> float:
    """Single guest ticket priced from the published (home, visited) matrix."""
    rate = config.guest_discount_rate(member_location, visit_location)
    if rate <= 0:
        return regular_price
    return round_currency(regular_price * (1 - rate))


def calculate_guest_admission_savings(
    config: PricingConfiguration,
    family: FamilyComposition,
    visits: VisitPlan,
    primary_location: Location,
    is_richmond_resident: bool = False,
) -> GuestSavings:
    """Savings from member guest discounts at each site.

    Per site: visits are capped at ``max_visits_per_location``; the
    primary site earns ``primary_rate`` and every other site
    ``secondary_rate``; children under the site's free age are skipped.
    Kids-Rockingham prices use the resident tier for Richmond residents.
    Adult and child savings are each rounded; the site row is their sum.
    """
    capped = visits.capped(config.constraints.max_visits_per_location)
    breakdown: list[CostLineItem] = []
    by_location: dict[Location, float] = {}
    total = 0

    for location in LOCATION_ORDER:
        capped_visits = capped.visits_at(location)
        by_location[location] = 0
        if capped_visits <= 0:
            continue

        rate = config.guest_savings_rate(location == primary_location)
        resident = is_richmond_resident and location == Location.DPKR
        eligible_children = family.eligible_children(config.child_free_age_threshold(location))

        regular_adult = config.admission_price(location, "adult", resident=resident)
        regular_child = config.admission_price(location, "child", resident=resident)
        discounted_adult = regular_adult * (1 - rate)
        discounted_child = regular_child * (1 - rate)

        adult_saving = round_currency(capped_visits * family.adult_count * (regular_adult - discounted_adult))
        child_saving = round_currency(capped_visits * eligible_children * (regular_child - discounted_child))
        location_saving = adult_saving + child_saving

        if location_saving <= 0:
            continue

        by_location[location] = location_saving
        total += location_saving
        breakdown.append(CostLineItem(
            label=(
                f"{LOCATION_SHORT_LABELS[location]} guest discounts "
                f"({round_currency(rate * 100)}% off)"
            ),
            cost=-location_saving,
            details=f"{capped_visits} visits × {family.adult_count + eligible_children} people",
            sub_items=(
                CostLineItem(
                    label=f"Adult admission ({family.adult_count} × {capped_visits} visits)",
                    cost=-adult_saving,
                ),
                CostLineItem(
                    label=f"Child admission ({eligible_children} × {capped_visits} visits)",
                    cost=-child_saving,
                ),
            ),
        ))

    return GuestSavings(
        total=total,
        breakdown=tuple(breakdown),
        primary_location=primary_location,
        by_location=by_location,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Welcome Program
# ═══════════════════════════════════════════════════════════════════════════

def calculate_welcome_program_pricing(
    config: PricingConfiguration,
    family: FamilyComposition,
    visits: VisitPlan,
    location: Location = Location.SCIENCE,
    mode: WelcomeMode = WelcomeMode.MEMBERSHIP,
    include_parking: bool = True,
    is_richmond_resident: bool = False,
) -> WelcomeRecommendation:
    """Price the Welcome Program for one family.

    Membership mode: flat membership + Welcome-rate parking for Science
    visits + a per-person fee for every visit to a site other than
    ``location``.  Compared against pay-as-you-go for the same plan.

    Single-visit mode: per-person admission for one group visit, plus one
    flat parking fee at Science.
    """
    welcome = config.welcome_program_params()
    location = Location(location)
    location_label = get_location_label(location)
    purchase_link = welcome.purchase_links.get(location) or welcome.purchase_links.get(Location.SCIENCE, "")
    info_link = welcome.info_links.get(location) or welcome.info_links.get(Location.SCIENCE, "")
    people = family.total_members

    if mode == WelcomeMode.SINGLE_VISIT:
        included = min(people, welcome.max_single_visit_group)
        price = welcome.single_visit_price
        admission_cost = included * price
        parking_cost = (
            config.parking_rate("welcome")
            if include_parking and location == Location.SCIENCE
            else 0.0
        )
        label = f"Discovery Place Welcome Program Single Visit ({location_label})"
        return WelcomeRecommendation(
            mode=mode,
            membership_type=MembershipType.WELCOME_ADMISSION,
            label=label,
            location=location,
            location_label=location_label,
            price_per_person=price,
            admission_cost=admission_cost,
            parking_cost=parking_cost,
            people_included=included,
            max_people=welcome.max_single_visit_group,
            total_price=admission_cost + parking_cost,
            purchase_link=purchase_link,
            info_link=info_link,
            explanation=(
                f"{format_money(price)} per person for {included} people. "
                f"Includes same-day admission to {location_label}."
            ),
            cost_breakdown=(
                CostLineItem(
                    label=f"Welcome Program Admission ({location_label})",
                    cost=admission_cost,
                    details=f"{included} people × {format_money(price)} per person",
                ),
                CostLineItem(
                    label="Parking at Science",
                    cost=parking_cost,
                    details=f"{format_money(parking_cost)} flat rate" if parking_cost > 0 else None,
                ),
            ),
        )

    included = min(people, welcome.max_people)
    parking_cost = (
        calculate_parking_cost(config, visits.science_visits, is_welcome_context=True)
        if include_parking
        else 0.0
    )
    cross_location_visits = sum(
        visits.visits_at(other) for other in LOCATION_ORDER if other != location
    )
    cross_location_cost = cross_location_visits * included * welcome.single_visit_price
    base_price = welcome.membership_price
    total_price = base_price + parking_cost + cross_location_cost

    regular_admission_cost = calculate_regular_admission_cost(
        config, family, visits, is_richmond_resident,
    )
    if include_parking:
        regular_admission_cost += calculate_parking_cost(config, visits.science_visits)
    savings = max(0, regular_admission_cost - total_price)

    return WelcomeRecommendation(
        mode=mode,
        membership_type=MembershipType.WELCOME,
        label=f"Discovery Place Welcome Program Membership ({location_label})",
        location=location,
        location_label=location_label,
        base_price=base_price,
        price_per_person=welcome.single_visit_price,
        parking_cost=parking_cost,
        cross_location_visits=cross_location_visits,
        cross_location_cost=cross_location_cost,
        people_included=included,
        max_people=welcome.max_people,
        total_price=total_price,
        regular_admission_cost=regular_admission_cost,
        savings=savings,
        savings_percentage=savings_percentage(savings, regular_admission_cost),
        purchase_link=purchase_link,
        info_link=info_link,
        explanation=(
            f"Includes {included} people (up to {welcome.max_adults} adults and "
            f"{welcome.max_children} children) with access to {location_label}. "
            f"{format_money(welcome.single_visit_price)} admission per person at other locations."
        ),
        cost_breakdown=(
            CostLineItem(
                label=f"Welcome Program Membership ({location_label})",
                cost=base_price,
                details=f"Annual membership for up to {welcome.max_people} people",
            ),
            CostLineItem(
                label="Parking at Science",
                cost=parking_cost,
                details=(
                    f"{visits.science_visits} visits × "
                    f"{format_money(config.parking_rate('welcome'))} per visit"
                    if parking_cost > 0 else None
                ),
            ),
            CostLineItem(
                label="Cross-location Visits",
                cost=cross_location_cost,
                details=(
                    f"{cross_location_visits} visits × {included} people × "
                    f"{format_money(welcome.single_visit_price)} per person"
                    if cross_location_visits > 0 else None
                ),
            ),
        ),
    )
