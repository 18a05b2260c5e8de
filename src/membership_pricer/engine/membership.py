"""Membership price calculator — prices every candidate plan and picks one.

Steps, in order (later steps consume earlier results):
  1. Clamp family size to the configured maxima
  2. Determine the family's primary site
  3. Enumerate candidates: Basic × 3 sites, ScienceKids, Welcome (if
     eligible), Pay-As-You-Go
  4. Price each: tier price → promotional discount → add-ons (flexibility,
     parking) → admission at uncovered sites less guest discounts
  5. Select the cheapest; ties go to the simpler plan
     (Basic < ScienceKids < Welcome < Pay-As-You-Go)
  6. Attach the Welcome alternative when eligible but not selected
  7. Assemble the itemized breakdown

Stateless: identical inputs and configuration give identical results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from membership_pricer.config.locations import (
    LOCATION_ORDER,
    LOCATION_SHORT_LABELS,
    SCIENCE_KIDS_SITE,
    Location,
    get_location_label,
)
from membership_pricer.config.pricing import PricingConfiguration
from membership_pricer.engine.admission import (
    calculate_location_admission_cost,
    calculate_parking_cost,
    calculate_regular_admission_breakdown,
    calculate_regular_admission_cost,
    determine_primary_location,
)
from membership_pricer.engine.discounts import (
    apply_discount,
    calculate_guest_admission_savings,
    calculate_welcome_program_pricing,
    format_money,
    is_eligible_for_discount,
    round_currency,
    savings_percentage,
)
from membership_pricer.models.inputs import EligibilityFlags, FamilyComposition, MembershipInput, VisitPlan
from membership_pricer.models.options import (
    BasicSingleSite,
    MembershipOption,
    MembershipType,
    PayAsYouGo,
    ScienceKidsCombo,
    Welcome,
    WelcomeMode,
)
from membership_pricer.models.results import (
    CostLineItem,
    GuestSavings,
    PlanQuote,
    Recommendation,
    WelcomeRecommendation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingContext:
    """Everything a candidate needs to price itself, computed once per call."""

    config: PricingConfiguration
    family: FamilyComposition
    visits: VisitPlan
    flags: EligibilityFlags
    primary_location: Location
    guest_savings: GuestSavings
    # Set exactly when the family is Welcome-eligible, which is when Welcome is a candidate
    welcome: WelcomeRecommendation | None = None


# ═══════════════════════════════════════════════════════════════════════════
# Candidates
# ═══════════════════════════════════════════════════════════════════════════

def enumerate_membership_options(is_welcome_eligible: bool) -> list[MembershipOption]:
    """Candidate plans in tie-break preference order."""
    options: list[MembershipOption] = [BasicSingleSite(location) for location in LOCATION_ORDER]
    options.append(ScienceKidsCombo())
    if is_welcome_eligible:
        options.append(Welcome(WelcomeMode.MEMBERSHIP))
    options.append(PayAsYouGo())
    return options


def price_option(option: MembershipOption, ctx: PricingContext) -> PlanQuote:
    """Fully price one candidate."""
    if isinstance(option, BasicSingleSite):
        return _price_membership_tier(
            ctx, option.membership_type, option.preference_rank,
            discount_site=option.location, covered=(option.location,),
        )
    if isinstance(option, ScienceKidsCombo):
        return _price_membership_tier(
            ctx, option.membership_type, option.preference_rank,
            discount_site=SCIENCE_KIDS_SITE, covered=LOCATION_ORDER,
        )
    if isinstance(option, Welcome):
        return _price_welcome(ctx, option)
    if isinstance(option, PayAsYouGo):
        return _price_pay_as_you_go(ctx, option)
    raise TypeError(f"unhandled membership option {option!r}")


def _parking_add_on(ctx: PricingContext) -> CostLineItem | None:
    science_visits = ctx.visits.science_visits
    if not ctx.flags.include_parking or science_visits <= 0:
        return None
    return CostLineItem(
        label="Parking at Science",
        cost=calculate_parking_cost(ctx.config, science_visits),
        details=f"{science_visits} visits × {format_money(ctx.config.parking_rate('standard'))} per visit",
    )


def _price_membership_tier(
    ctx: PricingContext,
    tier: MembershipType,
    preference_rank: int,
    discount_site: Location | str,
    covered: tuple[Location, ...],
) -> PlanQuote:
    config = ctx.config
    members = ctx.family.total_members

    base_price = config.membership_price(tier)
    discount_eligible = is_eligible_for_discount(config, members, discount_site, tier)
    discounted_price = apply_discount(config, base_price, members, discount_site, tier)

    breakdown: list[CostLineItem] = [
        CostLineItem(
            label=config.membership_label(tier),
            cost=base_price,
            details="Annual household membership",
        ),
    ]
    if discount_eligible:
        breakdown.append(CostLineItem(
            label=f"Promotional discount ({round_currency(config.discount_rate() * 100)}% off)",
            cost=discounted_price - base_price,
            details=f"{members} family members",
        ))

    # ── Add-ons ────────────────────────────────────────────────────────
    add_ons: list[CostLineItem] = []
    upgrade = config.flexibility_upgrade(tier)
    if ctx.flags.needs_flexibility and upgrade > 0:
        add_ons.append(CostLineItem(
            label="Flexible adults upgrade",
            cost=upgrade,
            details="Different adults can bring the children on different days",
        ))
    parking = _parking_add_on(ctx)
    if parking is not None:
        add_ons.append(parking)
    breakdown.extend(add_ons)

    # ── Sites the tier does not cover, at guest rates ──────────────────
    general_admission = 0.0
    guest_sites: list[str] = []
    for location in LOCATION_ORDER:
        if location in covered:
            continue
        visits = ctx.visits.visits_at(location)
        regular = calculate_location_admission_cost(
            config, location, visits, ctx.family, ctx.flags.is_richmond_resident,
        )
        if regular <= 0:
            continue
        saving = ctx.guest_savings.by_location.get(location, 0)
        general_admission += max(0.0, regular - saving)
        guest_sites.append(LOCATION_SHORT_LABELS[location])

        breakdown.append(CostLineItem(
            label=f"Admission at {get_location_label(location)}",
            cost=regular,
            details=f"{visits} visits",
        ))
        if saving > 0:
            rate = config.guest_savings_rate(location == ctx.primary_location)
            breakdown.append(CostLineItem(
                label=f"{LOCATION_SHORT_LABELS[location]} guest discounts ({round_currency(rate * 100)}% off)",
                cost=-saving,
                details=f"First {min(visits, config.constraints.max_visits_per_location)} visits",
            ))

    total_price = discounted_price + sum(item.cost for item in add_ons) + general_admission

    return PlanQuote(
        membership_type=tier,
        label=config.membership_label(tier),
        preference_rank=preference_rank,
        base_price=base_price,
        discounted_price=discounted_price,
        discount_eligible=discount_eligible,
        add_ons=tuple(add_ons),
        general_admission_cost=general_admission,
        general_admission_note=(
            f"Discounted guest admission at {', '.join(guest_sites)}" if guest_sites else ""
        ),
        total_price=max(0.0, total_price),
        breakdown=tuple(breakdown),
    )


def _price_welcome(ctx: PricingContext, option: Welcome) -> PlanQuote:
    """Quote built from the membership-mode pricing already computed for the context."""
    welcome = ctx.welcome

    add_ons: tuple[CostLineItem, ...] = ()
    if welcome.parking_cost > 0:
        add_ons = (CostLineItem(label="Parking at Science", cost=welcome.parking_cost),)
    base_price = welcome.base_price

    return PlanQuote(
        membership_type=option.membership_type,
        label=welcome.label,
        preference_rank=option.preference_rank,
        base_price=base_price,
        discounted_price=base_price,
        discount_eligible=False,
        add_ons=add_ons,
        general_admission_cost=welcome.cross_location_cost,
        general_admission_note=(
            f"{format_money(welcome.price_per_person)} per person at other locations"
            if welcome.cross_location_visits > 0 else ""
        ),
        total_price=welcome.total_price,
        breakdown=welcome.cost_breakdown,
    )


def _price_pay_as_you_go(ctx: PricingContext, option: PayAsYouGo) -> PlanQuote:
    admissions = calculate_regular_admission_breakdown(
        ctx.config, ctx.family, ctx.visits, ctx.flags.is_richmond_resident,
    )
    admission_total = sum(item.cost for item in admissions)
    parking = _parking_add_on(ctx)
    add_ons = (parking,) if parking is not None else ()

    return PlanQuote(
        membership_type=option.membership_type,
        label="Regular Admission (no membership)",
        preference_rank=option.preference_rank,
        base_price=0.0,
        discounted_price=0.0,
        discount_eligible=False,
        add_ons=add_ons,
        general_admission_cost=admission_total,
        general_admission_note="Regular admission at every visited location" if admissions else "",
        total_price=admission_total + sum(item.cost for item in add_ons),
        breakdown=(*admissions, *add_ons),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Entry point
# ═══════════════════════════════════════════════════════════════════════════

def clamp_family(config: PricingConfiguration, family: FamilyComposition) -> FamilyComposition:
    """Cap adult and child counts at the configured maxima; extra child ages are dropped."""
    limits = config.constraints
    adults = min(max(1, family.adult_count), limits.max_adults)
    children = min(max(0, family.children_count), limits.max_children)
    if adults == family.adult_count and children == family.children_count:
        return family
    logger.warning(
        "Clamping family of %d adults / %d children to configured maxima (%d / %d)",
        family.adult_count, family.children_count, limits.max_adults, limits.max_children,
    )
    return FamilyComposition(
        adult_count=adults,
        children_count=children,
        child_ages=family.child_ages[:children],
    )


def calculate_membership_costs(config: PricingConfiguration, request: MembershipInput) -> Recommendation:
    """Recommend the cheapest plan for one family and visit plan."""
    family = clamp_family(config, request.family)
    visits = request.visits
    flags = request.flags

    primary = determine_primary_location(visits.science_visits, visits.dpkh_visits, visits.dpkr_visits)
    guest_savings = calculate_guest_admission_savings(
        config, family, visits, primary, flags.is_richmond_resident,
    )
    welcome = (
        calculate_welcome_program_pricing(
            config, family, visits,
            location=primary,
            mode=WelcomeMode.MEMBERSHIP,
            include_parking=flags.include_parking,
            is_richmond_resident=flags.is_richmond_resident,
        )
        if flags.is_welcome_eligible
        else None
    )
    ctx = PricingContext(
        config=config,
        family=family,
        visits=visits,
        flags=flags,
        primary_location=primary,
        guest_savings=guest_savings,
        welcome=welcome,
    )

    quotes = [price_option(option, ctx) for option in enumerate_membership_options(flags.is_welcome_eligible)]
    # sorted() is stable, so equal keys keep enumeration order (Science → DPKH → DPKR within Basic)
    ranked = sorted(quotes, key=lambda q: (q.total_price, q.preference_rank))
    best = ranked[0]
    logger.debug(
        "Selected %s at %.2f (config %s, %d candidates)",
        best.membership_type.value, best.total_price, config.version, len(ranked),
    )

    regular_admission_cost = calculate_regular_admission_cost(
        config, family, visits, flags.is_richmond_resident,
    )
    if flags.include_parking:
        regular_admission_cost += calculate_parking_cost(config, visits.science_visits)
    savings = max(0.0, regular_admission_cost - best.total_price)

    welcome_option = welcome if welcome is not None and best.membership_type != MembershipType.WELCOME else None

    cost_breakdown = list(best.breakdown)
    if welcome_option is not None:
        cost_breakdown.append(CostLineItem(
            label=f"Alternative: {welcome_option.label}",
            cost=welcome_option.total_price,
            details=welcome_option.explanation,
            informational=True,
        ))

    return Recommendation(
        best_membership_type=best.membership_type,
        best_membership_label=best.label,
        primary_location=primary,
        base_membership_price=best.base_price,
        base_membership_discount=best.discounted_price,
        discount_eligible=best.discount_eligible,
        total_family_members=family.total_members,
        additional_costs=best.add_ons,
        general_admission_costs=best.general_admission_cost,
        general_admission_note=best.general_admission_note,
        total_price=best.total_price,
        regular_admission_cost=regular_admission_cost,
        best_membership_savings=savings,
        savings_percentage=savings_percentage(savings, regular_admission_cost),
        guest_savings=guest_savings,
        welcome_program_option=welcome_option,
        candidates=tuple(ranked),
        cost_breakdown=tuple(cost_breakdown),
        config_version=config.version,
    )
