"""Narrative generator — plain-English reading of a ``Recommendation``.

Also derives the discount-eligibility panel (status, message, alert
style) that accompanies every recommendation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from membership_pricer.config.pricing import PricingConfiguration
from membership_pricer.engine.discounts import format_money, round_currency
from membership_pricer.models.options import MembershipType
from membership_pricer.models.results import Recommendation


class EligibilitySummary(BaseModel):
    is_eligible: bool
    message: str
    alert_type: Literal["success", "warning"]


def describe_eligibility(recommendation: Recommendation, config: PricingConfiguration) -> EligibilitySummary:
    """Eligibility status for the selected plan."""
    is_welcome = recommendation.best_membership_type == MembershipType.WELCOME
    is_eligible = recommendation.discount_eligible or is_welcome
    minimum = config.discount_minimum_members()
    discount_rate = round_currency(config.discount_rate() * 100)

    if recommendation.discount_eligible:
        message = f"✓ Eligible for {discount_rate}% discount"
    elif is_welcome:
        message = "✓ Eligible for Welcome Program pricing"
    elif recommendation.total_family_members < minimum:
        message = f"! Not eligible for discount: requires {minimum} or more people."
    elif recommendation.best_membership_type == MembershipType.BASIC_DPKR:
        message = (
            "! Not eligible for discount: Rockingham memberships do not "
            "qualify for the promotional discount."
        )
    elif recommendation.best_membership_type == MembershipType.PAY_AS_YOU_GO:
        message = "Regular admission (no membership)"
    else:
        message = "! Not eligible for current discount."

    return EligibilitySummary(
        is_eligible=is_eligible,
        message=message,
        alert_type="success" if is_eligible else "warning",
    )


def generate_narrative(recommendation: Recommendation) -> str:
    """Short text block: the pick, its cost, the comparison, and any Welcome notice."""
    r = recommendation
    lines: list[str] = [
        f"Recommended: {r.best_membership_label}",
        f"Total for the year: {format_money(r.total_price)}",
    ]

    if r.base_membership_price > 0:
        if r.discount_eligible:
            lines.append(
                f"Membership: {format_money(r.base_membership_discount)} "
                f"(down from {format_money(r.base_membership_price)})"
            )
        else:
            lines.append(f"Membership: {format_money(r.base_membership_price)}")

    for item in r.additional_costs:
        lines.append(f"+ {item.label}: {format_money(item.cost)}")
    if r.general_admission_costs > 0:
        note = f" ({r.general_admission_note})" if r.general_admission_note else ""
        lines.append(f"+ Admission at other locations: {format_money(r.general_admission_costs)}{note}")

    if r.best_membership_type != MembershipType.PAY_AS_YOU_GO:
        if r.best_membership_savings > 0:
            lines.append(
                f"Saves {format_money(r.best_membership_savings)} ({r.savings_percentage}%) "
                f"versus paying {format_money(r.regular_admission_cost)} at the door."
            )
        else:
            lines.append(f"Paying at the door would cost {format_money(r.regular_admission_cost)}.")

    if r.welcome_program_option is not None:
        w = r.welcome_program_option
        lines.append(
            f"Welcome Program alternative: {w.label} for {format_money(w.total_price)}. {w.explanation}"
        )

    return "\n".join(lines)
