"""Engine — pure pricing and recommendation logic."""

from membership_pricer.engine.admission import (
    calculate_location_admission_cost,
    calculate_parking_cost,
    calculate_regular_admission_breakdown,
    calculate_regular_admission_cost,
    determine_primary_location,
)
from membership_pricer.engine.discounts import (
    apply_discount,
    calculate_guest_admission,
    calculate_guest_admission_savings,
    calculate_welcome_program_pricing,
    get_eligibility_message,
    get_promotion_banner,
    is_eligible_for_discount,
    round_currency,
)
from membership_pricer.engine.membership import (
    calculate_membership_costs,
    clamp_family,
    enumerate_membership_options,
    price_option,
)

__all__ = [
    # Admission cost calculator
    "determine_primary_location",
    "calculate_location_admission_cost",
    "calculate_regular_admission_breakdown",
    "calculate_regular_admission_cost",
    "calculate_parking_cost",
    # Discount service
    "is_eligible_for_discount",
    "apply_discount",
    "calculate_guest_admission",
    "calculate_guest_admission_savings",
    "calculate_welcome_program_pricing",
    "get_eligibility_message",
    "get_promotion_banner",
    "round_currency",
    # Membership price calculator
    "calculate_membership_costs",
    "clamp_family",
    "enumerate_membership_options",
    "price_option",
]
