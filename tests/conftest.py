"""Shared test fixtures: a pricing table built from a dict with the default prices."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from membership_pricer.config import PricingConfiguration, pricing_config_from_dict
from membership_pricer.models import FamilyComposition, MembershipInput, VisitPlan


_PRICING_DATA: dict[str, Any] = {
    "version": "test-1",
    "admission": {
        "Science": {"adult": 25, "child": 20, "child_free_age_threshold": 2},
        "DPKH": {"adult": 16, "child": 16, "child_free_age_threshold": 1},
        "DPKR": {
            "adult": 12, "child": 12, "child_free_age_threshold": 1,
            "resident": {"adult": 9, "child": 9},
        },
    },
    "memberships": {
        "BasicScience": {"label": "Basic Membership (Discovery Place Science)", "price": 189, "flexibility_upgrade": 40},
        "BasicDPKH": {"label": "Basic Membership (Discovery Place Kids-Huntersville)", "price": 159, "flexibility_upgrade": 40},
        "BasicDPKR": {"label": "Basic Membership (Discovery Place Kids-Rockingham)", "price": 119, "flexibility_upgrade": 30},
        "ScienceKids": {"label": "Science + Kids Membership", "price": 269, "flexibility_upgrade": 50},
    },
    "promotion": {
        "current_rate": 0.20,
        "minimum_members": 5,
        "eligible_locations": ["Science", "DPKH", "ScienceKids"],
        "banner": {"title": "20% Off Memberships", "description": "Households of 5 or more save 20%."},
    },
    "guest_discounts": {
        "primary_rate": 0.50,
        "secondary_rate": 0.25,
        "matrix": {
            "Science": {"DPKH": 0.50, "DPKR": 0.50},
            "DPKH": {"Science": 0.50, "DPKR": 0.50},
            "DPKR": {"Science": 0.25, "DPKH": 0.25},
        },
    },
    "welcome_program": {
        "membership_price": 25,
        "single_visit_price": 3,
        "max_people": 6,
        "max_adults": 2,
        "max_children": 4,
        "max_single_visit_group": 6,
        "purchase_links": {
            "Science": "https://example.org/welcome/science",
            "DPKH": "https://example.org/welcome/dpkh",
            "DPKR": "https://example.org/welcome/dpkr",
        },
        "info_links": {
            "Science": "https://example.org/info/science",
            "DPKH": "https://example.org/info/dpkh",
            "DPKR": "https://example.org/info/dpkr",
        },
    },
    "parking": {"standard": 8, "welcome": 8},
    "constraints": {"max_adults": 4, "max_children": 8, "max_visits_per_location": 24},
}


@pytest.fixture
def pricing_data() -> dict[str, Any]:
    """Mutable copy of the raw table, for tests that build variant configs."""
    return copy.deepcopy(_PRICING_DATA)


@pytest.fixture
def pricing(pricing_data: dict[str, Any]) -> PricingConfiguration:
    return pricing_config_from_dict(pricing_data)


@pytest.fixture
def family() -> FamilyComposition:
    """Two adults, children aged 5 and 7."""
    return FamilyComposition(adult_count=2, children_count=2, child_ages=(5, 7))


@pytest.fixture
def visits() -> VisitPlan:
    """4 Science / 2 Kids-Huntersville / 0 Kids-Rockingham."""
    return VisitPlan(science_visits=4, dpkh_visits=2, dpkr_visits=0)


@pytest.fixture
def base_input() -> MembershipInput:
    """The default form state: 2 adults, kids 5 and 7, 4 Science / 2 DPKH visits, no flags."""
    return MembershipInput(
        adult_count=2,
        children_count=2,
        child_ages=(5, 7),
        science_visits=4,
        dpkh_visits=2,
        dpkr_visits=0,
    )
