"""Tests for the admission calculator — primary site, pay-as-you-go, parking."""

from __future__ import annotations

import pytest

from membership_pricer.config import Location, PricingConfiguration, pricing_config_from_dict
from membership_pricer.engine import (
    calculate_location_admission_cost,
    calculate_parking_cost,
    calculate_regular_admission_breakdown,
    calculate_regular_admission_cost,
    determine_primary_location,
)
from membership_pricer.models import FamilyComposition, VisitPlan


class TestPrimaryLocation:

    @pytest.mark.parametrize("counts, expected", [
        ((3, 3, 3), Location.SCIENCE),
        ((0, 5, 5), Location.DPKH),
        ((0, 0, 0), Location.SCIENCE),
        ((1, 2, 3), Location.DPKR),
        ((5, 5, 0), Location.SCIENCE),
        ((0, 0, 1), Location.DPKR),
        ((2, 5, 4), Location.DPKH),
    ])
    def test_most_visited_with_tie_break(self, counts, expected):
        assert determine_primary_location(*counts) == expected


class TestRegularAdmission:

    def test_free_age_thresholds_per_site(self, pricing: PricingConfiguration):
        """Toddler (1) is free at Science only; infant (0) is free everywhere."""
        family = FamilyComposition(adult_count=2, children_count=3, child_ages=(0, 1, 5))
        plan = VisitPlan(science_visits=1, dpkh_visits=1)
        # Science: 2×25 + 1×20; DPKH: 2×16 + 2×16
        assert calculate_location_admission_cost(pricing, Location.SCIENCE, 1, family) == 70
        assert calculate_location_admission_cost(pricing, Location.DPKH, 1, family) == 64
        assert calculate_regular_admission_cost(pricing, family, plan) == 134

    def test_resident_rate_only_at_rockingham(self, pricing: PricingConfiguration):
        family = FamilyComposition(adult_count=2)
        assert calculate_location_admission_cost(pricing, Location.DPKR, 2, family) == 48
        assert calculate_location_admission_cost(pricing, Location.DPKR, 2, family, True) == 36
        assert calculate_location_admission_cost(pricing, Location.SCIENCE, 2, family, True) == 100

    def test_no_visits_costs_nothing(self, pricing, family):
        assert calculate_regular_admission_cost(pricing, family, VisitPlan()) == 0

    def test_baseline_is_uncapped(self, pricing: PricingConfiguration):
        family = FamilyComposition(adult_count=1)
        plan = VisitPlan(science_visits=30)
        assert calculate_regular_admission_cost(pricing, family, plan) == 30 * 25

    def test_breakdown_lines(self, pricing, family, visits):
        items = calculate_regular_admission_breakdown(pricing, family, visits)
        assert [item.label for item in items] == [
            "Admission at Discovery Place Science",
            "Admission at Discovery Place Kids-Huntersville",
        ]
        assert [item.cost for item in items] == [360, 128]
        assert items[0].details == "4 visits × 4 people"
        assert sum(item.cost for item in items) == calculate_regular_admission_cost(pricing, family, visits)


class TestParking:

    def test_standard_rate(self, pricing):
        assert calculate_parking_cost(pricing, 5) == 40

    def test_no_visits(self, pricing):
        assert calculate_parking_cost(pricing, 0) == 0

    def test_welcome_rate(self, pricing_data):
        pricing_data["parking"]["welcome"] = 5
        config = pricing_config_from_dict(pricing_data)
        assert calculate_parking_cost(config, 5, is_welcome_context=True) == 25
        assert calculate_parking_cost(config, 5) == 40
