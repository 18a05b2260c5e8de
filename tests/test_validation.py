"""Tests for input records and the boundary parser."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from membership_pricer.errors import InvalidInputError
from membership_pricer.models import (
    EligibilityFlags,
    FamilyComposition,
    MembershipInput,
    VisitPlan,
    parse_membership_input,
)
from membership_pricer.config import Location


class TestFamilyComposition:

    def test_defaults(self):
        family = FamilyComposition()
        assert family.adult_count == 2
        assert family.children_count == 0
        assert family.total_members == 2

    def test_ages_must_match_count(self):
        with pytest.raises(ValidationError, match="child_ages"):
            FamilyComposition(adult_count=2, children_count=2, child_ages=(5,))

    def test_age_out_of_range(self):
        with pytest.raises(ValidationError):
            FamilyComposition(adult_count=1, children_count=1, child_ages=(18,))

    def test_at_least_one_adult(self):
        with pytest.raises(ValidationError):
            FamilyComposition(adult_count=0)

    def test_eligible_children(self):
        family = FamilyComposition(adult_count=2, children_count=3, child_ages=(0, 1, 5))
        assert family.eligible_children(2) == 1
        assert family.eligible_children(1) == 2
        assert family.eligible_children(0) == 3

    def test_frozen(self, family: FamilyComposition):
        with pytest.raises(ValidationError):
            family.adult_count = 3


class TestVisitPlan:

    def test_negative_visits_rejected(self):
        with pytest.raises(ValidationError):
            VisitPlan(science_visits=-1)

    def test_visits_at(self, visits: VisitPlan):
        assert visits.visits_at(Location.SCIENCE) == 4
        assert visits.visits_at(Location.DPKH) == 2
        assert visits.visits_at(Location.DPKR) == 0
        assert visits.total_visits == 6

    def test_capped(self):
        plan = VisitPlan(science_visits=50, dpkh_visits=3, dpkr_visits=24)
        capped = plan.capped(24)
        assert (capped.science_visits, capped.dpkh_visits, capped.dpkr_visits) == (24, 3, 24)


class TestMembershipInput:

    def test_views(self, base_input: MembershipInput):
        assert base_input.family == FamilyComposition(adult_count=2, children_count=2, child_ages=(5, 7))
        assert base_input.visits == VisitPlan(science_visits=4, dpkh_visits=2)
        assert base_input.flags == EligibilityFlags()

    def test_mismatched_ages_rejected(self):
        with pytest.raises(ValidationError):
            MembershipInput(adult_count=2, children_count=3, child_ages=(4, 6))

    def test_parse_valid_mapping(self):
        request = parse_membership_input({
            "adult_count": 1,
            "children_count": 1,
            "child_ages": [3],
            "dpkr_visits": 2,
            "is_richmond_resident": True,
        })
        assert request.child_ages == (3,)
        assert request.flags.is_richmond_resident is True

    def test_parse_invalid_mapping(self):
        with pytest.raises(InvalidInputError):
            parse_membership_input({"adult_count": 2, "children_count": 2, "child_ages": [4]})

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_membership_input({"science_visits": -3})
