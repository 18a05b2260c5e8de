"""Tests for the eligibility summary and narrative text."""

from __future__ import annotations

from membership_pricer.api.narrative import describe_eligibility, generate_narrative
from membership_pricer.engine import calculate_membership_costs
from membership_pricer.models import MembershipInput


def _recommend(pricing, **fields):
    base = dict(adult_count=2, children_count=2, child_ages=(5, 7), science_visits=4, dpkh_visits=2)
    base.update(fields)
    return calculate_membership_costs(pricing, MembershipInput(**base))


class TestEligibilitySummary:

    def test_discounted(self, pricing):
        summary = describe_eligibility(_recommend(pricing, adult_count=3), pricing)
        assert summary.is_eligible
        assert summary.message == "✓ Eligible for 20% discount"
        assert summary.alert_type == "success"

    def test_welcome(self, pricing):
        summary = describe_eligibility(_recommend(pricing, is_welcome_eligible=True), pricing)
        assert summary.is_eligible
        assert summary.message == "✓ Eligible for Welcome Program pricing"

    def test_too_small(self, pricing):
        summary = describe_eligibility(_recommend(pricing), pricing)
        assert not summary.is_eligible
        assert summary.message == "! Not eligible for discount: requires 5 or more people."
        assert summary.alert_type == "warning"

    def test_pay_as_you_go(self, pricing):
        rec = _recommend(pricing, adult_count=3, science_visits=0, dpkh_visits=0)
        assert describe_eligibility(rec, pricing).message == "Regular admission (no membership)"


class TestNarrative:

    def test_membership_pick(self, pricing):
        text = generate_narrative(_recommend(pricing))
        lines = text.splitlines()
        assert lines[0] == "Recommended: Science + Kids Membership"
        assert lines[1] == "Total for the year: $269"
        assert "Saves $219 (45%) versus paying $488 at the door." in text

    def test_discount_shown(self, pricing):
        text = generate_narrative(_recommend(pricing, adult_count=3))
        assert "Membership: $215 (down from $269)" in text

    def test_welcome_alternative(self, pricing):
        text = generate_narrative(_recommend(pricing, science_visits=0, dpkh_visits=0, is_welcome_eligible=True))
        assert "Welcome Program alternative:" in text
        assert "Saves" not in text

    def test_add_ons_listed(self, pricing):
        text = generate_narrative(_recommend(pricing, include_parking=True))
        assert "+ Parking at Science: $32" in text
