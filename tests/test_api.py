"""Tests for the HTTP layer.

Covers:
  - Service info / health / config snapshot
  - Promotion, primary-location and eligibility lookups
  - /recommend and /welcome, including error mapping
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from membership_pricer.api.server import app, get_pricing_config
from membership_pricer.config import pricing_config_from_dict


@pytest.fixture
def client(pricing):
    app.dependency_overrides[get_pricing_config] = lambda: pricing
    yield TestClient(app)
    app.dependency_overrides.clear()


SMALL_FAMILY = {
    "adult_count": 2,
    "children_count": 2,
    "child_ages": [5, 7],
    "science_visits": 4,
    "dpkh_visits": 2,
}


# ═══════════════════════════════════════════════════════════════════════════
# Info endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestInfo:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self, client):
        data = client.get("/").json()
        assert data["start_here"] == "POST /recommend"

    def test_config_snapshot(self, client):
        data = client.get("/config").json()
        assert data["version"] == "test-1"
        assert data["admission"]["Science"]["adult"] == 25

    def test_promotion(self, client):
        data = client.get("/promotion").json()
        assert data["is_active"] is True
        assert data["discount_rate"] == 0.2


class TestLookups:

    def test_primary_location(self, client):
        data = client.get(
            "/primary-location", params={"science_visits": 0, "dpkh_visits": 5, "dpkr_visits": 5},
        ).json()
        assert data["primary_location"] == "DPKH"
        assert data["icon"] == "kids-huntersville"
        assert data["label"] == "Discovery Place Kids-Huntersville"

    def test_primary_location_defaults_to_science(self, client):
        assert client.get("/primary-location").json()["primary_location"] == "Science"

    def test_negative_visits_rejected(self, client):
        assert client.get("/primary-location", params={"science_visits": -1}).status_code == 422

    def test_eligibility(self, client):
        data = client.get("/eligibility", params={"member_count": 6, "location": "Science"}).json()
        assert data["eligible"] is True
        assert data["message"].startswith("Eligible for 20%")

    def test_eligibility_rockingham(self, client):
        data = client.get("/eligibility", params={"member_count": 6, "location": "DPKR"}).json()
        assert data["eligible"] is False
        assert "Rockingham" in data["message"]


# ═══════════════════════════════════════════════════════════════════════════
# Pricing endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestRecommend:

    def test_small_family(self, client):
        resp = client.post("/recommend", json=SMALL_FAMILY)
        assert resp.status_code == 200
        data = resp.json()
        rec = data["recommendation"]
        assert rec["best_membership_type"] == "ScienceKids"
        assert rec["total_price"] == 269
        assert rec["primary_location"] == "Science"
        assert data["primary_location_icon"] == "science"
        assert data["eligibility"]["message"] == "! Not eligible for discount: requires 5 or more people."
        assert data["eligibility"]["alert_type"] == "warning"
        assert [share["location"] for share in data["visit_distribution"]] == ["Science", "DPKH"]
        assert "Recommended: Science + Kids Membership" in data["narrative"]

    def test_mismatched_ages(self, client):
        resp = client.post("/recommend", json={**SMALL_FAMILY, "child_ages": [5]})
        assert resp.status_code == 422
        assert "child_ages" in resp.json()["detail"]

    def test_configuration_error(self, pricing_data):
        del pricing_data["memberships"]["ScienceKids"]
        broken = pricing_config_from_dict(pricing_data)
        app.dependency_overrides[get_pricing_config] = lambda: broken
        try:
            resp = TestClient(app).post("/recommend", json=SMALL_FAMILY)
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 500
        assert "ScienceKids" in resp.json()["detail"]


class TestWelcome:

    def test_membership_mode(self, client):
        resp = client.post("/welcome", json={"family": {**SMALL_FAMILY, "include_parking": True}})
        assert resp.status_code == 200
        data = resp.json()
        assert data["membership_type"] == "Welcome"
        assert data["location"] == "Science"
        # 25 + 4 × 8 parking + 2 × 4 × 3 cross-location
        assert data["total_price"] == 81

    def test_single_visit(self, client):
        resp = client.post("/welcome", json={"family": SMALL_FAMILY, "mode": "single_visit", "location": "DPKH"})
        data = resp.json()
        assert data["membership_type"] == "WelcomeAdmission"
        assert data["total_price"] == 12

    def test_oversize_family_is_clamped(self, client):
        family = {"adult_count": 40, "science_visits": 2}
        welcome = client.post("/welcome", json={"family": family}).json()
        recommended = client.post("/recommend", json=family).json()["recommendation"]
        # 4 adults (configured maximum) × 2 visits × $25
        assert welcome["regular_admission_cost"] == 200
        assert welcome["regular_admission_cost"] == recommended["regular_admission_cost"]
        assert welcome["people_included"] == 4

    def test_bad_family(self, client):
        resp = client.post("/welcome", json={"family": {"adult_count": 0}})
        assert resp.status_code == 422
