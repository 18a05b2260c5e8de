"""FastAPI server — HTTP surface for the membership pricing engine.

Run with:
    uvicorn membership_pricer.api.server:app --reload --port 8000

Or:
    python -m membership_pricer.api.server

Endpoints:
    GET  /                  — service info
    GET  /health            — liveness probe
    GET  /config            — active pricing configuration snapshot
    GET  /promotion         — promotion banner
    GET  /primary-location  — most-visited site (no pricing run)
    GET  /eligibility       — promotional discount eligibility message
    POST /recommend         — full recommendation for a family + visit plan
    POST /welcome           — Welcome Program pricing (membership or single visit)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from fastapi import Body, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from membership_pricer.api.narrative import EligibilitySummary, describe_eligibility, generate_narrative
from membership_pricer.api.presentation import VisitShare, location_icon, visit_distribution
from membership_pricer.config.loader import load_pricing_config
from membership_pricer.config.locations import Location, get_location_label
from membership_pricer.config.pricing import PricingConfiguration
from membership_pricer.config.settings import PricingSettings
from membership_pricer.engine.admission import determine_primary_location
from membership_pricer.engine.discounts import (
    calculate_welcome_program_pricing,
    get_eligibility_message,
    get_promotion_banner,
    is_eligible_for_discount,
)
from membership_pricer.engine.membership import calculate_membership_costs, clamp_family
from membership_pricer.errors import ConfigurationError, InvalidInputError
from membership_pricer.models.inputs import parse_membership_input
from membership_pricer.models.options import WelcomeMode
from membership_pricer.models.results import PromotionBanner, Recommendation, WelcomeRecommendation

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Discovery Place Membership Pricing API",
    version="1.0",
    description=(
        "Recommends the cheapest membership or admission plan for a family "
        "given who is visiting, how often they visit each location, and "
        "their eligibility for residency, flexibility and Welcome Program pricing."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_settings() -> PricingSettings:
    return PricingSettings()


@lru_cache(maxsize=1)
def get_pricing_config() -> PricingConfiguration:
    """Load the configuration snapshot once per process."""
    return load_pricing_config(get_settings().pricing_file)


@app.exception_handler(InvalidInputError)
def _invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(ConfigurationError)
def _configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Pricing configuration error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": f"Pricing configuration error: {exc}"})


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class RecommendResponse(BaseModel):
    """Response from /recommend."""
    recommendation: Recommendation
    eligibility: EligibilitySummary
    narrative: str = ""
    primary_location_icon: str
    visit_distribution: list[VisitShare] = Field(default_factory=list)


class WelcomeRequest(BaseModel):
    """Request body for /welcome."""
    family: dict[str, Any] = Field(
        default_factory=dict,
        description="Same fields as /recommend. Example: {'adult_count': 2, 'children_count': 1, "
                    "'child_ages': [4], 'science_visits': 3}",
    )
    mode: WelcomeMode = WelcomeMode.MEMBERSHIP
    location: Location | None = Field(
        default=None,
        description="Anchor location. Defaults to the family's most-visited location.",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Discovery Place Membership Pricing API",
        "version": "1.0",
        "start_here": "POST /recommend",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/config")
def get_config(config: PricingConfiguration = Depends(get_pricing_config)):
    """The active pricing snapshot, including its version."""
    return config.model_dump(mode="json")


@app.get("/promotion", response_model=PromotionBanner)
def get_promotion(config: PricingConfiguration = Depends(get_pricing_config)):
    return get_promotion_banner(config)


@app.get("/primary-location")
def get_primary_location(
    science_visits: int = Query(default=0, ge=0),
    dpkh_visits: int = Query(default=0, ge=0),
    dpkr_visits: int = Query(default=0, ge=0),
):
    """Most-visited location, for choosing a display icon without a pricing run."""
    primary = determine_primary_location(science_visits, dpkh_visits, dpkr_visits)
    return {
        "primary_location": primary.value,
        "label": get_location_label(primary),
        "icon": location_icon(primary),
    }


@app.get("/eligibility")
def get_eligibility(
    member_count: int = Query(ge=1),
    location: str = Query(description="Location code or 'ScienceKids'"),
    membership_type: str | None = Query(default=None),
    config: PricingConfiguration = Depends(get_pricing_config),
):
    return {
        "eligible": is_eligible_for_discount(config, member_count, location, membership_type),
        "message": get_eligibility_message(config, member_count, location, membership_type),
    }


@app.post("/recommend", response_model=RecommendResponse)
def recommend(
    payload: dict[str, Any] = Body(...),
    config: PricingConfiguration = Depends(get_pricing_config),
):
    """Price every plan for the family and return the cheapest.

    Example request:
    ```json
    {"adult_count": 2, "children_count": 2, "child_ages": [5, 7],
     "science_visits": 4, "dpkh_visits": 2, "include_parking": true}
    ```
    """
    request = parse_membership_input(payload)
    recommendation = calculate_membership_costs(config, request)
    return RecommendResponse(
        recommendation=recommendation,
        eligibility=describe_eligibility(recommendation, config),
        narrative=generate_narrative(recommendation),
        primary_location_icon=location_icon(recommendation.primary_location),
        visit_distribution=visit_distribution(request.visits),
    )


@app.post("/welcome", response_model=WelcomeRecommendation)
def welcome_pricing(
    req: WelcomeRequest,
    config: PricingConfiguration = Depends(get_pricing_config),
):
    request = parse_membership_input(req.family)
    family = clamp_family(config, request.family)
    visits = request.visits
    location = req.location or determine_primary_location(
        visits.science_visits, visits.dpkh_visits, visits.dpkr_visits,
    )
    return calculate_welcome_program_pricing(
        config, family, visits,
        location=location,
        mode=req.mode,
        include_parking=request.include_parking,
        is_richmond_resident=request.is_richmond_resident,
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )
    uvicorn.run(
        "membership_pricer.api.server:app",
        host="0.0.0.0",
        port=8000,
    )


if __name__ == "__main__":
    main()
