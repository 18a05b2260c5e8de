"""Input and result models — the engine's boundary contracts."""

from membership_pricer.models.inputs import (
    EligibilityFlags,
    FamilyComposition,
    MembershipInput,
    VisitPlan,
    parse_membership_input,
)
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
    PromotionBanner,
    Recommendation,
    WelcomeRecommendation,
)

__all__ = [
    "FamilyComposition",
    "VisitPlan",
    "EligibilityFlags",
    "MembershipInput",
    "parse_membership_input",
    "MembershipType",
    "WelcomeMode",
    "BasicSingleSite",
    "ScienceKidsCombo",
    "Welcome",
    "PayAsYouGo",
    "MembershipOption",
    "CostLineItem",
    "GuestSavings",
    "WelcomeRecommendation",
    "PromotionBanner",
    "PlanQuote",
    "Recommendation",
]
