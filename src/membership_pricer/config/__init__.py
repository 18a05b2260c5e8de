"""Configuration models — the versioned pricing table and runtime settings."""

from membership_pricer.config.locations import (
    LOCATION_ORDER,
    SCIENCE_KIDS_SITE,
    Location,
    get_location_label,
)
from membership_pricer.config.admission import AdmissionTier, LocationAdmission
from membership_pricer.config.memberships import MembershipTierConfig
from membership_pricer.config.discounts import (
    GuestDiscountConfig,
    PromotionBannerConfig,
    PromotionConfig,
    WelcomeProgramConfig,
)
from membership_pricer.config.pricing import ConstraintsConfig, ParkingConfig, PricingConfiguration
from membership_pricer.config.loader import load_pricing_config, pricing_config_from_dict
from membership_pricer.config.settings import PricingSettings

__all__ = [
    "Location",
    "LOCATION_ORDER",
    "SCIENCE_KIDS_SITE",
    "get_location_label",
    "AdmissionTier",
    "LocationAdmission",
    "MembershipTierConfig",
    "PromotionBannerConfig",
    "PromotionConfig",
    "GuestDiscountConfig",
    "WelcomeProgramConfig",
    "ParkingConfig",
    "ConstraintsConfig",
    "PricingConfiguration",
    "PricingSettings",
    "load_pricing_config",
    "pricing_config_from_dict",
]
