"""Membership tier prices."""

from pydantic import BaseModel, ConfigDict, Field


class MembershipTierConfig(BaseModel):
    """Annual household membership at one tier."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Display name, e.g. 'Basic Membership (Discovery Place Science)'")
    price: float = Field(ge=0, description="Annual price before any promotional discount ($)")
    flexibility_upgrade: float = Field(
        default=0.0, ge=0,
        description="Add-on letting different adults bring the children on different days ($/year).",
    )
