"""Per-location admission prices and free-admission age thresholds."""

from pydantic import BaseModel, ConfigDict, Field


class AdmissionTier(BaseModel):
    """One adult / child price pair."""

    model_config = ConfigDict(frozen=True)

    adult: float = Field(ge=0, description="Adult single-visit admission ($)")
    child: float = Field(ge=0, description="Child single-visit admission ($)")


class LocationAdmission(AdmissionTier):
    """Standard admission at one site, plus an optional resident tier."""

    child_free_age_threshold: int = Field(
        ge=0, le=18,
        description="Children strictly younger than this age enter free.",
    )
    resident: AdmissionTier | None = Field(
        default=None,
        description="Reduced tier for local residents (Kids-Rockingham: Richmond County).",
    )
