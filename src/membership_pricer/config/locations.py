"""Location codes for the attraction network."""

from __future__ import annotations

from enum import Enum


class Location(str, Enum):
    """The three sites, declared in tie-break priority order (flagship first)."""

    SCIENCE = "Science"
    DPKH = "DPKH"
    DPKR = "DPKR"


# Aggregate site key used by the all-locations ScienceKids tier
SCIENCE_KIDS_SITE = "ScienceKids"

LOCATION_ORDER: tuple[Location, ...] = (Location.SCIENCE, Location.DPKH, Location.DPKR)

LOCATION_LABELS: dict[str, str] = {
    Location.SCIENCE.value: "Discovery Place Science",
    Location.DPKH.value: "Discovery Place Kids-Huntersville",
    Location.DPKR.value: "Discovery Place Kids-Rockingham",
    SCIENCE_KIDS_SITE: "All Discovery Place Locations",
}

LOCATION_SHORT_LABELS: dict[Location, str] = {
    Location.SCIENCE: "Science",
    Location.DPKH: "Kids-Huntersville",
    Location.DPKR: "Kids-Rockingham",
}


def get_location_label(code: str) -> str:
    """Human-readable site name; unknown codes are returned unchanged."""
    key = code.value if isinstance(code, Location) else code
    return LOCATION_LABELS.get(key, key)
