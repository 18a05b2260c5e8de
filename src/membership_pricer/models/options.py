"""Membership option variants — the closed set of plans the engine prices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from membership_pricer.config.locations import Location


class MembershipType(str, Enum):
    BASIC_SCIENCE = "BasicScience"
    BASIC_DPKH = "BasicDPKH"
    BASIC_DPKR = "BasicDPKR"
    SCIENCE_KIDS = "ScienceKids"
    WELCOME = "Welcome"
    WELCOME_ADMISSION = "WelcomeAdmission"
    PAY_AS_YOU_GO = "PayAsYouGo"


class WelcomeMode(str, Enum):
    MEMBERSHIP = "membership"
    SINGLE_VISIT = "single_visit"


_BASIC_TYPES: dict[Location, MembershipType] = {
    Location.SCIENCE: MembershipType.BASIC_SCIENCE,
    Location.DPKH: MembershipType.BASIC_DPKH,
    Location.DPKR: MembershipType.BASIC_DPKR,
}


@dataclass(frozen=True)
class BasicSingleSite:
    """Household membership at one site; other sites at guest rates."""

    location: Location

    # Lower rank wins a price tie
    preference_rank = 0

    @property
    def membership_type(self) -> MembershipType:
        return _BASIC_TYPES[self.location]


@dataclass(frozen=True)
class ScienceKidsCombo:
    """One membership covering every site."""

    preference_rank = 1

    @property
    def membership_type(self) -> MembershipType:
        return MembershipType.SCIENCE_KIDS


@dataclass(frozen=True)
class Welcome:
    """Welcome Program, either as a membership or a single visit."""

    mode: WelcomeMode = WelcomeMode.MEMBERSHIP

    preference_rank = 2

    @property
    def membership_type(self) -> MembershipType:
        if self.mode == WelcomeMode.SINGLE_VISIT:
            return MembershipType.WELCOME_ADMISSION
        return MembershipType.WELCOME


@dataclass(frozen=True)
class PayAsYouGo:
    """No membership: regular admission for every visit."""

    preference_rank = 3

    @property
    def membership_type(self) -> MembershipType:
        return MembershipType.PAY_AS_YOU_GO


MembershipOption = BasicSingleSite | ScienceKidsCombo | Welcome | PayAsYouGo
