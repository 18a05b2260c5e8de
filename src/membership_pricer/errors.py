"""Exception taxonomy for the pricing engine.

Business outcomes (ineligibility, zero visits, zero savings) are ordinary
result values and never raise.
"""

from __future__ import annotations


class PricingError(Exception):
    """Base class for every error raised by membership_pricer."""


class ConfigurationError(PricingError):
    """A pricing configuration key is missing or holds an invalid value.

    Always fatal: a wrong price is worse than a visible failure.
    """


class InvalidInputError(PricingError, ValueError):
    """Caller-supplied family / visit input violates its documented ranges."""
