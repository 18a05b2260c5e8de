"""Load a ``PricingConfiguration`` snapshot from YAML."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from membership_pricer.config.pricing import PricingConfiguration
from membership_pricer.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PRICING_RESOURCE = "default_pricing.yaml"


def pricing_config_from_dict(data: dict[str, Any]) -> PricingConfiguration:
    """Validate a plain mapping into a configuration snapshot."""
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"pricing configuration must be a mapping, got {type(data).__name__}"
        )
    try:
        return PricingConfiguration(**data)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid pricing configuration: {exc}") from exc


def load_pricing_config(path: str | Path | None = None) -> PricingConfiguration:
    """Read and validate a pricing YAML file.

    With no ``path`` the default table shipped in ``membership_pricer/data``
    is used.
    """
    try:
        if path is None:
            text = (
                resources.files("membership_pricer.data")
                .joinpath(DEFAULT_PRICING_RESOURCE)
                .read_text(encoding="utf-8")
            )
            source = f"package:{DEFAULT_PRICING_RESOURCE}"
        else:
            text = Path(path).read_text(encoding="utf-8")
            source = str(path)
    except OSError as exc:
        raise ConfigurationError(f"cannot read pricing configuration {path!s}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"malformed pricing YAML in {source}: {exc}") from exc

    config = pricing_config_from_dict(data)
    logger.info("Loaded pricing configuration version %s from %s", config.version, source)
    return config
