"""Configuration loader wrapping the shared schema models."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import (
    ConfigurationError,
    TaxCategories,
    TaxConfiguration,
    TaxRates,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
CONFIG_FILE = CONFIG_DIRECTORY / "tax_categories.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def load_raw_tax_data() -> dict[str, Any]:
    """Return the bundled reference data exactly as written on disk."""

    if not CONFIG_FILE.exists():
        raise FileNotFoundError(f"Tax configuration missing: {CONFIG_FILE.name}")

    return _load_yaml(CONFIG_FILE)


@lru_cache(maxsize=1)
def load_tax_configuration() -> TaxConfiguration:
    """Load and cache the tax rates and category sets."""

    raw_config = load_raw_tax_data()

    try:
        return TaxConfiguration.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Tax configuration validation failed: {error}") from error


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_FILE",
    "ConfigurationError",
    "TaxCategories",
    "TaxConfiguration",
    "TaxRates",
    "load_raw_tax_data",
    "load_tax_configuration",
]
