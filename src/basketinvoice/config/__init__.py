"""Tax reference data: schema, loader and contributor-facing validation."""

from .schema import ConfigurationError, TaxCategories, TaxConfiguration, TaxRates
from .tax_config import load_tax_configuration

__all__ = [
    "ConfigurationError",
    "TaxCategories",
    "TaxConfiguration",
    "TaxRates",
    "load_tax_configuration",
]
