"""Pydantic models describing the tax reference data schema."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class TaxRates(ImmutableModel):
    """Flat rates applied by the VAT and import surcharge rules."""

    vat_rate: float = Field(default=0.125, alias="vat")
    additional_tax_rate: float = Field(default=0.024, alias="additional_tax")

    @model_validator(mode="after")
    def _validate_rates(self) -> Self:
        for label, value in (
            ("vat", self.vat_rate),
            ("additional_tax", self.additional_tax_rate),
        ):
            if value < 0 or value > 1:
                raise ConfigurationError(f"Rate '{label}' must be between 0 and 1")
        return self


def _coerce_names(value: Any) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigurationError("Category entries must be provided as a list of names")

    names: list[str] = []
    for entry in value:
        if not isinstance(entry, str):
            raise ConfigurationError("Category entries must be strings")
        if not entry.strip():
            raise ConfigurationError("Category entries must be non-empty strings")
        names.append(entry)
    return frozenset(names)


class TaxCategories(ImmutableModel):
    """Item names that attract VAT and those that count as imported.

    Lookups are exact and case-sensitive; names are stored verbatim.
    """

    vat_applicable: frozenset[str] = Field(default_factory=frozenset)
    imported: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("vat_applicable", "imported", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> frozenset[str]:
        return _coerce_names(value)

    def is_vat_applicable(self, name: str) -> bool:
        return name in self.vat_applicable

    def is_imported(self, name: str) -> bool:
        return name in self.imported


class TaxConfiguration(ImmutableModel):
    """Complete tax reference data consulted while invoicing a basket."""

    rates: TaxRates = Field(default_factory=TaxRates)
    categories: TaxCategories = Field(default_factory=TaxCategories)
    meta: dict[str, Any] = Field(default_factory=dict)


__all__ = [
    "ConfigurationError",
    "ImmutableModel",
    "TaxCategories",
    "TaxConfiguration",
    "TaxRates",
]
