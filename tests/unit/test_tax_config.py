"""Unit coverage for loading the tax reference data."""

from __future__ import annotations

from pathlib import Path
from shutil import copy2

import pytest
import yaml
from pydantic import ValidationError

from basketinvoice.config import tax_config
from basketinvoice.config.schema import ConfigurationError, TaxCategories, TaxRates

EXPECTED_VAT_APPLICABLE = {
    "soap",
    "music CD",
    "imported bottle of perfume",
    "imported handbag",
    "imported sunglasses",
    "perfume bottle",
}
EXPECTED_IMPORTED = {
    "box of imported chocolates",
    "imported bottle of perfume",
    "imported handbag",
    "imported sunglasses",
}


@pytest.fixture()
def isolated_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a temporary copy of the reference data patched into ``tax_config``."""

    config_path = tmp_path / "tax_categories.yaml"
    copy2(tax_config.CONFIG_FILE, config_path)

    monkeypatch.setattr(tax_config, "CONFIG_FILE", config_path)
    tax_config.load_tax_configuration.cache_clear()

    yield config_path

    tax_config.load_tax_configuration.cache_clear()


def test_bundled_configuration_matches_reference_sets() -> None:
    config = tax_config.load_tax_configuration()

    assert config.categories.vat_applicable == EXPECTED_VAT_APPLICABLE
    assert config.categories.imported == EXPECTED_IMPORTED
    assert config.rates.vat_rate == 0.125
    assert config.rates.additional_tax_rate == 0.024


def test_configuration_is_loaded_once() -> None:
    assert tax_config.load_tax_configuration() is tax_config.load_tax_configuration()


def test_configuration_is_frozen() -> None:
    config = tax_config.load_tax_configuration()

    with pytest.raises(ValidationError):
        config.rates = TaxRates(vat=0.2)  # type: ignore[misc]
    assert isinstance(config.categories.vat_applicable, frozenset)


def test_missing_configuration_file(isolated_config_file: Path) -> None:
    isolated_config_file.unlink()

    with pytest.raises(FileNotFoundError):
        tax_config.load_tax_configuration()


def test_non_mapping_configuration_is_rejected(isolated_config_file: Path) -> None:
    isolated_config_file.write_text("- soap\n- music CD\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        tax_config.load_tax_configuration()


def test_invalid_rate_is_rejected(isolated_config_file: Path) -> None:
    raw = yaml.safe_load(isolated_config_file.read_text(encoding="utf-8"))
    raw["rates"]["vat"] = 1.5
    isolated_config_file.write_text(yaml.safe_dump(raw), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="validation failed"):
        tax_config.load_tax_configuration()


def test_unknown_keys_are_rejected(isolated_config_file: Path) -> None:
    raw = yaml.safe_load(isolated_config_file.read_text(encoding="utf-8"))
    raw["categories"]["exempt"] = ["book"]
    isolated_config_file.write_text(yaml.safe_dump(raw), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        tax_config.load_tax_configuration()


@pytest.mark.parametrize("value", ["soap", [""], ["  "], [3]])
def test_tax_categories_reject_invalid_entries(value: object) -> None:
    with pytest.raises(ValidationError):
        TaxCategories(vat_applicable=value)


def test_tax_categories_keep_names_verbatim() -> None:
    categories = TaxCategories(vat_applicable=["Soap"], imported=None)

    assert categories.is_vat_applicable("Soap")
    assert not categories.is_vat_applicable("soap")
    assert categories.imported == frozenset()


def test_out_of_range_rate_fails_model_validation() -> None:
    with pytest.raises(ValidationError, match="between 0 and 1"):
        TaxRates(vat=1.5)
