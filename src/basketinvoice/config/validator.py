"""Utilities for validating tax reference data and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Any, Iterable, Mapping, Sequence

from .schema import ConfigurationError, TaxCategories, TaxConfiguration, TaxRates
from .tax_config import load_raw_tax_data, load_tax_configuration


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_rates(rates: TaxRates) -> list[str]:
    errors: list[str] = []

    for label, value in {
        "vat": rates.vat_rate,
        "additional_tax": rates.additional_tax_rate,
    }.items():
        if value < 0 or value > 1:
            errors.append(
                _format_scope("rates", f"{label} rate {value} must be between 0 and 1")
            )

    return errors


def _validate_names(scope: str, names: Iterable[str]) -> list[str]:
    errors: list[str] = []
    entries = sorted(names)

    if not entries:
        errors.append(_format_scope(scope, "no item names defined"))
        return errors

    for name in entries:
        if name != name.strip():
            errors.append(
                _format_scope(scope, f"'{name}' has surrounding whitespace and can never match")
            )
        elif "  " in name or any(char in name for char in "\t\r\n"):
            errors.append(
                _format_scope(
                    scope,
                    f"'{name}' contains repeated or non-space whitespace and can never match",
                )
            )

    return errors


def _validate_categories(categories: TaxCategories) -> list[str]:
    errors: list[str] = []
    errors.extend(_validate_names("categories.vat_applicable", categories.vat_applicable))
    errors.extend(_validate_names("categories.imported", categories.imported))
    return errors


def validate_raw_categories(raw: Mapping[str, Any]) -> list[str]:
    """Flag duplicates that the set-based schema would silently collapse."""

    errors: list[str] = []
    section = raw.get("categories")
    if not isinstance(section, Mapping):
        return [_format_scope("categories", "section is missing or not a mapping")]

    for key in ("vat_applicable", "imported"):
        entries = section.get(key) or []
        if not isinstance(entries, list):
            continue
        duplicates = [
            value for value, count in Counter(map(str, entries)).items() if count > 1
        ]
        if duplicates:
            errors.append(
                _format_scope(
                    f"categories.{key}",
                    f"duplicate item names detected: {sorted(duplicates)}",
                )
            )

    return errors


def validate_tax_configuration(config: TaxConfiguration) -> list[str]:
    """Return a list of validation issues for the provided configuration."""

    errors: list[str] = []

    errors.extend(_validate_rates(config.rates))
    errors.extend(_validate_categories(config.categories))

    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        description="Validate the bundled tax reference data and report issues."
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    parser.parse_args(argv)

    try:
        raw = load_raw_tax_data()
        config = load_tax_configuration()
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"failed to load configuration: {error}")
        return 1

    issues = validate_raw_categories(raw) + validate_tax_configuration(config)
    if issues:
        print(f"{len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print("OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
