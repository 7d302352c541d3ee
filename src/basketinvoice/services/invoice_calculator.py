"""Accumulate basket lines into invoice totals."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from basketinvoice.config.schema import TaxConfiguration, TaxRates
from basketinvoice.models import (
    Invoice,
    InvoiceLine,
    InvoiceTotals,
    Item,
    LineTaxes,
    TaxClassification,
)

from .tax_classifier import TaxClassifier

_LOGGER = logging.getLogger(__name__)


def compute_line_taxes(
    line_cost: float, classification: TaxClassification, rates: TaxRates
) -> LineTaxes:
    """Return the VAT and additional tax owed on ``line_cost``.

    When an item is both VAT-applicable and imported, the import surcharge is
    charged on the VAT-inclusive price.
    """

    vat = line_cost * rates.vat_rate if classification.vat_applicable else 0.0

    if classification.imported and classification.vat_applicable:
        additional_tax = line_cost * (1 + rates.vat_rate) * rates.additional_tax_rate
    elif classification.imported:
        additional_tax = line_cost * rates.additional_tax_rate
    else:
        additional_tax = 0.0

    return LineTaxes(vat=vat, additional_tax=additional_tax)


class InvoiceCalculator:
    """Process items in order, keeping a running total."""

    def __init__(self, configuration: TaxConfiguration) -> None:
        self._rates = configuration.rates
        self._classifier = TaxClassifier(configuration.categories)
        self._totals = InvoiceTotals()
        self._lines: list[InvoiceLine] = []

    @property
    def totals(self) -> InvoiceTotals:
        return self._totals

    def add_item(self, item: Item) -> InvoiceLine:
        line_cost = item.line_cost
        classification = self._classifier.classify(item)
        taxes = compute_line_taxes(line_cost, classification, self._rates)

        self._totals.add(
            subtotal=line_cost,
            vat=taxes.vat,
            additional_tax=taxes.additional_tax,
        )
        line = InvoiceLine(
            item=item,
            line_cost=line_cost,
            classification=classification,
            taxes=taxes,
        )
        self._lines.append(line)

        _LOGGER.debug(
            "Line %d '%s': cost=%.4f vat=%.4f additional=%.4f",
            len(self._lines),
            item.name,
            line_cost,
            taxes.vat,
            taxes.additional_tax,
        )
        return line

    def finalise(self) -> Invoice:
        return Invoice(lines=tuple(self._lines), summary=self._totals.finalise())


def calculate_invoice(items: Iterable[Item], configuration: TaxConfiguration) -> Invoice:
    """Compute every line and the final summary for ``items``."""

    calculator = InvoiceCalculator(configuration)
    for item in items:
        calculator.add_item(item)
    return calculator.finalise()


__all__ = ["InvoiceCalculator", "calculate_invoice", "compute_line_taxes"]
