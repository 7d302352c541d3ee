"""Unit tests for the shared invoice records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from basketinvoice.models import InvoiceResult, Invoice, InvoiceTotals, Item


def test_item_is_immutable() -> None:
    item = Item(name="soap", quantity=1, unit_cost=0.85)

    with pytest.raises(ValidationError):
        item.quantity = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "", "quantity": 1, "unit_cost": 1},
        {"name": "soap", "quantity": 0, "unit_cost": 1},
        {"name": "soap", "quantity": 1, "unit_cost": -1},
    ],
)
def test_item_rejects_invalid_fields(fields: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Item(**fields)


def test_item_line_cost() -> None:
    assert Item(name="soap", quantity=4, unit_cost=0.5).line_cost == pytest.approx(2.0)


def test_invoice_totals_accumulate_and_finalise() -> None:
    totals = InvoiceTotals()
    totals.add(subtotal=10.0, vat=1.25)
    totals.add(subtotal=5.0, additional_tax=0.12)

    summary = totals.finalise()

    assert summary.subtotal == pytest.approx(15.0)
    assert summary.vat == pytest.approx(1.25)
    assert summary.additional_tax == pytest.approx(0.12)
    assert summary.grand_total == pytest.approx(16.37)


def test_invoice_totals_refuse_negative_contributions() -> None:
    totals = InvoiceTotals(subtotal=3.0)

    with pytest.raises(ValueError, match="vat"):
        totals.add(vat=-0.01)

    assert totals.vat == 0.0
    assert totals.subtotal == 3.0


def test_invoice_result_ok_reflects_source_error() -> None:
    assert InvoiceResult(invoice=Invoice()).ok
    assert not InvoiceResult(invoice=Invoice(), source_error="boom").ok
