"""Typed records shared across the parsing, tax and rendering services.

Parsed basket rows are validated with Pydantic so that the invariants on a
line (positive quantity, non-negative unit cost, non-empty name) are enforced
in one place. Derived results such as classifications, per-line taxes and the
running totals are lightweight dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

__all__ = [
    "Item",
    "TaxClassification",
    "LineTaxes",
    "InvoiceLine",
    "InvoiceTotals",
    "InvoiceSummary",
    "Invoice",
    "RejectedLine",
    "InvoiceResult",
    "format_validation_error",
]


class Item(BaseModel):
    """A single basket row: how many of what, at which unit price."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    quantity: float = Field(..., gt=0, allow_inf_nan=False)
    unit_cost: float = Field(..., ge=0, allow_inf_nan=False)

    @property
    def line_cost(self) -> float:
        return self.quantity * self.unit_cost


@dataclass(frozen=True)
class TaxClassification:
    """Which of the two tax rules apply to an item."""

    vat_applicable: bool = False
    imported: bool = False


@dataclass(frozen=True)
class LineTaxes:
    """Taxes contributed by one basket line."""

    vat: float = 0.0
    additional_tax: float = 0.0


@dataclass(frozen=True)
class InvoiceLine:
    item: Item
    line_cost: float
    classification: TaxClassification
    taxes: LineTaxes


@dataclass(frozen=True)
class InvoiceSummary:
    subtotal: float = 0.0
    vat: float = 0.0
    additional_tax: float = 0.0
    grand_total: float = 0.0


@dataclass
class InvoiceTotals:
    """Tracks cumulative totals while basket lines are processed.

    Amounts only ever grow; :meth:`add` refuses negative contributions.
    """

    subtotal: float = 0.0
    vat: float = 0.0
    additional_tax: float = 0.0

    def add(
        self,
        subtotal: float = 0.0,
        vat: float = 0.0,
        additional_tax: float = 0.0,
    ) -> None:
        for label, value in (
            ("subtotal", subtotal),
            ("vat", vat),
            ("additional_tax", additional_tax),
        ):
            if value < 0:
                raise ValueError(f"Contribution to '{label}' cannot be negative")
        self.subtotal += subtotal
        self.vat += vat
        self.additional_tax += additional_tax

    @property
    def grand_total(self) -> float:
        return self.subtotal + self.vat + self.additional_tax

    def finalise(self) -> InvoiceSummary:
        return InvoiceSummary(
            subtotal=self.subtotal,
            vat=self.vat,
            additional_tax=self.additional_tax,
            grand_total=self.grand_total,
        )


@dataclass(frozen=True)
class Invoice:
    lines: tuple[InvoiceLine, ...] = ()
    summary: InvoiceSummary = InvoiceSummary()


@dataclass(frozen=True)
class RejectedLine:
    """A basket line that could not be parsed and was left out."""

    line_number: int
    text: str
    reason: str


@dataclass(frozen=True)
class InvoiceResult:
    """Outcome of invoicing one basket source."""

    invoice: Invoice
    rejected: tuple[RejectedLine, ...] = ()
    source_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.source_error is None


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message: Any = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(str(message))

    return "; ".join(messages) if messages else str(error)
