"""Render invoices as aligned plain text."""

from __future__ import annotations

from basketinvoice.models import Invoice, InvoiceSummary

COLUMN_SEPARATOR = "  |  "
NAME_WIDTH = 40
NUMBER_WIDTH = 10

SUMMARY_LABELS = (
    ("subtotal", "Subtotal        : "),
    ("vat", "Value Added Tax : "),
    ("additional_tax", "Additional Tax  : "),
    ("grand_total", "Total           : "),
)


def format_amount(value: float, width: int = 0) -> str:
    """Return ``value`` with exactly two decimals, right-aligned to ``width``."""

    # adding 0.0 turns a signed zero into 0.0
    return f"{value + 0.0:>{width}.2f}"


def _row(name: str, quantity: str, unit_cost: str, cost: str) -> str:
    return COLUMN_SEPARATOR.join(
        (
            f"{name:<{NAME_WIDTH}}",
            f"{quantity:>{NUMBER_WIDTH}}",
            f"{unit_cost:>{NUMBER_WIDTH}}",
            f"{cost:>{NUMBER_WIDTH}}",
        )
    )


def render_header() -> list[str]:
    dashes = "-" * NUMBER_WIDTH
    rule = _row("-" * NAME_WIDTH, dashes, dashes, dashes)
    return [_row("NAME", "QTY", "UNIT COST", "COST"), rule]


def render_summary(summary: InvoiceSummary) -> list[str]:
    return [
        f"{label}{format_amount(getattr(summary, field), NUMBER_WIDTH)}"
        for field, label in SUMMARY_LABELS
    ]


def render_invoice(invoice: Invoice) -> str:
    """Return the full invoice text: header, one row per line, then totals."""

    lines = render_header()
    for entry in invoice.lines:
        lines.append(
            _row(
                entry.item.name,
                format_amount(entry.item.quantity),
                format_amount(entry.item.unit_cost),
                format_amount(entry.line_cost),
            )
        )

    lines.extend(["", ""])
    lines.extend(render_summary(invoice.summary))
    return "\n".join(lines) + "\n"


__all__ = [
    "COLUMN_SEPARATOR",
    "format_amount",
    "render_header",
    "render_invoice",
    "render_summary",
]
