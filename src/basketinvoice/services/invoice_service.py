"""Orchestrate reading, parsing and calculating a basket invoice.

Malformed lines are skipped rather than failing the whole basket: every
rejected line is reported back with its 1-based line number so callers can
surface it, and the invoice is computed from the lines that did parse. A
basket file that cannot be read degrades to an empty invoice with the
user-facing message recorded on the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike

from basketinvoice.config.schema import TaxConfiguration
from basketinvoice.config.tax_config import load_tax_configuration
from basketinvoice.models import InvoiceResult, Item, RejectedLine

from .basket_reader import BasketSourceError, read_basket_lines
from .invoice_calculator import calculate_invoice
from .line_parser import ParseError, parse_line

_LOGGER = logging.getLogger(__name__)


def parse_basket(lines: Iterable[str]) -> tuple[list[Item], list[RejectedLine]]:
    """Parse ``lines`` into items, collecting the ones that had to be skipped."""

    items: list[Item] = []
    rejected: list[RejectedLine] = []

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            _LOGGER.debug("Ignoring blank line %d", line_number)
            continue

        try:
            items.append(parse_line(line))
        except ParseError as error:
            located = error.at_line(line_number)
            _LOGGER.warning("Skipping %s", located)
            rejected.append(
                RejectedLine(line_number=line_number, text=line, reason=error.reason)
            )

    return items, rejected


def build_invoice(
    lines: Iterable[str], configuration: TaxConfiguration | None = None
) -> InvoiceResult:
    """Return the invoice for the raw basket ``lines``."""

    config = configuration if configuration is not None else load_tax_configuration()
    items, rejected = parse_basket(lines)
    invoice = calculate_invoice(items, config)

    _LOGGER.debug(
        "Invoiced %d item(s), skipped %d line(s)", len(invoice.lines), len(rejected)
    )
    return InvoiceResult(invoice=invoice, rejected=tuple(rejected))


def invoice_from_file(
    path: str | PathLike[str], configuration: TaxConfiguration | None = None
) -> InvoiceResult:
    """Read the basket at ``path`` and invoice it.

    An unreadable file yields an empty invoice whose result carries the
    user-facing error message instead of raising.
    """

    config = configuration if configuration is not None else load_tax_configuration()
    try:
        lines = read_basket_lines(path)
    except BasketSourceError as error:
        _LOGGER.debug("Basket source unavailable", exc_info=error)
        return InvoiceResult(
            invoice=calculate_invoice((), config),
            source_error=error.user_message,
        )

    return build_invoice(lines, config)


__all__ = ["build_invoice", "invoice_from_file", "parse_basket"]
