"""Service-layer helpers for basket invoicing."""

from .invoice_calculator import InvoiceCalculator, calculate_invoice, compute_line_taxes
from .invoice_formatter import render_invoice
from .invoice_service import build_invoice, invoice_from_file, parse_basket
from .line_parser import ParseError, parse_line
from .tax_classifier import TaxClassifier, classify

__all__ = [
    "InvoiceCalculator",
    "ParseError",
    "TaxClassifier",
    "build_invoice",
    "calculate_invoice",
    "classify",
    "compute_line_taxes",
    "invoice_from_file",
    "parse_basket",
    "parse_line",
    "render_invoice",
]
