"""Helpers for turning raw basket lines into validated items."""

from __future__ import annotations

import math
import re

from pydantic import ValidationError

from basketinvoice.models import Item, format_validation_error

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseError(ValueError):
    """Raised when a basket line cannot be turned into an :class:`Item`."""

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"line {self.line_number}: {self.reason} ({self.line!r})"
        return f"{self.reason} ({self.line!r})"

    def at_line(self, line_number: int) -> ParseError:
        """Return a copy of this error tagged with ``line_number``."""

        return ParseError(self.line, self.reason, line_number)


def _parse_number(token: str, field_name: str, line: str) -> float:
    if not _DECIMAL_PATTERN.fullmatch(token):
        raise ParseError(line, f"{field_name} '{token}' is not a number")

    value = float(token)

    if not math.isfinite(value):
        raise ParseError(line, f"{field_name} '{token}' is not a finite number")
    return value


def split_line(line: str) -> tuple[str, str, str]:
    """Split ``line`` into its quantity, name and unit cost tokens.

    The name is every token strictly between the first and the last one,
    rejoined with single spaces. Lines with fewer than three tokens yield an
    empty name.
    """

    tokens = line.split()
    if not tokens:
        raise ParseError(line, "line is empty")

    quantity, unit_cost = tokens[0], tokens[-1]
    name = " ".join(tokens[1:-1])
    return quantity, name, unit_cost


def parse_line(line: str) -> Item:
    """Parse ``<quantity> <name...> <unit cost>`` into an :class:`Item`."""

    quantity_token, name, unit_cost_token = split_line(line)

    quantity = _parse_number(quantity_token, "quantity", line)
    unit_cost = _parse_number(unit_cost_token, "unit cost", line)

    if not name:
        raise ParseError(line, "item name is missing")

    try:
        return Item(name=name, quantity=quantity, unit_cost=unit_cost)
    except ValidationError as error:
        raise ParseError(line, format_validation_error(error)) from error


__all__ = ["ParseError", "parse_line", "split_line"]
