"""Command line entry point printing the invoice for a basket file."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib import metadata
from typing import Sequence, TextIO

from basketinvoice.config.tax_config import load_tax_configuration
from basketinvoice.services.invoice_formatter import render_invoice
from basketinvoice.services.invoice_service import invoice_from_file

PACKAGE_NAME = "basketinvoice"
PROMPT = "Enter the file name: "

_LOGGER = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _package_version() -> str:
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return "(not installed)"


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basket-invoice",
        description="Print a tax-inclusive invoice for a shopping basket file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Basket file to invoice (prompted for when omitted)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def _prompt_for_path(stdin: TextIO, stdout: TextIO) -> str:
    print(PROMPT, file=stdout)
    return stdin.readline().strip()


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Invoice one basket file and print the result.

    Returns ``1`` when the basket file could not be read. The (empty) invoice
    is still printed in that case.
    """

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    args = _build_argument_parser().parse_args(argv)
    configure_logging(args.verbose)

    path = args.path if args.path is not None else _prompt_for_path(stdin, stdout)
    _LOGGER.debug("Invoicing basket %r", path)

    result = invoice_from_file(path, load_tax_configuration())
    if result.source_error:
        print(result.source_error, file=stdout)

    stdout.write(render_invoice(result.invoice))
    return 0 if result.ok else 1


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
