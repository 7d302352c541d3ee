"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path
from typing import Callable

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from basketinvoice.config.tax_config import load_tax_configuration  # noqa: E402
from basketinvoice.config.schema import TaxConfiguration  # noqa: E402


@pytest.fixture()
def tax_configuration() -> TaxConfiguration:
    """Return the bundled tax reference data."""

    return load_tax_configuration()


@pytest.fixture()
def basket_file(tmp_path: Path) -> Callable[..., Path]:
    """Write basket lines to a temporary file and return its path."""

    def _write(*lines: str, name: str = "basket.txt") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
