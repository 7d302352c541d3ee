"""Read basket files from disk."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

INVALID_FILE_MESSAGE = "Please enter a valid file name."


class BasketSourceError(RuntimeError):
    """Raised when a basket file cannot be opened or decoded."""

    def __init__(self, path: str | PathLike[str], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to read basket '{self.path}': {reason}")

    @property
    def user_message(self) -> str:
        return INVALID_FILE_MESSAGE


def read_basket_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of the basket file at ``path``."""

    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            return handle.read().splitlines()
    except FileNotFoundError as exc:
        raise BasketSourceError(path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise BasketSourceError(path, "file is not valid UTF-8 text") from exc
    except ValueError as exc:
        raise BasketSourceError(path, str(exc)) from exc
    except OSError as exc:
        raise BasketSourceError(path, exc.strerror or str(exc)) from exc


__all__ = ["BasketSourceError", "INVALID_FILE_MESSAGE", "read_basket_lines"]
