"""CLI entrypoints for answering question files."""

from __future__ import annotations

from typing import TYPE_CHECKING
from inquire_utils.lazy_import import make_lazy_module_getattr

if TYPE_CHECKING:
    from inquire.cli.runner import main, run

__all__ = ["run", "main"]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "run": ("inquire.cli.runner", "run"),
    "main": ("inquire.cli.runner", "main"),
}

__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
