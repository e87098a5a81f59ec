"""Lazy attribute resolution for package-level ``__getattr__`` hooks."""

from __future__ import annotations

import importlib
from collections.abc import Callable

__all__ = ["make_lazy_module_getattr"]


def make_lazy_module_getattr(
    symbols: dict[str, tuple[str, str]],
    module_name: str,
) -> Callable[[str], object]:
    """Return a module ``__getattr__`` that imports ``symbols`` on first access."""

    def _lazy_getattr(name: str) -> object:
        try:
            mod_path, attr = symbols[name]
        except KeyError:
            raise AttributeError(f"module {module_name!r} has no attribute {name!r}") from None
        return getattr(importlib.import_module(mod_path), attr)

    return _lazy_getattr
