"""Lazy attribute resolution for package-level re-exports.

The top-level package exposes ``main`` and a few report helpers without
importing the CLI (and its argparse/tqdm setup) at import time.
"""

from __future__ import annotations

import importlib
from collections.abc import Callable


def make_getattr(module_name: str, mapping: dict[str, str]) -> Callable[[str], object]:
    """
    Create a module ``__getattr__`` that imports exports on first access.

    Args:
        module_name: Name of the current module (for error messages).
        mapping: Export name -> module path that defines it.
    """

    def __getattr__(name: str) -> object:
        target = mapping.get(name)
        if target is None:
            raise AttributeError(f"module {module_name!r} has no attribute {name!r}")
        return getattr(importlib.import_module(target), name)

    return __getattr__
