"""Stringify values and escape them for attribute or text positions."""

from __future__ import annotations

from typing import Any

import numpy as np


def stringify(value: Any) -> str:
    """Text form of a value as it should appear in markup.

    Booleans become ``true``/``false`` and integral floats drop their
    fractional part, so ``30.0`` is written as ``30``.
    """
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    if isinstance(value, np.generic):
        return str(value.item())
    return str(value)


def escape_attr(value: Any) -> str:
    """Escape for a double-quoted attribute value."""
    # Ampersand first so the entities added below are not escaped again.
    return (
        stringify(value)
        .replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def escape_text(value: Any) -> str:
    """Escape for element text; quotes are left alone."""
    return (
        stringify(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
