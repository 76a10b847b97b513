"""Shared utilities.

``esc()`` escapes user-supplied free text before it is placed in an SVG text
node. Only ``&``, ``<`` and ``>`` are touched; colors, dimensions and other
internally produced values are never passed through it.

``num()`` and ``seconds()`` give every generator the same deterministic
number formatting so identical input always yields identical markup.
"""

from __future__ import annotations

import html
from typing import Any


def esc(value: Any) -> str:
    """Return *value* as text with ``&``, ``<`` and ``>`` replaced by entities."""
    if value is None:
        return ""
    return html.escape(str(value), quote=False)


def num(value: float) -> str:
    """Format a number with at most three decimals and no trailing zeros."""
    if isinstance(value, int):
        return str(value)
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def seconds(ms: float) -> str:
    """Format a millisecond quantity as an SVG clock value (``0.7s``)."""
    return f"{num(ms / 1000)}s"
