"""Easter-egg overlay: a rotating sparkle in the top-right corner.

Purely additive. The fragment is spliced in just before ``</svg>`` so it
paints above the widget without touching its layout.
"""

from __future__ import annotations

from typing import Optional

from .utils import num

EASTER_EGG = "sparkles"

SPARKLE_COLOR = "#FFD166"
SPARKLE_INSET = 14
# Four-point star around the origin.
SPARKLE_PATH = "M 0,-6 L 1.5,-1.5 L 6,0 L 1.5,1.5 L 0,6 L -1.5,1.5 L -6,0 L -1.5,-1.5 Z"


def overlay(easter_egg: Optional[str], width: float, height: float) -> str:
    """Return the sparkle fragment when *easter_egg* is the sentinel, else ''."""
    if easter_egg != EASTER_EGG:
        return ""
    cx = num(max(width - SPARKLE_INSET, 0))
    cy = num(min(SPARKLE_INSET, height / 2))
    return (
        f'  <g class="rm-sparkle" transform="translate({cx} {cy})">\n'
        f'    <path d="{SPARKLE_PATH}" fill="{SPARKLE_COLOR}">\n'
        '      <animateTransform attributeName="transform" type="rotate" '
        'from="0" to="360" dur="4s" repeatCount="indefinite"/>\n'
        '      <animate attributeName="opacity" values="0.4;1;0.4" dur="1.6s" '
        'repeatCount="indefinite"/>\n'
        "    </path>\n"
        "  </g>"
    )


def apply_overlay(markup: str, fragment: str) -> str:
    """Insert *fragment* before the closing ``</svg>`` tag."""
    if not fragment:
        return markup
    head, sep, tail = markup.rpartition("</svg>")
    if not sep:
        return markup
    return f"{head}{fragment}\n{sep}{tail}"
