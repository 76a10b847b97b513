"""Badge: ``label | value`` with a tone-tinted value pill.

Static apart from the optional pulse dot, whose radius and opacity
oscillate forever.
"""

from __future__ import annotations

from dataclasses import dataclass

from readme_motion.core.document import svg_document
from readme_motion.core.models import DEFAULT_FONT, BadgeSpec
from readme_motion.core.theme import Palette
from readme_motion.core.utils import esc, num

FONT_SIZE = 12
CHAR_WIDTH = 7.0
ZONE_PAD = 10
PILL_INSET = 3
DOT_SPACE = 14
DOT_RADIUS = 3
PULSE_DUR = "1.6s"
LABEL_OPACITY = 0.7


@dataclass(frozen=True)
class BadgeLayout:
    width: float
    label_width: float
    pill_x: float
    pill_width: float
    dot_x: float


def badge_layout(spec: BadgeSpec) -> BadgeLayout:
    label_w = len(spec.label) * CHAR_WIDTH + ZONE_PAD * 2
    value_w = len(spec.value) * CHAR_WIDTH + ZONE_PAD * 2 + (DOT_SPACE if spec.pulse else 0)
    width = spec.width if spec.width is not None else label_w + value_w
    # An explicit width squeezes or stretches the value zone, never the label.
    pill_x = min(label_w, width - PILL_INSET)
    pill_w = max(width - pill_x - PILL_INSET, 0)
    return BadgeLayout(
        width=width,
        label_width=label_w,
        pill_x=pill_x,
        pill_width=pill_w,
        dot_x=pill_x + pill_w - DOT_SPACE / 2 - 2,
    )


def _pulse_dot(x: float, y: float, color: str) -> str:
    return f"""  <circle cx="{num(x)}" cy="{num(y)}" r="{DOT_RADIUS}" fill="{color}">
    <animate attributeName="r" values="{DOT_RADIUS};{DOT_RADIUS + 2};{DOT_RADIUS}" dur="{PULSE_DUR}" repeatCount="indefinite"/>
    <animate attributeName="opacity" values="1;0.35;1" dur="{PULSE_DUR}" repeatCount="indefinite"/>
  </circle>"""


def render_svg(spec: BadgeSpec, palette: Palette) -> str:
    layout = badge_layout(spec)
    height = spec.height
    tone = palette.tone(spec.tone)
    text_y = num(height / 2 + FONT_SIZE * 0.35)
    pill_h = max(height - PILL_INSET * 2, 1)
    value_cx = layout.pill_x + (layout.pill_width - (DOT_SPACE if spec.pulse else 0)) / 2

    parts = [
        f'  <rect x="0" y="0" width="{num(layout.width)}" height="{num(height)}" rx="{num(height / 2)}" fill="{palette.background}"/>',
        f'  <text x="{ZONE_PAD}" y="{text_y}" font-family="{DEFAULT_FONT}" font-size="{FONT_SIZE}" '
        f'fill="{palette.text}" opacity="{LABEL_OPACITY}">{esc(spec.label)}</text>',
        f'  <rect x="{num(layout.pill_x)}" y="{PILL_INSET}" width="{num(layout.pill_width)}" height="{num(pill_h)}" '
        f'rx="{num(pill_h / 2)}" fill="{tone}" fill-opacity="0.18" stroke="{tone}"/>',
        f'  <text x="{num(value_cx)}" y="{text_y}" text-anchor="middle" font-family="{DEFAULT_FONT}" '
        f'font-size="{FONT_SIZE}" font-weight="600" fill="{tone}">{esc(spec.value)}</text>',
    ]
    if spec.pulse:
        parts.append(_pulse_dot(layout.dot_x, height / 2, tone))
    return svg_document(layout.width, height, "\n".join(parts))
