"""Ticker: a marquee scrolling right-to-left at constant speed.

The text is repeated three times so short strings do not leave a visible
gap. This is a heuristic; very short text on a wide, fast ticker can still
show a seam.
"""

from __future__ import annotations

from dataclasses import dataclass

from readme_motion.core.document import svg_document
from readme_motion.core.logging_setup import get_logger
from readme_motion.core.models import DEFAULT_FONT, TickerSpec
from readme_motion.core.theme import Palette
from readme_motion.core.utils import esc, num

SEPARATOR = "  •  "
REPEAT = 3
FONT_SIZE = 16
CHAR_WIDTH = 9.6  # 0.6 * FONT_SIZE
GAP = 48


@dataclass(frozen=True)
class TickerTiming:
    buffer: str
    content_width: float
    duration_s: float


def ticker_timing(text: str, width: float, speed: float) -> TickerTiming:
    buffer = SEPARATOR.join([text] * REPEAT)
    content_w = len(buffer) * CHAR_WIDTH + GAP
    return TickerTiming(
        buffer=buffer,
        content_width=content_w,
        duration_s=(content_w + width) / speed,
    )


def render_svg(spec: TickerSpec, palette: Palette) -> str:
    timing = ticker_timing(spec.text, spec.width, spec.speed)
    get_logger().debug("ticker: %spx content, loop %ss", num(timing.content_width), num(timing.duration_s))
    text_y = num(spec.height / 2 + FONT_SIZE * 0.35)
    body = f"""  <clipPath id="tk-view">
    <rect x="0" y="0" width="{num(spec.width)}" height="{num(spec.height)}"/>
  </clipPath>
  <g clip-path="url(#tk-view)">
    <g transform="translate({num(spec.width)} 0)">
      <animateTransform attributeName="transform" type="translate" from="{num(spec.width)} 0" to="{num(-timing.content_width)} 0" dur="{num(timing.duration_s)}s" repeatCount="indefinite"/>
      <text x="0" y="{text_y}" font-family="{DEFAULT_FONT}" font-size="{FONT_SIZE}" fill="{palette.text}" xml:space="preserve">{esc(timing.buffer)}</text>
    </g>
  </g>"""
    return svg_document(spec.width, spec.height, body, background=palette.background)
