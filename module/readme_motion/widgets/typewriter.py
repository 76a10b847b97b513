"""Typewriter: lines typed one after another, looping forever.

Each line owns a reveal window that starts when the previous line's window
ends, so exactly one line is visible at a time. Characters are revealed by a
clip rectangle growing left to right; a blinking cursor rides the clip edge.
All line timings hang off one zero-effect ``<animate id="tw-loop">`` whose
``begin="0s;tw-loop.end"`` restarts the whole sequence.

Widths use a monospace-ish guess (``0.6 * font_size`` per character); real
font metrics are not available to a static SVG generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from readme_motion.core.document import svg_document
from readme_motion.core.logging_setup import get_logger
from readme_motion.core.models import TypewriterSpec
from readme_motion.core.theme import Palette
from readme_motion.core.utils import esc, num, seconds

PAD_X = 16
CHAR_WIDTH_RATIO = 0.6
CURSOR_WIDTH = 2
BLINK_MS = 900
LOOP_ID = "tw-loop"


@dataclass(frozen=True)
class LineWindow:
    """Timing for one line, in milliseconds from the start of the loop."""

    index: int
    begin_ms: float
    type_ms: float
    pause_ms: float

    @property
    def end_ms(self) -> float:
        return self.begin_ms + self.type_ms + self.pause_ms

    @property
    def begin(self) -> float:
        return self.begin_ms / 1000


def line_windows(lines: Sequence[str], speed_ms: float, pause_ms: float) -> List[LineWindow]:
    """Sequence the lines: each begins when the previous one's pause ends."""
    out: List[LineWindow] = []
    cursor = 0
    for i, line in enumerate(lines):
        type_ms = len(line) * speed_ms
        out.append(LineWindow(index=i, begin_ms=cursor, type_ms=type_ms, pause_ms=pause_ms))
        cursor += type_ms + pause_ms
    return out


def total_ms(windows: Sequence[LineWindow]) -> float:
    return sum(w.type_ms + w.pause_ms for w in windows)


def reveal_width(line: str, font_size: float) -> float:
    """Estimated right edge of a fully typed line (left padding included)."""
    return PAD_X + CHAR_WIDTH_RATIO * font_size * len(line)


def _at(ms: float) -> str:
    return f"{LOOP_ID}.begin+{seconds(ms)}"


def _line_group(spec: TypewriterSpec, palette: Palette, line: str, w: LineWindow) -> str:
    height = spec.height
    font_size = spec.font_size
    text_y = int(height * 0.67)
    end_x = reveal_width(line, font_size)
    clip_id = f"tw-clip-{w.index}"
    type_dur = seconds(max(w.type_ms, 1))
    return f"""  <g visibility="hidden">
    <clipPath id="{clip_id}">
      <rect x="0" y="0" width="0" height="{num(height)}">
        <animate attributeName="width" from="0" to="{num(end_x + CURSOR_WIDTH + 2)}" dur="{type_dur}" begin="{_at(w.begin_ms)}" fill="freeze"/>
      </rect>
    </clipPath>
    <g clip-path="url(#{clip_id})">
      <text class="tw" x="{PAD_X}" y="{text_y}">{esc(line)}</text>
      <rect x="{PAD_X}" y="{num(text_y - font_size + 4)}" width="{CURSOR_WIDTH}" height="{num(font_size + 6)}" fill="{palette.accent}">
        <animate attributeName="x" from="{PAD_X}" to="{num(end_x)}" dur="{type_dur}" begin="{_at(w.begin_ms)}" fill="freeze"/>
        <animate attributeName="opacity" values="1;0;1" dur="{seconds(BLINK_MS)}" repeatCount="indefinite"/>
      </rect>
    </g>
    <set attributeName="visibility" to="visible" begin="{_at(w.begin_ms)}"/>
    <set attributeName="visibility" to="hidden" begin="{_at(w.end_ms)}"/>
  </g>"""


def render_svg(spec: TypewriterSpec, palette: Palette) -> str:
    windows = line_windows(spec.lines, spec.speed_ms, spec.pause_ms)
    get_logger().debug("typewriter: %d line(s), loop %s", len(windows), seconds(total_ms(windows)))
    font_family = esc(spec.font_family)
    style = (
        "  <style>\n"
        f"    .tw {{ font: {num(spec.font_size)}px {font_family}; fill: {palette.text}; }}\n"
        "  </style>"
    )
    groups = [_line_group(spec, palette, line, w) for line, w in zip(spec.lines, windows)]
    loop = (
        '  <rect width="0" height="0">\n'
        f'    <animate id="{LOOP_ID}" attributeName="visibility" from="visible" to="visible" '
        f'begin="0s;{LOOP_ID}.end" dur="{seconds(total_ms(windows))}"/>\n'
        "  </rect>"
    )
    body = "\n".join([style, *groups, loop])
    return svg_document(spec.width, spec.height, body, background=palette.background)
