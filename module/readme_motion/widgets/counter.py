"""Counter: odometer-style digit columns rolling from ``from`` to ``to``.

Every column holds a vertical strip of the glyphs 0-9 at a fixed pitch,
clipped to a one-digit window. Columns translate independently and at the
same time from their starting digit to their target digit; there is no
carry between columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from readme_motion.core.document import svg_document
from readme_motion.core.logging_setup import get_logger
from readme_motion.core.models import DEFAULT_FONT, CounterSpec
from readme_motion.core.theme import Palette
from readme_motion.core.utils import esc, num, seconds

PAD = 12
LABEL_CHAR_WIDTH = 8.0
LABEL_GAP = 12
LABEL_FONT_SIZE = 14
GLYPH_RATIO = 0.72  # glyph font size relative to the digit pitch
BASELINE_RATIO = 0.78


@dataclass(frozen=True)
class DigitColumn:
    index: int
    x: float
    width: float
    start_digit: int
    target_digit: int
    pitch: float

    @property
    def start_offset(self) -> float:
        return -self.start_digit * self.pitch

    @property
    def target_offset(self) -> float:
        return -self.target_digit * self.pitch


def label_width(label: str) -> float:
    """Horizontal space reserved for the label (0 when there is none)."""
    if not label:
        return 0
    return len(label) * LABEL_CHAR_WIDTH + LABEL_GAP


def digit_columns(spec: CounterSpec) -> List[DigitColumn]:
    digits = spec.digits
    start = str(spec.from_value).zfill(digits)
    target = str(spec.to_value).zfill(digits)
    reserved = label_width(spec.label)
    col_w = max(spec.width - PAD * 2 - reserved, digits) / digits
    pitch = max(spec.height - PAD * 2, 1)
    left = PAD + reserved
    return [
        DigitColumn(
            index=i,
            x=left + i * col_w,
            width=col_w,
            start_digit=int(start[i]),
            target_digit=int(target[i]),
            pitch=pitch,
        )
        for i in range(digits)
    ]


def _column(col: DigitColumn, palette: Palette, dur: str) -> str:
    clip_id = f"ct-clip-{col.index}"
    cx = num(col.x + col.width / 2)
    glyph_size = num(col.pitch * GLYPH_RATIO)
    glyphs = "\n".join(
        f'        <text x="{cx}" y="{num(PAD + d * col.pitch + col.pitch * BASELINE_RATIO)}">{d}</text>'
        for d in range(10)
    )
    return f"""  <clipPath id="{clip_id}">
    <rect x="{num(col.x)}" y="{PAD}" width="{num(col.width)}" height="{num(col.pitch)}"/>
  </clipPath>
  <g clip-path="url(#{clip_id})">
    <rect x="{num(col.x + 1)}" y="{PAD}" width="{num(max(col.width - 2, 1))}" height="{num(col.pitch)}" rx="4" fill="{palette.track}"/>
    <g transform="translate(0 {num(col.start_offset)})" font-size="{glyph_size}" text-anchor="middle" fill="{palette.text}">
      <animateTransform attributeName="transform" type="translate" from="0 {num(col.start_offset)}" to="0 {num(col.target_offset)}" dur="{dur}" fill="freeze"/>
      <g class="ct-strip">
{glyphs}
      </g>
    </g>
  </g>"""


def render_svg(spec: CounterSpec, palette: Palette) -> str:
    columns = digit_columns(spec)
    dur = seconds(spec.duration_ms)
    get_logger().debug("counter: %d digit(s), roll %s", len(columns), dur)
    parts = []
    if spec.label:
        parts.append(
            f'  <text x="{PAD}" y="{num(spec.height / 2 + LABEL_FONT_SIZE * 0.35)}" font-family="{DEFAULT_FONT}" '
            f'font-size="{LABEL_FONT_SIZE}" fill="{palette.muted}">{esc(spec.label)}</text>'
        )
    parts.append(f'  <g font-family="{DEFAULT_FONT}" font-weight="600">')
    parts.extend(_column(col, palette, dur) for col in columns)
    parts.append("  </g>")
    return svg_document(spec.width, spec.height, "\n".join(parts), background=palette.background)
