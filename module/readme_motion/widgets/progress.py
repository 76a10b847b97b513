"""Progress: a labelled bar that fills once to ``percent`` and freezes."""

from __future__ import annotations

from dataclasses import dataclass

from readme_motion.core.document import svg_document
from readme_motion.core.models import DEFAULT_FONT, ProgressSpec
from readme_motion.core.theme import Palette
from readme_motion.core.utils import esc, num

PAD = 12
LABEL_HEIGHT = 18  # room above the track for the label line
LABEL_FONT_SIZE = 14
CORNER = 6
FILL_DUR = "1.2s"


@dataclass(frozen=True)
class ProgressLayout:
    inner_width: float
    inner_height: float
    bar_width: float


def progress_layout(width: float, height: float, percent: float) -> ProgressLayout:
    inner_w = width - PAD * 2
    inner_h = max(height - PAD * 2 - LABEL_HEIGHT, 1)
    return ProgressLayout(
        inner_width=inner_w,
        inner_height=inner_h,
        bar_width=inner_w * percent / 100,
    )


def render_svg(spec: ProgressSpec, palette: Palette) -> str:
    layout = progress_layout(spec.width, spec.height, spec.percent)
    track_y = PAD + LABEL_HEIGHT
    w, h = num(layout.inner_width), num(layout.inner_height)
    body = f"""  <text x="{PAD}" y="{PAD + 14}" font-family="{DEFAULT_FONT}" font-size="{LABEL_FONT_SIZE}" fill="{palette.text}">{esc(spec.label)} — {num(spec.percent)}%</text>
  <rect x="{PAD}" y="{track_y}" rx="{CORNER}" ry="{CORNER}" width="{w}" height="{h}" fill="{palette.track}"/>
  <rect x="{PAD}" y="{track_y}" rx="{CORNER}" ry="{CORNER}" width="0" height="{h}" fill="{palette.accent}">
    <animate attributeName="width" from="0" to="{num(layout.bar_width)}" dur="{FILL_DUR}" fill="freeze"/>
  </rect>"""
    return svg_document(spec.width, spec.height, body, background=palette.background)
