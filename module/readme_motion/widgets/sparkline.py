"""Sparkline: a polyline drawn once via a dash-offset reveal.

Samples are coerced with pandas; non-numeric entries are dropped and an
all-empty series falls back to the built-in sample. The reveal uses an
approximate path length (bounding diagonal plus a per-point constant),
not the exact arc length.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd

from readme_motion.core.document import svg_document
from readme_motion.core.models import DEFAULT_FONT, SAMPLE_SERIES, SparklineSpec
from readme_motion.core.theme import Palette
from readme_motion.core.utils import esc, num

PAD = 8
LABEL_HEIGHT = 18
LABEL_FONT_SIZE = 12
PER_POINT_LENGTH = 4
STROKE_WIDTH = 2
DRAW_DUR = "1.4s"


@dataclass(frozen=True)
class SparkGeometry:
    points: Tuple[Tuple[float, float], ...]
    path_length: float


def clean_series(data: Sequence[object]) -> List[float]:
    values = pd.to_numeric(pd.Series(list(data), dtype="object"), errors="coerce").dropna()
    if values.empty:
        return [float(v) for v in SAMPLE_SERIES]
    return values.astype(float).tolist()


def spark_geometry(values: Sequence[float], width: float, height: float) -> SparkGeometry:
    """Map samples into the drawable box (y inverted: larger values sit higher)."""
    series = pd.Series(values, dtype="float64")
    lo, hi = float(series.min()), float(series.max())
    rng = (hi - lo) or 1.0
    left, top = PAD, PAD + LABEL_HEIGHT
    w = max(width - PAD * 2, 1)
    h = max(height - top - PAD, 1)
    step = w / max(len(values) - 1, 1)
    points = tuple(
        (left + i * step, top + (1 - (v - lo) / rng) * h)
        for i, v in enumerate(series.tolist())
    )
    return SparkGeometry(points=points, path_length=math.hypot(w, h) + PER_POINT_LENGTH * len(points))


def _path_d(points: Sequence[Tuple[float, float]]) -> str:
    return "M " + " L ".join(f"{num(x)},{num(y)}" for x, y in points)


def render_svg(spec: SparklineSpec, palette: Palette) -> str:
    geo = spark_geometry(clean_series(spec.data), spec.width, spec.height)
    length = num(geo.path_length)
    body = f"""  <text x="{PAD}" y="{PAD + 12}" font-family="{DEFAULT_FONT}" font-size="{LABEL_FONT_SIZE}" fill="{palette.muted}">{esc(spec.label)}</text>
  <path d="{_path_d(geo.points)}" fill="none" stroke="{palette.accent}" stroke-width="{STROKE_WIDTH}" stroke-linecap="round" stroke-linejoin="round" stroke-dasharray="{length}" stroke-dashoffset="{length}">
    <animate attributeName="stroke-dashoffset" from="{length}" to="0" dur="{DRAW_DUR}" fill="freeze"/>
  </path>"""
    return svg_document(spec.width, spec.height, body, background=palette.background)
