"""Typed dispatch table: one generator per WidgetType member."""

from __future__ import annotations

from typing import Callable, Dict

from readme_motion.core.models import WidgetSpec, WidgetType
from readme_motion.core.theme import Palette

from . import badge, counter, progress, sparkline, ticker, typewriter

Generator = Callable[[WidgetSpec, Palette], str]

GENERATORS: Dict[WidgetType, Generator] = {
    WidgetType.TYPEWRITER: typewriter.render_svg,
    WidgetType.PROGRESS: progress.render_svg,
    WidgetType.BADGE: badge.render_svg,
    WidgetType.COUNTER: counter.render_svg,
    WidgetType.SPARKLINE: sparkline.render_svg,
    WidgetType.TICKER: ticker.render_svg,
}

_missing = set(WidgetType) - set(GENERATORS)
if _missing:
    raise RuntimeError(f"No generator registered for: {sorted(m.value for m in _missing)}")
