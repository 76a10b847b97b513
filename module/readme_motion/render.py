"""Render driver: config items -> SVG files.

Items are independent: each one resolves its own palette from the read-only
theme table and renders to its own file, so order only affects logging.
An unknown ``type`` skips that item with an ``UnknownWidgetTypeWarning``;
theme and I/O errors propagate and abort the remaining writes.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from readme_motion.core.config import RenderConfig
from readme_motion.core.document import write_svg
from readme_motion.core.errors import ConfigError, UnknownWidgetTypeWarning
from readme_motion.core.logging_setup import get_logger
from readme_motion.core.models import BadgeSpec, WidgetSpec, WidgetType, parse_widget
from readme_motion.core.overlay import apply_overlay, overlay
from readme_motion.core.theme import DEFAULT_THEME_NAME, builtin_theme_table, resolve_palette
from readme_motion.widgets.badge import badge_layout
from readme_motion.widgets.registry import GENERATORS


def _document_width(spec: WidgetSpec) -> float:
    if spec.width is None and isinstance(spec, BadgeSpec):
        return badge_layout(spec).width
    return spec.width


def render_widget(
    spec: WidgetSpec,
    themes: Mapping[str, Mapping[str, str]],
    default_theme: str = DEFAULT_THEME_NAME,
    easter_egg: Optional[str] = None,
) -> str:
    """Return the SVG document for one spec."""
    palette = resolve_palette(themes, spec.theme or default_theme, spec.colors)
    markup = GENERATORS[spec.kind](spec, palette)
    get_logger().debug("rendered %s -> %s", spec.kind.value, spec.filename)
    return apply_overlay(markup, overlay(easter_egg, _document_width(spec), spec.height))


def render_item(
    item: Mapping[str, Any],
    themes: Mapping[str, Mapping[str, str]],
    default_theme: str = DEFAULT_THEME_NAME,
    easter_egg: Optional[str] = None,
) -> Optional[Tuple[str, str]]:
    """Return ``(filename, svg)`` for one raw item, or None if its type is unknown."""
    kind = WidgetType.lookup(item.get("type"))
    if kind is None:
        warnings.warn(
            f"Skipping unknown type: {item.get('type')!r}",
            UnknownWidgetTypeWarning,
            stacklevel=2,
        )
        return None
    spec = parse_widget(item)
    return spec.filename, render_widget(spec, themes, default_theme, easter_egg)


def render_config(
    cfg: RenderConfig,
    themes: Optional[Mapping[str, Mapping[str, str]]] = None,
    base_dir: Optional[Path] = None,
) -> List[Path]:
    """Render every item of *cfg* and return the written paths in input order."""
    log = get_logger()
    themes = themes if themes is not None else builtin_theme_table()
    out_dir = Path(cfg.out_dir)
    if base_dir is not None and not out_dir.is_absolute():
        out_dir = base_dir / out_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    root = out_dir.resolve()

    written: List[Path] = []
    for item in cfg.items:
        result = render_item(item, themes, cfg.theme, cfg.easter_egg)
        if result is None:
            continue
        filename, markup = result
        target = out_dir / filename
        if not target.resolve().is_relative_to(root):
            raise ConfigError(f"Output file {filename!r} escapes outDir {out_dir}")
        path = write_svg(target, markup)
        log.info("wrote %s", path)
        written.append(path)
    if not cfg.items:
        log.info("no items to render")
    return written
