"""Render configuration: load, default and scaffold ``motion.config.json``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigError
from .theme import DEFAULT_THEME_NAME

CONFIG_FILENAME = "motion.config.json"
THEMES_FILENAME = "themes.json"
DEFAULT_OUT_DIR = "assets"


@dataclass(frozen=True)
class RenderConfig:
    theme: str = DEFAULT_THEME_NAME
    out_dir: str = DEFAULT_OUT_DIR
    easter_egg: Optional[str] = None
    # Raw item mappings; each is parsed into a WidgetSpec by the render driver
    # so an unknown type only skips that item.
    items: Tuple[Mapping[str, Any], ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, raw: Any) -> "RenderConfig":
        if not isinstance(raw, dict):
            raise ConfigError("Config must be a JSON object")
        items = raw.get("items")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise ConfigError(f"'items' must be a list, got {type(items).__name__}")
        for i, item in enumerate(items):
            if not isinstance(item, dict):
                raise ConfigError(f"items[{i}] must be an object")
        egg = raw.get("easterEgg")
        return cls(
            theme=str(raw.get("theme") or DEFAULT_THEME_NAME),
            out_dir=str(raw.get("outDir") or DEFAULT_OUT_DIR),
            easter_egg=None if egg is None else str(egg),
            items=tuple(items),
        )


def load_config(path: Path) -> RenderConfig:
    if not path.exists():
        raise ConfigError(f"Config not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    return RenderConfig.from_mapping(raw)


def sample_config() -> Dict[str, Any]:
    """One example item per widget type, written by ``--init``."""
    return {
        "theme": DEFAULT_THEME_NAME,
        "outDir": DEFAULT_OUT_DIR,
        "items": [
            {
                "type": "typewriter",
                "file": "typing.svg",
                "width": 600,
                "height": 60,
                "fontFamily": "Inter, Segoe UI, Roboto, Arial",
                "fontSize": 26,
                "bg": "transparent",
                "lines": ["Hello, world!", "Welcome to readme-motion."],
                "speedMs": 70,
                "pauseMs": 1000,
            },
            {
                "type": "progress",
                "file": "progress-demo.svg",
                "width": 600,
                "height": 60,
                "label": "Demo Progress",
                "percent": 42,
            },
            {"type": "badge", "file": "build.svg", "label": "build", "value": "passing", "tone": "good", "pulse": True},
            {"type": "counter", "file": "stars.svg", "label": "Stars", "from": 0, "to": 1280, "durationMs": 1500},
            {"type": "sparkline", "file": "downloads.svg", "label": "Downloads", "data": [3, 5, 4, 9, 7, 12, 15]},
            {"type": "ticker", "file": "news.svg", "text": "v0.1.0 released", "speed": 60},
        ],
    }


def write_sample_config(path: Path, force: bool = False) -> Path:
    if path.exists() and not force:
        raise ConfigError(f"{path} already exists (use --force to overwrite)")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(sample_config(), indent=2) + "\n", encoding="utf-8")
    return path
