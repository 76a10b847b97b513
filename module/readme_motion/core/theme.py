"""Color roles, the built-in dark theme and palette resolution.

A theme table maps a theme name to a plain ``{role: color}`` dict. Every
widget render resolves exactly one :class:`Palette` from it: an item-level
override (under any accepted alias) wins, otherwise the theme's color is
used. Incomplete themes are back-filled from the table's ``dark`` entry and
then from the built-in dark palette, with a warning naming the missing roles.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigError, ThemeResolutionError
from .logging_setup import get_logger

DEFAULT_THEME_NAME = "dark"

ROLES: Tuple[str, ...] = (
    "background",
    "text",
    "muted",
    "accent",
    "track",
    "good",
    "warn",
    "bad",
)

# Item-level field names accepted per role, checked in this order.
ROLE_ALIASES: Dict[str, Tuple[str, ...]] = {
    "background": ("bg", "background"),
    "text": ("textColor", "text"),
    "muted": ("mutedColor", "muted"),
    "accent": ("accent", "accentColor", "barColor", "cursorColor"),
    "track": ("trackColor", "track"),
    "good": ("goodColor", "good"),
    "warn": ("warnColor", "warn"),
    "bad": ("badColor", "bad"),
}

# GitHub-dark inspired defaults.
DARK_THEME: Dict[str, str] = {
    "background": "#0d1117",   # page background
    "text": "#E6EDF3",         # primary text
    "muted": "#8b949e",        # secondary text
    "accent": "#00E5FF",       # cursor, bars, lines
    "track": "#1f2937",        # unfilled track
    "good": "#22c55e",
    "warn": "#f59e0b",
    "bad": "#ef4444",
}

ThemeTable = Dict[str, Dict[str, str]]


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    muted: str
    accent: str
    track: str
    good: str
    warn: str
    bad: str

    def tone(self, name: str) -> str:
        """Return the status color for ``good`` / ``warn`` / ``bad``."""
        if name not in ("good", "warn", "bad"):
            raise KeyError(f"Unknown tone: {name}")
        return getattr(self, name)


def builtin_theme_table() -> ThemeTable:
    """Return a fresh table holding only the built-in ``dark`` theme."""
    return {DEFAULT_THEME_NAME: dict(DARK_THEME)}


def load_theme_table(path: Optional[Path]) -> ThemeTable:
    """Read a ``{name: {role: color}}`` JSON file.

    Unknown role keys are dropped. A missing path (or ``None``) yields the
    built-in table.
    """
    if path is None or not path.exists():
        return builtin_theme_table()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read theme file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Theme file {path} must contain a JSON object")

    table: ThemeTable = {}
    for name, roles in raw.items():
        if not isinstance(roles, dict):
            raise ConfigError(f"Theme '{name}' in {path} must be an object")
        table[str(name)] = {
            role: str(roles[role])
            for role in ROLES
            if roles.get(role) not in (None, "")
        }
    return table


def _override(role: str, overrides: Mapping[str, Any]) -> Optional[str]:
    for alias in ROLE_ALIASES[role]:
        value = overrides.get(alias)
        if value is not None:
            return str(value)
    return None


def resolve_palette(
    themes: Mapping[str, Mapping[str, str]],
    requested: Optional[str],
    overrides: Mapping[str, Any],
) -> Palette:
    """Merge a named theme with per-item color overrides into one Palette."""
    log = get_logger()
    name = requested or DEFAULT_THEME_NAME
    theme = themes.get(name)
    if theme is None:
        theme = themes.get(DEFAULT_THEME_NAME)
        if theme is None:
            raise ThemeResolutionError(
                f"Theme '{name}' not found and no '{DEFAULT_THEME_NAME}' fallback "
                f"(available: {sorted(themes)})"
            )
        log.warning("theme '%s' not found, using '%s'", name, DEFAULT_THEME_NAME)

    fallback = themes.get(DEFAULT_THEME_NAME) or {}
    colors: Dict[str, str] = {}
    missing = []
    for role in ROLES:
        value = _override(role, overrides) or theme.get(role)
        if not value:
            missing.append(role)
            value = fallback.get(role) or DARK_THEME[role]
        colors[role] = value
    if missing:
        log.warning("theme '%s' lacks %s; filled from '%s'", name, ", ".join(missing), DEFAULT_THEME_NAME)
    return Palette(**colors)
