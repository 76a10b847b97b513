import json
import logging

import pytest

from readme_motion.core.errors import ConfigError, ThemeResolutionError
from readme_motion.core.theme import (
    DARK_THEME,
    ROLES,
    builtin_theme_table,
    load_theme_table,
    resolve_palette,
)


def _table(**extra):
    table = builtin_theme_table()
    table.update(extra)
    return table


def test_item_override_wins_over_theme():
    table = _table(custom={"accent": "#111"})
    assert resolve_palette(table, "custom", {"accent": "#222"}).accent == "#222"


def test_theme_value_used_without_override():
    table = _table(custom={"accent": "#111"})
    assert resolve_palette(table, "custom", {}).accent == "#111"


def test_aliases_checked_in_priority_order():
    table = builtin_theme_table()
    p = resolve_palette(table, "dark", {"barColor": "#333", "accent": "#444", "bg": "#000", "background": "#fff"})
    assert p.accent == "#444"
    assert p.background == "#000"


def test_null_override_falls_through_to_next_alias():
    p = resolve_palette(builtin_theme_table(), "dark", {"accent": None, "barColor": "#555"})
    assert p.accent == "#555"


def test_missing_theme_falls_back_to_dark(caplog):
    with caplog.at_level(logging.WARNING, logger="readme_motion"):
        p = resolve_palette(builtin_theme_table(), "neon", {})
    assert p.text == DARK_THEME["text"]
    assert "neon" in caplog.text


def test_missing_theme_and_dark_is_an_error():
    with pytest.raises(ThemeResolutionError):
        resolve_palette({"light": dict(DARK_THEME)}, "neon", {})
    assert issubclass(ThemeResolutionError, ConfigError)


def test_incomplete_theme_is_back_filled(caplog):
    table = _table(partial={"accent": "#abcdef"})
    with caplog.at_level(logging.WARNING, logger="readme_motion"):
        p = resolve_palette(table, "partial", {})
    assert p.accent == "#abcdef"
    assert p.track == DARK_THEME["track"]
    assert all(getattr(p, role) for role in ROLES)
    assert "track" in caplog.text


def test_tone_lookup(palette):
    assert palette.tone("bad") == DARK_THEME["bad"]
    with pytest.raises(KeyError):
        palette.tone("meh")


def test_load_theme_table_missing_file_is_builtin(tmp_path):
    assert load_theme_table(tmp_path / "themes.json") == builtin_theme_table()
    assert load_theme_table(None) == builtin_theme_table()


def test_load_theme_table_drops_unknown_roles(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text(json.dumps({"mono": {"accent": "#fff", "sparkle": "#f0f"}}), encoding="utf-8")
    assert load_theme_table(path) == {"mono": {"accent": "#fff"}}


def test_load_theme_table_rejects_bad_json(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text("{nope", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_theme_table(path)
