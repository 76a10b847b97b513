"""Error taxonomy for a render pass."""

from __future__ import annotations


class ConfigError(ValueError):
    """Malformed or unreadable configuration; halts the whole pass."""


class ThemeResolutionError(ConfigError):
    """Neither the requested theme nor the ``dark`` fallback is available."""


class UnknownWidgetTypeWarning(UserWarning):
    """An item declared a ``type`` no generator handles; the item is skipped."""
