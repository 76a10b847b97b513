import logging

import pytest

from readme_motion.core.theme import builtin_theme_table


@pytest.fixture
def themes():
    table = builtin_theme_table()
    table["light"] = {
        "background": "#f5f5f8",
        "text": "#111827",
        "muted": "#6b7280",
        "accent": "#6366f1",
        "track": "#e5e7eb",
        "good": "#16a34a",
        "warn": "#d97706",
        "bad": "#dc2626",
    }
    return table


@pytest.fixture
def palette(themes):
    from readme_motion.core.theme import resolve_palette

    return resolve_palette(themes, "dark", {})


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    for name in ("readme_motion", "py.warnings"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
    logging.captureWarnings(False)
