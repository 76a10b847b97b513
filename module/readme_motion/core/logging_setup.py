"""Console logging for the CLI and render driver."""

from __future__ import annotations

import logging
import warnings

from .errors import UnknownWidgetTypeWarning

_LOGGER_NAME = "readme_motion"


def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(handler)

    # UnknownWidgetTypeWarning and friends go through the same handler,
    # once per skipped item.
    warnings.simplefilter("always", UnknownWidgetTypeWarning)
    logging.captureWarnings(True)
    warnings_logger = logging.getLogger("py.warnings")
    if not warnings_logger.handlers:
        warnings_logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
