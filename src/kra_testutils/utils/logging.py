"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package-namespaced loggers.
    - Allow an optional verbose/debug mode for the CLI.

Notes/Edge cases:
    - The package root logger carries a ``NullHandler`` so library use stays
      silent unless the host application configures logging.
    - :func:`configure_logging` is idempotent.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "kra_testutils"

_HANDLER_ATTR = "_kra_testutils_handler"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root for ``name``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach exactly one stderr handler to the package root logger."""

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)
    # Replace rather than reuse: sys.stderr may have been swapped since.
    for old in [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]:
        root.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler.setLevel(level)
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    return root
