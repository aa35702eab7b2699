"""Root logger configuration for the API process."""

from __future__ import annotations

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger unless one is already there.

    Uvicorn and pytest both install their own handlers, in which case only the
    level is applied.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
