"""Logger setup for the game and its tools"""
from __future__ import annotations

import logging

from rich.logging import RichHandler


def setup_logger(*, name: str = "tetris", use_rich: bool = True, level: str = "info") -> logging.Logger:
    """Configure the root logger and return the named one.

    Modules log through logging.getLogger(__name__), so handlers go on the
    root logger to catch every tetris_* module.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler: logging.Handler
    if use_rich:
        handler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))

    root.addHandler(handler)
    return logging.getLogger(name)


__all__ = ["setup_logger"]
