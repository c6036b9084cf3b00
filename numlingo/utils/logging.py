"""Opt-in console output for numlingo's fallback diagnostics.

The converters never raise on an unsupported language code, an unknown
country or a number past the largest scale word. They fall back (English
tables, the language's default currency, plain digits) and note it at DEBUG
level on a logger under ``numlingo``. Nothing is printed until an application
attaches a handler, which is what :func:`setup_logger` does.
"""

from __future__ import annotations

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "numlingo"

# Shared by every handler setup_logger attaches
console = Console(stderr=True)


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG",
    rich_tracebacks: bool = True,
    output: Console | None = None,
) -> logging.Logger:
    """Print numlingo's diagnostics through a Rich handler.

    Calling it again replaces the previous handler, so the level can be
    changed at runtime.

    Args:
        name: Logger to attach to. The default covers every module in the
            package.
        level: Lowest level shown. Fallback notes are DEBUG.
        rich_tracebacks: Render exceptions logged with ``exc_info`` by Rich.
        output: Console to write to instead of the shared stderr console.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=output or console,
        show_path=False,
        rich_tracebacks=rich_tracebacks,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger
