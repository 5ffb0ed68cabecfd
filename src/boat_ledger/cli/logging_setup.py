"""Logging configuration for the CLI.

Diagnostics from ``core`` and ``infra`` go through the standard
``logging`` module and are rendered on stderr by a Rich handler.
"""

from __future__ import annotations

import logging

from boat_ledger.cli.console import get_rich_console
from boat_ledger.exceptions import EnvironmentError

PACKAGE_LOGGER = "boat_ledger"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    ``verbose`` lowers the threshold from WARNING to DEBUG.  Calling this
    again replaces the previous handler.
    """
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
