"""Configure logging for the midi2mod package."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """
    Attach a Rich handler to the ``midi2mod`` logger.

    INFO by default, DEBUG when ``verbose`` is set. Output goes to stderr
    unless a console is given.
    """
    logger = logging.getLogger("midi2mod")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
