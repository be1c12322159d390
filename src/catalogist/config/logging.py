"""Logging setup for the catalogist command line."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, verbose: bool = False, force: bool = False) -> int:
    """Initialise the root logger and return the level chosen.

    INFO shows the per-catalog summary and duplicate/alias warnings;
    ``verbose`` switches to DEBUG, which adds one line per pipeline phase.
    Pass ``force=True`` to reconfigure during tests.
    """

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    return level
