"""Logging setup.

rolegate logs through loguru and is silent until the host opts in with
``setup_logging``.
"""

import sys

from loguru import logger


def setup_logging(level: str = "INFO", json_logs: bool = False) -> int:
    """Enable rolegate log records and send them to stderr.

    Returns the loguru handler id so the host can remove the sink again.
    """
    logger.enable("rolegate")
    return logger.add(
        sys.stderr,
        level=level.upper(),
        serialize=json_logs,
        filter="rolegate",
    )
