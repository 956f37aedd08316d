"""
Logging Setup
=============

Configures the root logger once at application start-up.
"""

import logging

from .config import LOG_LEVEL


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a single stream handler on the root logger."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
