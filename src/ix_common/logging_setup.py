"""Logging bootstrap for library consumers and scripts.

Log format:
    INFO src.ix_scallop.application.quick: Stake skipped: obligation 0x.. already staked
"""

import logging

from config.settings import settings

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL (or an explicit level) to the root logger."""
    resolved = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(format=_FORMAT)
    logging.getLogger().setLevel(resolved)
    if settings.DEBUG:
        logging.getLogger("httpx").setLevel(logging.DEBUG)
