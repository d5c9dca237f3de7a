"""Centralized logging configuration."""

import sys

from loguru import logger


log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}::{function}:{line}</>',
        '{message}',
    )
)


def configure_logging(level='WARNING', log_file=None):
    # stdout belongs to the menu, diagnostics go to stderr
    logger.remove()
    logger.add(sys.stderr, format=log_format, level=level)

    if log_file:
        logger.add(
            log_file,
            format=log_format,
            level='INFO',
            rotation='1 day',
            retention='30 days',
            enqueue=True,
        )
    return logger
