"""Loguru setup shared by the CLI and the registry loader."""

import sys

from loguru import logger

_PLAIN_FORMAT = "{level.icon} {message}"
_DEBUG_FORMAT = "{level.icon} <dim>{name}:{function}</dim> {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send catalog logs to stderr, at DEBUG with source locations when verbose."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=_DEBUG_FORMAT)
    else:
        logger.add(sys.stderr, level="INFO", format=_PLAIN_FORMAT)
