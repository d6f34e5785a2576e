"""
Logging helpers. The library only attaches a NullHandler; applications that
want to see what the model does call configure_logging().
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "VSMRetriever"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level=logging.INFO, console: Console = None) -> logging.Logger:
    """
    Attach a rich handler to the package logger.

    Args:
        level: Logging level for the package logger
        console: Optional rich Console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Replace a handler installed by an earlier call
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
