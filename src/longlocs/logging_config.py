"""Logging configuration for longlocs."""
import logging
import sys


def setup_logging(debug: bool = False, quiet: bool = False) -> None:
    """Configure logging for longlocs.

    Progress messages and the final report are logged at INFO, so that is
    the default level.

    Args:
        debug: Enable debug logging (per-entry traversal decisions)
        quiet: Enable quiet (ERROR only) logging
    """
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logger = logging.getLogger("longlocs")
    logger.setLevel(level)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'longlocs.')

    Returns:
        Logger instance
    """
    if name != "longlocs" and not name.startswith("longlocs."):
        name = f"longlocs.{name}"
    return logging.getLogger(name)
