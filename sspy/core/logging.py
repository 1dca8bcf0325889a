"""Logging utilities for sspy modules."""

import logging

PACKAGE_LOGGER = 'sspy'


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the ``sspy`` hierarchy.

    Names outside the package (``__main__`` when a module is run as a
    script) are nested under ``sspy`` so a single level on the package
    logger controls every module. Module loggers keep level NOTSET and
    propagate, so they also work with basicConfig(). The package logger
    defaults to WARNING until the root logger has handlers.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger named ``sspy.<name>``, or ``name`` if already in the package
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + '.'):
        name = f"{PACKAGE_LOGGER}.{name}"

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.level == logging.NOTSET and not logging.getLogger().handlers:
        package_logger.setLevel(logging.WARNING)

    return logging.getLogger(name)


def set_level(level: int) -> logging.Logger:
    """Sets the level shared by every sspy module logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    return package_logger
