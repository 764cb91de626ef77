"""
Logging Configuration for the Projection Engine.

All modules obtain their logger through :func:`get_logger` so that log
records share one format. Projections log their derived constants at
DEBUG level when constructed and log per-point failures at DEBUG level
before raising; the caller decides how severe a failed point is.
"""

import logging
import sys


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the projection engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_level(level: int, prefix: str = "cartography") -> None:
    """Change the level of every logger under a package prefix.

    Parameters
    ----------
    level : int
        New logging level (e.g. ``logging.DEBUG``).
    prefix : str
        Logger name prefix to adjust.
    """
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (
            name == prefix or name.startswith(prefix + ".")
        ):
            logger.setLevel(level)
