"""Named loggers for all layers, living under the 'tennis' namespace."""

import logging

ROOT_LOGGER_NAME = "tennis"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGERS: dict[str, logging.Logger] = {}


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)
        root.setLevel(logging.INFO)
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Create or retrieve a named logger.

    name: logger namespace below 'tennis' (e.g. service, db.memory)
    """
    if name in _LOGGERS:
        return _LOGGERS[name]

    _root_logger()
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    _LOGGERS[name] = logger
    return logger


def configure_logging(level: str | int) -> None:
    """Set the level for every logger in the namespace."""
    _root_logger().setLevel(level)
