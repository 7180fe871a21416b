"""Unit tests for src/core/logging.py"""

import logging

from src.core.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_loggers_are_cached_and_namespaced() -> None:
    logger = get_logger("service")
    assert logger is get_logger("service")
    assert logger.name == f"{ROOT_LOGGER_NAME}.service"


def test_single_handler_on_namespace_root() -> None:
    get_logger("a")
    get_logger("b")
    # pytest attaches its own capture handlers as well, only count ours
    handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
    assert sum(type(handler) is logging.StreamHandler for handler in handlers) == 1


def test_configure_logging_sets_level() -> None:
    configure_logging("DEBUG")
    assert get_logger("service").getEffectiveLevel() == logging.DEBUG
    configure_logging("INFO")
    assert get_logger("service").getEffectiveLevel() == logging.INFO
