"""Tests for logging utilities."""

import logging
from io import StringIO

import pytest

from gatenoise.channels import depolarizing_kraus
from gatenoise.logging import configure_logging, get_logger, set_log_level
from gatenoise.noise import classify_kraus


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging(level=logging.WARNING)


def test_get_logger_namespaces_names():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "gatenoise.test_module"


def test_get_logger_keeps_package_names():
    assert get_logger("gatenoise.noise").name == "gatenoise.noise"
    assert get_logger().name == "gatenoise"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_different_modules_get_different_loggers():
    assert get_logger("module1") is not get_logger("module2")


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level_string():
    logger = get_logger("test_module")
    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG
    set_log_level("ERROR")
    assert logger.level == logging.ERROR


def test_configure_logging_stream():
    stream = StringIO()
    configure_logging(level=logging.INFO, stream=stream)
    get_logger("test_module").info("Test message")
    assert "[INFO] gatenoise.test_module: Test message" in stream.getvalue()


def test_classification_logged_at_debug():
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    classify_kraus(depolarizing_kraus(0.1))
    assert "Classified 4 Kraus operators: 3 unitary, 0 residual" in stream.getvalue()
