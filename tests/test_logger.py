import logging

import pytest

from arraykoans.logger.logger import logger, setup_logger


def test_default_logger():
    assert logger.name == "arraykoans"
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_setup_logger_is_configured_once():
    first = setup_logger("arraykoans.test_once")
    second = setup_logger("arraykoans.test_once")
    assert first is second
    assert len(second.handlers) == 1


def test_setup_logger_level_from_argument():
    log = setup_logger("arraykoans.test_level", level="debug")
    assert log.level == logging.DEBUG
    log = setup_logger("arraykoans.test_level", level="ERROR")
    assert log.level == logging.ERROR


def test_setup_logger_level_from_environment(monkeypatch):
    monkeypatch.setenv("ARRAYKOANS_LOG_LEVEL", "WARNING")
    log = setup_logger("arraykoans.test_env")
    assert log.level == logging.WARNING


def test_setup_logger_custom_format():
    log = setup_logger("arraykoans.test_format", format_string="%(message)s")
    assert log.handlers[0].formatter._fmt == "%(message)s"


def test_setup_logger_ignores_unknown_environment_level(monkeypatch):
    monkeypatch.setenv("ARRAYKOANS_LOG_LEVEL", "loud")
    log = setup_logger("arraykoans.test_bad_env")
    assert log.level == logging.INFO


def test_setup_logger_rejects_unknown_explicit_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logger("arraykoans.test_bad_level", level="loud")
