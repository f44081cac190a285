"""Test logging configuration."""

import logging
import sys

from uri_template_matcher import configure_logging
from uri_template_matcher.log import FORMAT_STRING, _already_configured


def _stdout_handlers(log):
    return [
        h
        for h in log.handlers
        if isinstance(h, logging.StreamHandler) and h.stream == sys.stdout
    ]


def test_configure_logging_default(package_logger, monkeypatch):
    """Logs errors only by default."""
    monkeypatch.delenv("URI_TEMPLATE_MATCHER_DEBUG", raising=False)
    log = configure_logging()
    assert log is package_logger
    assert log.getEffectiveLevel() == logging.ERROR
    assert not log.propagate
    handlers = _stdout_handlers(log)
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == FORMAT_STRING


def test_configure_logging_debug(package_logger):
    """Debug flag enables debug output."""
    log = configure_logging(debug=True)
    assert log.getEffectiveLevel() == logging.DEBUG


def test_configure_logging_from_env(package_logger, monkeypatch):
    """Debug flag falls back to the environment."""
    monkeypatch.setenv("URI_TEMPLATE_MATCHER_DEBUG", "True")
    assert configure_logging().getEffectiveLevel() == logging.DEBUG

    monkeypatch.setenv("URI_TEMPLATE_MATCHER_DEBUG", "0")
    assert configure_logging().getEffectiveLevel() == logging.ERROR


def test_configure_logging_idempotent(package_logger):
    """Calling twice does not add a second handler."""
    configure_logging(debug=False)
    log = configure_logging(debug=True)
    assert len(_stdout_handlers(log)) == 1
    assert log.getEffectiveLevel() == logging.DEBUG


def test_already_configured_no_handlers():
    """Logger without handlers is not configured."""
    empty_logger = logging.getLogger("empty_test")
    empty_logger.handlers = []
    assert _already_configured(empty_logger) is False


def test_already_configured_with_different_stream():
    """Only a stdout handler counts."""
    test_logger = logging.getLogger("stream_test")
    test_logger.handlers = []
    handler = logging.StreamHandler(sys.stderr)
    test_logger.addHandler(handler)

    assert _already_configured(test_logger) is False

    test_logger.removeHandler(handler)
