"""Tests for package logging."""

import io
import logging

import numpy as np
import pytest

import symmanifolds as sm
from symmanifolds.core.logging import get_logger, log_function_call


@pytest.fixture
def captured():
    """Attach an in-memory handler to the package symmetric-matrices logger."""
    logger = get_logger("manifolds.symmetric")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(handler)
    previous = logger.level
    yield logger, stream
    logger.removeHandler(handler)
    logger.setLevel(previous)


class TestLogging:
    """Logger naming, levels and the call decorator."""

    def test_prefix(self):
        assert get_logger("foo").name == "symmanifolds.foo"
        assert get_logger("symmanifolds.bar").name == "symmanifolds.bar"
        assert get_logger("foo") is get_logger("symmanifolds.foo")

    def test_not_propagated(self):
        assert get_logger("foo").propagate is False

    def test_set_log_level_updates_existing_loggers(self):
        logger = get_logger("level_probe")
        try:
            sm.set_log_level("DEBUG")
            assert logger.level == logging.DEBUG
            assert sm.get_config().log_level == "DEBUG"
            sm.set_log_level(logging.ERROR)
            assert logger.level == logging.ERROR
            assert sm.get_config().log_level == "ERROR"
        finally:
            sm.set_log_level("WARNING")

    def test_failed_check_logged_at_debug(self, captured):
        logger, stream = captured
        logger.setLevel(logging.DEBUG)
        M = sm.SymmetricMatrices(2)
        assert M.check_point(np.array([[1.0, 2.0], [0.0, 1.0]])) is not None
        assert "DEBUG" in stream.getvalue()

    def test_quiet_at_warning(self, captured):
        logger, stream = captured
        logger.setLevel(logging.WARNING)
        sm.SymmetricMatrices(2).check_point(np.array([[1.0, 2.0], [0.0, 1.0]]))
        assert stream.getvalue() == ""

    def test_log_function_call(self):
        logger = logging.getLogger("symmanifolds.tests.decorated")
        stream = io.StringIO()
        logger.addHandler(logging.StreamHandler(stream))
        logger.setLevel(logging.DEBUG)
        try:
            @log_function_call(logger=logger, include_args=True)
            def scale(a, factor=2.0):
                return a * factor

            scale(np.ones((2, 3)), factor=3.0)
            output = stream.getvalue()
            assert "Calling scale(<float64[2, 3]>, factor=3.0)" in output
            assert "scale completed in" in output
        finally:
            logger.handlers.clear()

    def test_log_function_call_reraises(self):
        logger = logging.getLogger("symmanifolds.tests.failing")
        stream = io.StringIO()
        logger.addHandler(logging.StreamHandler(stream))
        try:
            @log_function_call(logger=logger)
            def broken():
                raise ValueError("boom")

            with pytest.raises(ValueError, match="boom"):
                broken()
            assert "broken failed after" in stream.getvalue()
            assert "ValueError: boom" in stream.getvalue()
        finally:
            logger.handlers.clear()
