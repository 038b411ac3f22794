"""Unit tests for the named loggers."""

import logging

from hrflow.logging_config import get_api_logger, get_simulation_logger, setup_logger


class TestNamedLoggers:
    """Test logger naming and one-time handler setup."""

    def test_loggers_carry_project_prefix(self):
        assert get_api_logger().name == "hrflow.api"
        assert get_simulation_logger().name == "hrflow.simulation"

    def test_handlers_are_added_once(self):
        first = setup_logger("hrflow.test_once", "test_once.log")
        second = setup_logger("hrflow.test_once", "test_once.log")

        assert first is second
        assert len(first.handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in first.handlers)
        assert first.propagate is False
