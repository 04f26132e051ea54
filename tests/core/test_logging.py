# -*- coding: utf-8 -*-
"""Tests for structured logging system."""

import logging
from unittest.mock import patch

import structlog

from newsdesk.core.logging import (
    bind_context,
    clear_context,
    get_log_level,
    get_logger,
    get_processors,
    setup_logging,
    unbind_context,
)


class TestLogging:
    """Tests for logging configuration."""

    def setup_method(self):
        structlog.reset_defaults()

    def test_get_log_level_default(self):
        with patch("newsdesk.core.logging.get_settings") as mock_settings:
            mock_settings.return_value.log_level = "INFO"
            assert get_log_level() == logging.INFO

    def test_get_log_level_is_case_insensitive(self):
        with patch("newsdesk.core.logging.get_settings") as mock_settings:
            mock_settings.return_value.log_level = "debug"
            assert get_log_level() == logging.DEBUG

    def test_get_log_level_invalid_defaults_to_info(self):
        with patch("newsdesk.core.logging.get_settings") as mock_settings:
            mock_settings.return_value.log_level = "INVALID"
            assert get_log_level() == logging.INFO

    def test_json_processors_end_with_json_renderer(self):
        processors = get_processors(json_format=True)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_processors_end_with_console_renderer(self):
        processors = get_processors(json_format=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_setup_logging_quiets_scheduler(self):
        with patch("newsdesk.core.logging.get_settings") as mock_settings:
            mock_settings.return_value.log_level = "INFO"
            mock_settings.return_value.log_format = "console"
            mock_settings.return_value.is_production = False

            setup_logging()

        assert logging.getLogger("apscheduler").level == logging.WARNING
        logger = get_logger("test.module")
        assert hasattr(logger, "info")
        assert hasattr(logger, "error")


class TestContextBinding:
    """Tests for context binding functions."""

    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_bind_context(self):
        bind_context(request_id="123", user_id="admin-1")

        ctx = structlog.contextvars.get_contextvars()
        assert ctx.get("request_id") == "123"
        assert ctx.get("user_id") == "admin-1"

    def test_clear_context(self):
        bind_context(request_id="123")
        clear_context()

        assert "request_id" not in structlog.contextvars.get_contextvars()

    def test_unbind_context(self):
        bind_context(request_id="123", user_id="admin-1", deleted_item_id="d1")
        unbind_context("request_id", "deleted_item_id")

        ctx = structlog.contextvars.get_contextvars()
        assert "request_id" not in ctx
        assert "deleted_item_id" not in ctx
        assert ctx.get("user_id") == "admin-1"
