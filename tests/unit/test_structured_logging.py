"""Tests for structured logging context."""

import logging

import pytest
import structlog

from src.workflow_sync.core.logging import (
    bind_entity_context,
    bind_request_context,
    clear_request_context,
    setup_logging,
)

pytestmark = pytest.mark.unit


def test_bind_request_context(capturing_logger):
    bind_request_context("req-123")
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == "req-123"


def test_bind_request_context_with_none(capturing_logger):
    bind_request_context(None)
    structlog.get_logger().info("test message")

    assert "request_id" not in capturing_logger.calls[0].kwargs


def test_entity_context_tags_every_log_line(capturing_logger):
    bind_request_context("req-1")
    bind_entity_context("dispatch", 4)
    logger = structlog.get_logger()
    logger.info("first")
    logger.warning("second", target_type="sale")

    for entry in capturing_logger.calls:
        assert entry.kwargs["source_type"] == "dispatch"
        assert entry.kwargs["source_id"] == 4
        assert entry.kwargs["request_id"] == "req-1"
    assert capturing_logger.calls[1].kwargs["target_type"] == "sale"


def test_clear_request_context(capturing_logger):
    bind_entity_context("sale", 2)
    clear_request_context()
    structlog.get_logger().info("after clear")

    assert "source_type" not in capturing_logger.calls[0].kwargs


def test_setup_logging_quiets_http_client_loggers():
    try:
        setup_logging(debug=True)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
    finally:
        structlog.reset_defaults()
