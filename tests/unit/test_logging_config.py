"""Tests for logging configuration and operation context."""

import logging

import pytest

from mcp_jira.logging_config import (
    OperationContextFilter,
    format_context,
    get_log_context,
    log_operation,
    setup_logger,
)


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []
        self.addFilter(OperationContextFilter())

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def recorded():
    """A debug-level child logger whose records are kept for inspection."""
    logger = logging.getLogger("mcp-jira.tests.logging")
    handler = RecordingHandler()
    old_level = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    yield logger, handler.records
    logger.removeHandler(handler)
    logger.setLevel(old_level)


def test_format_context():
    assert format_context(None) == "no-context"
    assert format_context({}) == "no-context"
    assert format_context({"operation": "get_issue", "issue": "PROJ-1"}) == (
        "operation=get_issue,issue=PROJ-1"
    )


class TestLogOperation:
    """Tests for the log_operation context manager."""

    def test_sets_and_restores_context(self, recorded):
        logger, records = recorded

        with log_operation(logger, "get_issue", issue="PROJ-1", project=None) as op:
            context = get_log_context()
            logger.info("inside")

        assert context == {
            "operation": "get_issue",
            "issue": "PROJ-1",
            "trace_id": op.trace_id,
        }
        assert get_log_context() == {}
        assert [r.getMessage() for r in records][0] == "Operation started: get_issue"
        inside = records[1]
        assert inside.context == f"operation=get_issue,issue=PROJ-1,trace_id={op.trace_id}"
        assert records[-1].getMessage().startswith("Operation completed: get_issue in ")

    def test_nested_operations_share_trace_id(self, recorded):
        logger, _ = recorded

        with log_operation(logger, "search", trace_id="abc123"):
            with log_operation(logger, "list_issues", jql="project = PROJ"):
                inner = get_log_context()
            outer = get_log_context()

        assert inner == {
            "operation": "list_issues",
            "trace_id": "abc123",
            "jql": "project = PROJ",
        }
        assert outer == {"operation": "search", "trace_id": "abc123"}

    def test_failure_is_logged_and_propagated(self, recorded):
        logger, records = recorded

        with pytest.raises(RuntimeError, match="boom"):
            with log_operation(logger, "update_issue"):
                raise RuntimeError("boom")

        assert records[-1].levelno == logging.WARNING
        assert records[-1].getMessage().startswith("Operation failed: update_issue after ")
        assert records[-1].getMessage().endswith(" - boom")
        assert get_log_context() == {}


def test_record_outside_operation(recorded):
    logger, records = recorded
    logger.debug("plain")
    assert records[0].context == "no-context"


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_console_handler(self):
        logger = setup_logger("mcp-jira-test-console", level="debug")

        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1

        setup_logger("mcp-jira-test-console", level="ERROR")
        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        logger = setup_logger("mcp-jira-test-env")
        assert logger.level == logging.INFO

    def test_unknown_level_falls_back_to_warning(self):
        logger = setup_logger("mcp-jira-test-unknown", level="chatty")
        assert logger.level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = setup_logger(
            "mcp-jira-test-file", level="INFO", log_to_file=True, log_dir=str(log_dir)
        )

        with log_operation(logger, "ls_statuses", trace_id="t1"):
            logger.info("written to file")
        for handler in logger.handlers:
            handler.flush()

        content = (log_dir / "mcp-jira-test-file.log").read_text(encoding="utf-8")
        assert "[operation=ls_statuses,trace_id=t1] written to file" in content
        setup_logger("mcp-jira-test-file")
