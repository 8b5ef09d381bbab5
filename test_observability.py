"""
Observability Validation Test

Validates the logging stack:
1. Correlation context is scoped by with_correlation
2. StructuredFormatter emits JSON with correlation and extra fields
3. HumanReadableFormatter prefixes correlation IDs
4. CorrelatedLogger carries extra fields and exception info
5. Settings drive the logging level
"""

import json
import logging

import pytest


def test_observability_imports():
    """Verify observability modules import correctly."""
    from core.observability import (
        configure_logging,
        get_logger,
        get_correlation_context,
        CorrelationContext,
        with_correlation,
    )
    assert configure_logging is not None
    assert get_logger is not None
    assert CorrelationContext is not None


def _record(msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )


class ListHandler(logging.Handler):
    """Collects records for assertions."""

    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestCorrelationContext:

    def test_merge_ignores_none(self):
        from core.observability.logging import CorrelationContext

        ctx = CorrelationContext(request_id="req-1").merge(connector="holded", operation=None)

        assert ctx.to_dict() == {"request_id": "req-1", "connector": "holded"}

    def test_context_var_isolation(self):
        from core.observability.logging import get_correlation_context, with_correlation

        assert get_correlation_context().request_id is None

        with with_correlation(request_id="req-outer"):
            with with_correlation(connector="holded"):
                inner = get_correlation_context()
                assert inner.request_id == "req-outer"
                assert inner.connector == "holded"
            assert get_correlation_context().connector is None

        assert get_correlation_context().request_id is None


class TestFormatters:

    def test_structured_formatter_json_output(self):
        from core.observability.logging import StructuredFormatter, with_correlation

        record = _record()
        record.extra_fields = {"contacts": 2}

        with with_correlation(request_id="req-123", connector="holded"):
            data = json.loads(StructuredFormatter().format(record))

        assert data["message"] == "Test message"
        assert data["level"] == "INFO"
        assert data["request_id"] == "req-123"
        assert data["connector"] == "holded"
        assert data["contacts"] == 2
        assert data["timestamp"].endswith("Z")

    def test_human_readable_formatter(self):
        from core.observability.logging import HumanReadableFormatter, with_correlation

        with with_correlation(request_id="req-123", operation="list_contacts"):
            line = HumanReadableFormatter().format(_record("Fetched contacts"))

        assert "[INFO ] test [req-123/list_contacts]: Fetched contacts" in line

    def test_human_readable_without_context(self):
        from core.observability.logging import HumanReadableFormatter

        line = HumanReadableFormatter().format(_record())

        assert "test [-]: Test message" in line


class TestCorrelatedLogger:

    @pytest.fixture
    def captured(self):
        from core.observability.logging import get_logger

        logger = get_logger("test.correlated")
        handler = ListHandler()
        base = logging.getLogger("test.correlated")
        base.addHandler(handler)
        base.setLevel(logging.DEBUG)
        try:
            yield logger, handler
        finally:
            base.removeHandler(handler)

    def test_extra_fields(self, captured):
        logger, handler = captured

        logger.info("Fetched contacts", extra_fields={"contacts": 3})

        record = handler.records[-1]
        assert record.getMessage() == "Fetched contacts"
        assert record.extra_fields == {"contacts": 3}

    def test_exception_carries_exc_info(self, captured):
        logger, handler = captured

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("Error fetching contacts")

        record = handler.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None
        assert record.exc_info[0] is RuntimeError

    def test_same_instance_per_name(self):
        from core.observability.logging import get_logger

        assert get_logger("test.same") is get_logger("test.same")


class TestSettings:

    def test_load_from_environment(self, monkeypatch):
        from core.settings import load_settings

        monkeypatch.setenv("HOLDED_API_KEY", "abc")
        monkeypatch.setenv("HOLDED_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_JSON", "true")
        monkeypatch.delenv("HOLDED_BASE_URL", raising=False)

        settings = load_settings()

        assert settings.holded_api_key == "abc"
        assert settings.holded_timeout_seconds == 12.5
        assert settings.log_level_value == logging.DEBUG
        assert settings.log_json is True
        assert settings.holded_base_url == "https://api.holded.com/api/invoicing/v1"

    def test_missing_key_is_none(self, monkeypatch):
        from core.settings import load_settings

        monkeypatch.setenv("HOLDED_API_KEY", "")

        assert load_settings().holded_api_key is None

    def test_invalid_timeout(self, monkeypatch):
        from core.settings import load_settings

        monkeypatch.setenv("HOLDED_TIMEOUT_SECONDS", "soon")

        with pytest.raises(ValueError):
            load_settings()

    def test_unknown_level_falls_back_to_info(self):
        from core.settings import Settings

        assert Settings(log_level="chatty").log_level_value == logging.INFO

    def test_erp_config(self):
        from core.settings import Settings

        config = Settings(holded_api_key="abc", holded_timeout_seconds=5).erp_config()

        assert config.connector_type == "holded"
        assert config.api_key == "abc"
        assert config.timeout_seconds == 5
