"""Tests for config and logging."""

import json
import logging
import sys

import pytest

from customer_hub import __version__
from customer_hub.config import (
    SHEET_BASE_URL,
    DashboardConfig,
    DisplayConfig,
    HttpConfig,
    SourceConfig,
)
from customer_hub.exceptions import ConfigurationError
from customer_hub.logging import NOISY_LOGGERS, JsonFormatter, get_logger, setup_logging

ENV_VARS = (
    "CUSTOMERS_CSV_URL",
    "ACCOUNTS_CSV_URL",
    "BRANCHES_CSV_URL",
    "HTTP_TIMEOUT",
    "HTTP_USER_AGENT",
    "PAGE_SIZE",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every customer-hub variable from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSourceConfig:
    """Tests for SourceConfig."""

    def test_default_urls(self) -> None:
        config = SourceConfig()

        assert config.customers_url == SHEET_BASE_URL + "clientes"
        assert config.accounts_url == SHEET_BASE_URL + "contas"
        assert config.branches_url == SHEET_BASE_URL + "agencias"
        assert "tqx=out:csv" in config.customers_url

    def test_to_dict(self) -> None:
        config = SourceConfig(customers_url="c", accounts_url="a", branches_url="b")

        assert config.to_dict() == {"customers": "c", "accounts": "a", "branches": "b"}


class TestHttpConfig:
    """Tests for HttpConfig."""

    def test_default_values(self) -> None:
        config = HttpConfig()

        assert config.timeout_seconds == 10.0
        assert config.user_agent.startswith("customer-hub/")

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(ConfigurationError, match="timeout_seconds"):
            HttpConfig(timeout_seconds=timeout)


class TestDisplayConfig:
    """Tests for DisplayConfig."""

    def test_default_page_size(self) -> None:
        assert DisplayConfig().page_size == 10

    def test_rejects_zero_page_size(self) -> None:
        with pytest.raises(ConfigurationError, match="page_size"):
            DisplayConfig(page_size=0)


class TestDashboardConfig:
    """Tests for DashboardConfig."""

    def test_default_values(self) -> None:
        config = DashboardConfig()

        assert isinstance(config.sources, SourceConfig)
        assert isinstance(config.http, HttpConfig)
        assert isinstance(config.display, DisplayConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        config = DashboardConfig.from_env()

        assert config.sources == SourceConfig()
        assert config.http == HttpConfig()
        assert config.display.page_size == 10
        assert config.log_level == "INFO"

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("CUSTOMERS_CSV_URL", "https://example.com/c.csv")
        clean_env.setenv("ACCOUNTS_CSV_URL", "https://example.com/a.csv")
        clean_env.setenv("BRANCHES_CSV_URL", "https://example.com/b.csv")
        clean_env.setenv("HTTP_TIMEOUT", "2.5")
        clean_env.setenv("HTTP_USER_AGENT", "tests/1.0")
        clean_env.setenv("PAGE_SIZE", "6")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")

        config = DashboardConfig.from_env()

        assert config.sources.customers_url == "https://example.com/c.csv"
        assert config.sources.accounts_url == "https://example.com/a.csv"
        assert config.sources.branches_url == "https://example.com/b.csv"
        assert config.http.timeout_seconds == 2.5
        assert config.http.user_agent == "tests/1.0"
        assert config.display.page_size == 6
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_invalid_number(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PAGE_SIZE", "lots")

        with pytest.raises(ConfigurationError, match="PAGE_SIZE"):
            DashboardConfig.from_env()

    def test_from_env_invalid_timeout(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("HTTP_TIMEOUT", "-1")

        with pytest.raises(ConfigurationError):
            DashboardConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("customer_hub").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JsonFormatter)

    def test_logs_go_to_stderr(self) -> None:
        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_setup_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(root.handlers) == 1

    def test_quiets_noisy_loggers(self) -> None:
        setup_logging(level="DEBUG")

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs: object) -> logging.LogRecord:
        defaults = dict(
            name="customer_hub.loader",
            level=logging.INFO,
            pathname="loader.py",
            lineno=1,
            msg="Loaded %d customers",
            args=(5,),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_basic_format(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "customer_hub.loader"
        assert data["message"] == "Loaded 5 customers"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record(level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]

    def test_format_with_context_fields(self) -> None:
        record = self._record()
        record.used_fallback = False
        record.customer_count = 5
        record.unrelated = "ignored"

        data = json.loads(JsonFormatter().format(record))

        assert data["used_fallback"] is False
        assert data["customer_count"] == 5
        assert "unrelated" not in data
        assert "url" not in data

    def test_logger_extra_reaches_output(self) -> None:
        logger = logging.getLogger("customer_hub.test.context")
        records: list[logging.LogRecord] = []
        handler = logging.Handler()
        handler.emit = records.append  # type: ignore[method-assign]
        logger.addHandler(handler)
        try:
            logger.warning("Fetching %s", "x", extra={"url": "https://sheets.test/x.csv"})
        finally:
            logger.removeHandler(handler)

        data = json.loads(JsonFormatter().format(records[0]))

        assert data["url"] == "https://sheets.test/x.csv"

    def test_keeps_non_ascii(self) -> None:
        output = JsonFormatter().format(self._record(msg="Agência sem nome", args=()))

        assert "Agência" in output


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("customer_hub.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "customer_hub.test"


def test_version() -> None:
    assert __version__ == "0.1.0"
