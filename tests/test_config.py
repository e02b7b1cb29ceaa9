"""Tests for environment settings and logging setup."""

import pytest
import structlog

from thermal_receipt.config import ReceiptSettings, configure_logging
from thermal_receipt.errors import ConfigurationError


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestReceiptSettings:
    """Tests for ReceiptSettings.from_env."""

    def test_defaults(self) -> None:
        settings = ReceiptSettings.from_env({})
        assert settings == ReceiptSettings(
            width=32, indent=1, locale="tr-TR", target_currency="TRY", log_level="info"
        )

    def test_reads_environment(self) -> None:
        settings = ReceiptSettings.from_env(
            {
                "RECEIPT_WIDTH": "48",
                "RECEIPT_INDENT": "0",
                "RECEIPT_LOCALE": "en-US",
                "RECEIPT_TARGET_CURRENCY": "eur",
                "LOG_LEVEL": "DEBUG",
            }
        )
        assert settings.width == 48
        assert settings.indent == 0
        assert settings.locale == "en-US"
        assert settings.target_currency == "EUR"
        assert settings.log_level == "debug"

    def test_blank_values_use_defaults(self) -> None:
        settings = ReceiptSettings.from_env({"RECEIPT_WIDTH": " ", "RECEIPT_LOCALE": ""})
        assert settings.width == 32
        assert settings.locale == "tr-TR"

    def test_unsupported_target_is_lira(self) -> None:
        assert ReceiptSettings.from_env({"RECEIPT_TARGET_CURRENCY": "JPY"}).target_currency == "TRY"

    def test_os_environ_used_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv("RECEIPT_WIDTH", "40")
        assert ReceiptSettings.from_env().width == 40

    def test_non_integer_width(self) -> None:
        with pytest.raises(ConfigurationError) as excinfo:
            ReceiptSettings.from_env({"RECEIPT_WIDTH": "wide"})
        assert excinfo.value.name == "RECEIPT_WIDTH"
        assert isinstance(excinfo.value.cause, ValueError)

    def test_width_below_minimum(self) -> None:
        with pytest.raises(ConfigurationError, match="RECEIPT_WIDTH='0'"):
            ReceiptSettings.from_env({"RECEIPT_WIDTH": "0"})

    def test_negative_indent(self) -> None:
        with pytest.raises(ConfigurationError, match="RECEIPT_INDENT"):
            ReceiptSettings.from_env({"RECEIPT_INDENT": "-1"})

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="LOG_LEVEL='verbose'"):
            ReceiptSettings.from_env({"LOG_LEVEL": "verbose"})


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_lines_on_stderr(self, capsys) -> None:
        configure_logging("info")
        structlog.get_logger("thermal_receipt.test").info("receipt_printed", lines=12)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "receipt_printed"' in captured.err
        assert '"lines": 12' in captured.err
        assert '"level": "info"' in captured.err

    def test_level_filters_debug(self, capsys) -> None:
        configure_logging("warning")
        structlog.get_logger().info("hidden")
        assert capsys.readouterr().err == ""
