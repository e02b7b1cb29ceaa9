"""Tests for error types."""

from thermal_receipt.errors import ConfigurationError, InvalidSaleError, ReceiptError


class TestReceiptError:
    """Tests for the ReceiptError base class."""

    def test_message_only(self) -> None:
        err = ReceiptError("something went wrong")
        assert err.message == "something went wrong"
        assert err.cause is None
        assert str(err) == "something went wrong"

    def test_with_cause(self) -> None:
        cause = ValueError("underlying issue")
        err = ReceiptError("wrapper", cause)
        assert err.cause is cause
        assert str(err) == "wrapper: underlying issue"


class TestInvalidSaleError:
    def test_prefix(self) -> None:
        err = InvalidSaleError("items must be a list, got dict")
        assert str(err) == "invalid sale: items must be a list, got dict"
        assert isinstance(err, ReceiptError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_names_the_setting(self) -> None:
        err = ConfigurationError("RECEIPT_WIDTH", "wide", ValueError("not a number"))
        assert err.name == "RECEIPT_WIDTH"
        assert err.value == "wide"
        assert str(err) == "invalid setting RECEIPT_WIDTH='wide': not a number"
        assert isinstance(err, ReceiptError)
