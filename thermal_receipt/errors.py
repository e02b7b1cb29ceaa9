"""Error types for the receipt package.

Line building itself never raises; these cover reading sale payloads and
configuration from the outside world.
"""

from typing import Optional


class ReceiptError(Exception):
    """Base class for receipt errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidSaleError(ReceiptError):
    """Sale payload cannot be turned into receipt options."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid sale: {message}", cause)


class ConfigurationError(ReceiptError):
    """An environment setting has an unusable value."""

    def __init__(self, name: str, value: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid setting {name}={value!r}", cause)
        self.name = name
        self.value = value
