"""Environment configuration for receipt layout and logging.

Environment variables:
    RECEIPT_WIDTH: characters per printed line (default: 32)
    RECEIPT_INDENT: left indent of column rows (default: 1)
    RECEIPT_LOCALE: numeral locale for formatted amounts (default: tr-TR)
    RECEIPT_TARGET_CURRENCY: currency amounts are printed in (default: TRY)
    LOG_LEVEL: minimum structlog level (default: info)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

import structlog

from .errors import ConfigurationError
from .money import DEFAULT_LOCALE, normalize_currency
from .options import DEFAULT_RECEIPT_INDENT, DEFAULT_RECEIPT_WIDTH

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def _env_int(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(name, raw, e)
    if value < minimum:
        raise ConfigurationError(name, raw)
    return value


@dataclass(frozen=True)
class ReceiptSettings:
    """Receipt defaults for one process."""

    width: int = DEFAULT_RECEIPT_WIDTH
    indent: int = DEFAULT_RECEIPT_INDENT
    locale: str = DEFAULT_LOCALE
    target_currency: str = "TRY"
    log_level: str = "info"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ReceiptSettings":
        """Read settings from the environment (or the given mapping)."""
        env = os.environ if env is None else env

        log_level = env.get("LOG_LEVEL", "info").strip().lower()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError("LOG_LEVEL", log_level)

        return cls(
            width=_env_int(env, "RECEIPT_WIDTH", DEFAULT_RECEIPT_WIDTH, minimum=1),
            indent=_env_int(env, "RECEIPT_INDENT", DEFAULT_RECEIPT_INDENT, minimum=0),
            locale=env.get("RECEIPT_LOCALE", DEFAULT_LOCALE) or DEFAULT_LOCALE,
            target_currency=normalize_currency(env.get("RECEIPT_TARGET_CURRENCY", "TRY")),
            log_level=log_level,
        )


def configure_logging(level: str = "info") -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVELS.get(level, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
