"""Currency helpers: symbols, locale formatting and TRY-pivoted conversion.

Exchange rates are expressed as TRY per one unit of the foreign currency
(the bank's sell rate), so every cross-currency conversion goes through TRY:

    USD -> TRY:  amount * rates["USD"]
    TRY -> EUR:  amount / rates["EUR"]
    USD -> EUR:  (amount * rates["USD"]) / rates["EUR"]
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, Mapping, Optional

CurrencyCode = Literal["TRY", "USD", "EUR", "GBP"]
Rates = Mapping[str, float]

BASE_CURRENCY: CurrencyCode = "TRY"
SUPPORTED_CURRENCIES: tuple[str, ...] = ("TRY", "USD", "EUR", "GBP")

CURRENCY_SYMBOLS = {
    "TRY": "₺",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# All supported currencies print their symbol in front of the number.
DEFAULT_SYMBOL_POSITION = {
    "TRY": "prefix",
    "USD": "prefix",
    "EUR": "prefix",
    "GBP": "prefix",
}

DEFAULT_LOCALE = "tr-TR"

# language -> (group separator, decimal separator)
_LOCALE_SEPARATORS = {
    "tr": (".", ","),
    "de": (".", ","),
    "es": (".", ","),
    "it": (".", ","),
    "pt": (".", ","),
    "nl": (".", ","),
    "id": (".", ","),
    "en": (",", "."),
    "ja": (",", "."),
    "zh": (",", "."),
    "fr": ("\u202f", ","),
    "ru": ("\u00a0", ","),
    "pl": ("\u00a0", ","),
    "sv": ("\u00a0", ","),
}


def finite_or_zero(value) -> float:
    """Return value as a float, or 0.0 when it is missing or not finite."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def round_half_up(value: float, digits: int = 2) -> Decimal:
    """Round to ``digits`` decimals with halves going away from zero.

    Works on the exact binary value of the float, so 13.125 becomes 13.13
    while 1.005 (stored just below) becomes 1.00.
    """
    exponent = Decimal(10) ** -digits
    return Decimal(finite_or_zero(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def normalize_currency(code: Optional[str]) -> CurrencyCode:
    """Uppercase a currency code; anything unsupported becomes TRY."""
    if not isinstance(code, str):
        return BASE_CURRENCY
    upper = code.strip().upper()
    return upper if upper in SUPPORTED_CURRENCIES else BASE_CURRENCY


def symbol_for(code: Optional[str]) -> str:
    """Return the display symbol for a currency code.

    Unknown codes are shown as the uppercased code itself.
    """
    if not code:
        return CURRENCY_SYMBOLS[BASE_CURRENCY]
    upper = code.upper()
    return CURRENCY_SYMBOLS.get(upper, upper)


def _separators(locale: Optional[str]) -> tuple[str, str]:
    language = (locale or DEFAULT_LOCALE).replace("_", "-").split("-")[0].lower()
    return _LOCALE_SEPARATORS.get(language, (",", "."))


def format_number(
    value: float,
    locale: Optional[str] = DEFAULT_LOCALE,
    minimum_fraction_digits: int = 2,
    maximum_fraction_digits: int = 2,
) -> str:
    """Format a non-negative number with locale grouping.

    Renders ``maximum_fraction_digits`` decimals, then drops trailing zeros
    down to ``minimum_fraction_digits``.
    """
    minimum = max(int(minimum_fraction_digits), 0)
    maximum = max(int(maximum_fraction_digits), minimum)

    rendered = f"{round_half_up(value, maximum):,.{maximum}f}"
    integer_part, _, fraction = rendered.partition(".")
    while len(fraction) > minimum and fraction.endswith("0"):
        fraction = fraction[:-1]

    group, decimal = _separators(locale)
    integer_part = integer_part.replace(",", group)
    return f"{integer_part}{decimal}{fraction}" if fraction else integer_part


def format_currency(
    amount: float,
    code: Optional[str] = BASE_CURRENCY,
    *,
    locale: Optional[str] = None,
    minimum_fraction_digits: Optional[int] = None,
    maximum_fraction_digits: Optional[int] = None,
    symbol_position: Optional[Literal["prefix", "suffix"]] = None,
    hide_symbol: bool = False,
) -> str:
    """Render an amount with locale grouping and a currency symbol.

    The sign is written as a leading "-" in front of the symbol, never by the
    number formatter. Non-finite amounts are formatted as zero.

    Examples (tr-TR):
        format_currency(1234.5, "TRY")                       -> "₺1.234,50"
        format_currency(12.34, "USD", locale="en-US")        -> "$12.34"
        format_currency(12.34, "USD", locale="en-US",
                        symbol_position="suffix")            -> "12.34 $"
    """
    minimum = (
        minimum_fraction_digits
        if minimum_fraction_digits is not None
        else maximum_fraction_digits
        if maximum_fraction_digits is not None
        else 2
    )
    maximum = (
        maximum_fraction_digits
        if maximum_fraction_digits is not None
        else minimum_fraction_digits
        if minimum_fraction_digits is not None
        else 2
    )

    safe_amount = finite_or_zero(amount)
    sign = "-" if safe_amount < 0 else ""
    number = format_number(abs(safe_amount), locale or DEFAULT_LOCALE, minimum, maximum)

    if hide_symbol:
        return f"{sign}{number}"

    symbol = symbol_for(code)
    normalized = code.upper() if isinstance(code, str) else BASE_CURRENCY
    position = symbol_position or DEFAULT_SYMBOL_POSITION.get(normalized, "prefix")

    if position == "suffix":
        return f"{sign}{number} {symbol}"
    return f"{sign}{symbol}{number}"


def format_in(amount: float, code: str, locale: str = DEFAULT_LOCALE) -> str:
    """Format an amount in the given currency with default options."""
    return format_currency(amount, code, locale=locale)


def _rate(code: str, rates: Optional[Rates]) -> Optional[float]:
    if not rates:
        return None
    rate = rates.get(code.upper())
    if rate is None:
        return None
    rate = finite_or_zero(rate)
    return rate if rate > 0 else None


def to_base(amount_fx: float, code: str, rates: Optional[Rates]) -> float:
    """Convert a foreign amount to TRY.

    Without a usable rate the result is 0: the amount cannot be expressed
    in TRY.
    """
    amount = finite_or_zero(amount_fx)
    if not amount:
        return 0.0
    if (code or "").upper() == BASE_CURRENCY:
        return amount
    rate = _rate(code or "", rates)
    return amount * rate if rate else 0.0


def from_base(amount_try: float, code: str, rates: Optional[Rates]) -> float:
    """Convert a TRY amount to a foreign currency.

    Without a usable rate the TRY amount is returned unconverted.
    """
    amount = finite_or_zero(amount_try)
    if not amount:
        return 0.0
    if (code or "").upper() == BASE_CURRENCY:
        return amount
    rate = _rate(code or "", rates)
    return amount / rate if rate else amount


def convert_amount(
    value: float,
    source: Optional[str],
    target: Optional[str],
    rates: Optional[Rates],
    *,
    already_target: bool = False,
) -> float:
    """Convert between two currencies through TRY.

    When ``already_target`` is set the value is assumed to be in the target
    currency and is only guarded against non-finite input.
    """
    amount = finite_or_zero(value)
    if already_target:
        return amount

    source_code = normalize_currency(source)
    target_code = normalize_currency(target)
    if source_code == target_code or rates is None or amount == 0:
        return amount
    if target_code == BASE_CURRENCY:
        return to_base(amount, source_code, rates)
    if source_code == BASE_CURRENCY:
        return from_base(amount, target_code, rates)
    return from_base(to_base(amount, source_code, rates), target_code, rates)


@dataclass(frozen=True)
class Adjustment:
    """A sale-wide discount or tax: a percentage of the base, or a flat amount."""

    kind: Literal["percentage", "amount"]
    value: float


@dataclass(frozen=True)
class GlobalTotals:
    """Result of applying a sale-wide discount and tax, in TRY."""

    discount: float
    tax: float
    final: float


def _adjustment_amount(base: float, adjustment: Optional[Adjustment]) -> float:
    if adjustment is None:
        return 0.0
    value = finite_or_zero(adjustment.value)
    if adjustment.kind == "percentage":
        return base * value / 100
    return max(value, 0.0)


def apply_global_discount_tax(
    subtotal_base: float,
    discount: Optional[Adjustment],
    tax: Optional[Adjustment],
) -> GlobalTotals:
    """Apply a sale-wide discount, then tax on the discounted amount.

    All amounts are in TRY. The tax base and the final amount never go
    below zero.
    """
    subtotal = finite_or_zero(subtotal_base)
    discount_amount = _adjustment_amount(subtotal, discount)
    base_for_tax = max(subtotal - discount_amount, 0.0)
    tax_amount = _adjustment_amount(base_for_tax, tax)
    return GlobalTotals(
        discount=discount_amount,
        tax=tax_amount,
        final=max(base_for_tax + tax_amount, 0.0),
    )
