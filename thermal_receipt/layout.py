"""Layout primitives for fixed-width receipt paper."""

from __future__ import annotations

import math
from typing import Optional, Union

from .lines import ColumnsLine, Preset, ReceiptContentLine, TextLine
from .money import finite_or_zero, round_half_up

MEANINGFUL_EPSILON = 0.005
MIN_COLUMN_WIDTH = 8


def has_meaningful_amount(value: float, epsilon: float = MEANINGFUL_EPSILON) -> bool:
    """Return True if the amount is large enough to be worth printing."""
    return abs(finite_or_zero(value)) >= epsilon


def format_percentage(value: float) -> Optional[str]:
    """Format a percentage with at most two decimals: 10.0 -> "10", 12.5 -> "12.5"."""
    if value is None or not math.isfinite(value):
        return None
    normalized = round_half_up(abs(float(value)), 2)
    if normalized == normalized.to_integral_value():
        return f"{normalized:.0f}"
    return str(normalized.normalize())


def format_receipt_money(value: float, currency: Optional[str] = "TRY") -> str:
    """Format an amount for the receipt body: "50.00 TL", "-3.10 USD"."""
    normalized = currency.upper() if isinstance(currency, str) else "TRY"
    display = "TL" if normalized == "TRY" else normalized
    amount = finite_or_zero(value)
    formatted = f"{round_half_up(abs(amount), 2):.2f}"
    if display:
        formatted = f"{formatted} {display}"
    return f"-{formatted}" if amount < 0 else formatted


def format_quantity(quantity: Union[int, float]) -> str:
    """Print whole quantities without a fraction: 2.0 -> "2", 1.5 -> "1.5"."""
    number = finite_or_zero(quantity)
    if number.is_integer():
        return str(int(number))
    return str(number)


def column_width(width: int, indent: int) -> int:
    """Characters available to a two-column row after the indent."""
    return max(width - indent, MIN_COLUMN_WIDTH)


def center_line(value: Optional[str], width: int, preset: Optional[Preset] = None) -> TextLine:
    """Center text in ``width`` columns; the odd extra space goes to the right."""
    width = max(width, 1)
    text = (value or "").strip()[:width]
    padding = max(width - len(text), 0)
    left = padding // 2
    right = padding - left
    return TextLine(text=f"{' ' * left}{text}{' ' * right}", preset=preset)


def wrap_text_to_width(value: Optional[str], width: int) -> list[str]:
    """Greedily pack words into lines of at most ``width`` characters.

    Words are never split: a word longer than ``width`` gets a line of its own.
    """
    safe = (value or "").strip()
    if not safe:
        return []
    if len(safe) <= width:
        return [safe]

    result: list[str] = []
    current = ""
    for word in safe.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            result.append(current)
            current = word
    if current:
        result.append(current)
    return result


def responsive_columns(
    left: Optional[str],
    right: Optional[str],
    *,
    width: int,
    indent: int,
    preset: Optional[Preset] = None,
) -> list[ReceiptContentLine]:
    """Lay out a label/value pair, stacking it when it does not fit on one row.

    A 32 character printer cannot fit a long item name next to its price, so
    the left text goes on its own line and the right text follows as a column
    row with an empty left side.
    """
    safe_left = (left or "").strip()
    safe_right = (right or "").strip()

    if len(safe_left) + len(safe_right) + 2 > column_width(width, indent):
        stacked: list[ReceiptContentLine] = []
        if safe_left:
            stacked.append(TextLine(text=safe_left, preset=preset))
        if safe_right:
            stacked.append(
                ColumnsLine(left="", right=safe_right, indent=indent, width=width, preset=preset)
            )
        return stacked

    return [ColumnsLine(left=safe_left, right=safe_right, indent=indent, width=width, preset=preset)]


def meta_row_lines(
    label: str,
    value,
    *,
    width: int,
    indent: int,
    preset: Optional[Preset] = None,
) -> list[ReceiptContentLine]:
    """Lay out a label/value row, wrapping long values under the label column."""
    if value is None or value == "":
        return []
    wrapped = wrap_text_to_width(str(value), column_width(width, indent))
    if not wrapped:
        return []

    first, *rest = wrapped
    lines = responsive_columns(label, first, width=width, indent=indent, preset=preset)
    for line in rest:
        lines.extend(responsive_columns("", line, width=width, indent=indent, preset=preset))
    return lines
