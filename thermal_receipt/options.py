"""Input records for the receipt builder.

``ReceiptOptions`` is the single configuration record for one printed sale.
Every field has a default so callers only pass what they have; the builder
calls ``normalized()`` once before laying anything out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from .lines import ReceiptContentLine
from .money import BASE_CURRENCY, Rates, finite_or_zero, normalize_currency

DEFAULT_TITLE = "Satış Fişi"
DEFAULT_ITEM_NAME = "Ürün"
DEFAULT_ITEMS_EMPTY_MESSAGE = "Ürün bulunamadı."
DEFAULT_THANK_YOU_MESSAGE = "Teşekkür ederiz!"
DEFAULT_RECEIPT_WIDTH = 32
DEFAULT_RECEIPT_INDENT = 1


def _optional_amount(value) -> Optional[float]:
    """Keep None (meaning "not supplied"); other values go through the finite guard."""
    if value is None:
        return None
    return finite_or_zero(value)


@dataclass(frozen=True)
class ReceiptItem:
    """One sold line. ``currency`` of None means the receipt's source currency."""

    name: str = ""
    quantity: float = 0
    unit_price: float = 0
    currency: Optional[str] = None
    subtotal: Optional[float] = None

    @property
    def display_name(self) -> str:
        return self.name or DEFAULT_ITEM_NAME

    @property
    def line_subtotal(self) -> float:
        if self.subtotal is not None:
            return finite_or_zero(self.subtotal)
        return finite_or_zero(self.unit_price) * finite_or_zero(self.quantity)


@dataclass(frozen=True)
class ReceiptMetaRow:
    """A label/value row in the order information block."""

    label: str
    value: Union[str, int, float, None] = None


@dataclass(frozen=True)
class ReceiptOptions:
    """Everything needed to lay out one receipt.

    Monetary fields:
        subtotal, total_discount, total_tax, total: summary figures in the
            source ``currency`` (or already in ``target_currency`` when
            ``summary_already_target`` is set). Missing or non-finite -> 0.
        paid: amount received. None -> ``total``.
        remaining: outstanding debt. None -> ``max(total - paid, 0)``;
            negative values are clamped to 0.
        change_amount: change handed back. None -> ``max(paid - total, 0)``.

    Currency fields:
        currency: source currency of summary figures and of items without
            their own currency. Default TRY.
        target_currency: currency every amount is printed in. Default TRY.
        rates: TRY per unit of each foreign currency. None disables conversion.
        paid_currency: currency of ``paid``. None -> ``currency``.
        summary_already_target: summary figures are already in the target
            currency and are printed without conversion.

    Layout fields:
        receipt_width: characters per line. Default 32.
        receipt_indent: left indent of column rows. Default 1.

    Text fields (empty string or None suppresses the line):
        title, thank_you_message. ``items_empty_message`` is printed when
        there are no items.
    """

    items: Sequence[ReceiptItem] = ()
    tenant_header_lines: Sequence[ReceiptContentLine] = ()
    title: Optional[str] = DEFAULT_TITLE
    order_number: Optional[str] = None
    created_at_text: Optional[str] = None
    customer_name: Optional[str] = None
    seller_name: Optional[str] = None
    extra_meta_rows: Sequence[ReceiptMetaRow] = ()
    items_empty_message: str = DEFAULT_ITEMS_EMPTY_MESSAGE
    thank_you_message: Optional[str] = DEFAULT_THANK_YOU_MESSAGE

    subtotal: float = 0
    total_discount: float = 0
    total_tax: float = 0
    total: float = 0
    paid: Optional[float] = None
    remaining: Optional[float] = None
    change_amount: Optional[float] = None

    currency: str = BASE_CURRENCY
    target_currency: str = BASE_CURRENCY
    rates: Optional[Rates] = None
    paid_currency: Optional[str] = None
    summary_already_target: bool = False

    receipt_width: int = DEFAULT_RECEIPT_WIDTH
    receipt_indent: int = DEFAULT_RECEIPT_INDENT

    def normalized(self) -> "ReceiptOptions":
        """Return a copy with amounts, currencies and layout values made safe."""
        remaining = _optional_amount(self.remaining)
        return replace(
            self,
            items=tuple(self.items or ()),
            tenant_header_lines=tuple(self.tenant_header_lines or ()),
            extra_meta_rows=tuple(self.extra_meta_rows or ()),
            items_empty_message=self.items_empty_message or DEFAULT_ITEMS_EMPTY_MESSAGE,
            subtotal=finite_or_zero(self.subtotal),
            total_discount=finite_or_zero(self.total_discount),
            total_tax=finite_or_zero(self.total_tax),
            total=finite_or_zero(self.total),
            paid=_optional_amount(self.paid),
            remaining=max(remaining, 0.0) if remaining is not None else None,
            change_amount=_optional_amount(self.change_amount),
            currency=normalize_currency(self.currency),
            target_currency=normalize_currency(self.target_currency),
            paid_currency=(
                normalize_currency(self.paid_currency) if self.paid_currency is not None else None
            ),
            summary_already_target=bool(self.summary_already_target),
            receipt_width=max(_layout_int(self.receipt_width, DEFAULT_RECEIPT_WIDTH), 1),
            receipt_indent=max(_layout_int(self.receipt_indent, 0), 0),
        )


def _layout_int(value, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return int(number) if math.isfinite(number) else default
