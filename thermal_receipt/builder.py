"""Receipt line builder.

Turns one completed sale into the ordered line records a thermal printer
backend prints: header, order information, items, payment summary, grand
total and the paper feed that lets the receipt be torn off.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

import structlog

from .layout import (
    center_line,
    format_percentage,
    format_quantity,
    format_receipt_money,
    has_meaningful_amount,
    meta_row_lines,
    responsive_columns,
)
from .lines import DOTTED_RULE, EmptyLine, Preset, ReceiptContentLine, SeparatorLine, TextLine
from .money import convert_amount, finite_or_zero
from .options import ReceiptMetaRow, ReceiptOptions

logger = structlog.get_logger(__name__)

LABEL_ORDER_INFO = "Sipariş Bilgileri"
LABEL_ORDER_NUMBER = "Sipariş No"
LABEL_DATE = "Tarih"
LABEL_CUSTOMER = "Müşteri"
LABEL_SELLER = "Satıcı"
LABEL_PAYMENT_SUMMARY = "Ödeme Özeti"
LABEL_SUBTOTAL = "Ara Toplam"
LABEL_DISCOUNT = "İndirim"
LABEL_TAX = "KDV"
LABEL_PAID = "Ödenen"
LABEL_CHANGE = "Para Üstü"
LABEL_GRAND_TOTAL = "Genel Toplam"
LABEL_DEBT = "Borç"

FEED_LINES = 30


class _ReceiptLayout:
    """Accumulates lines for one receipt using its width, indent and currencies."""

    def __init__(self, options: ReceiptOptions):
        self.options = options
        self.width = options.receipt_width
        self.indent = options.receipt_indent
        self.target = options.target_currency
        self.lines: list[ReceiptContentLine] = []

    def convert(self, value: float, source: Optional[str] = None) -> float:
        """Convert an item amount into the target currency."""
        return convert_amount(
            value,
            source if source is not None else self.options.currency,
            self.target,
            self.options.rates,
        )

    def convert_summary(self, value: float, source: Optional[str] = None) -> float:
        """Convert a summary figure, unless it is already in the target currency."""
        return convert_amount(
            value,
            source if source is not None else self.options.currency,
            self.target,
            self.options.rates,
            already_target=self.options.summary_already_target,
        )

    def money(self, value: float) -> str:
        return format_receipt_money(value, self.target)

    def add(self, *lines: ReceiptContentLine) -> None:
        self.lines.extend(lines)

    def separator(self, char: Optional[str] = None) -> None:
        self.lines.append(SeparatorLine(length=self.width, char=char))

    def centered(self, text: str, preset: Optional[Preset] = None) -> None:
        self.lines.append(center_line(text, self.width, preset))

    def columns(self, left: str, right: str, preset: Optional[Preset] = None) -> None:
        self.lines.extend(
            responsive_columns(left, right, width=self.width, indent=self.indent, preset=preset)
        )

    def meta_row(self, label: str, value) -> None:
        self.lines.extend(meta_row_lines(label, value, width=self.width, indent=self.indent))


def _meta_rows(options: ReceiptOptions) -> list[ReceiptMetaRow]:
    rows = []
    if options.order_number:
        rows.append(ReceiptMetaRow(LABEL_ORDER_NUMBER, options.order_number))
    if options.created_at_text:
        rows.append(ReceiptMetaRow(LABEL_DATE, options.created_at_text))
    if options.customer_name:
        rows.append(ReceiptMetaRow(LABEL_CUSTOMER, options.customer_name))
    rows.append(ReceiptMetaRow(LABEL_SELLER, options.seller_name or LABEL_SELLER))
    rows.extend(options.extra_meta_rows)
    return rows


def _add_items(layout: _ReceiptLayout) -> None:
    items = layout.options.items
    if not items:
        layout.add(TextLine(text=layout.options.items_empty_message, align="center"))
        return

    for index, item in enumerate(items):
        unit_price = layout.convert(item.unit_price, item.currency)
        subtotal = layout.convert(item.line_subtotal, item.currency)

        if index > 0:
            layout.add(EmptyLine(count=1))

        layout.add(TextLine(text=item.display_name, align="left", preset="medium"))
        layout.columns(
            f"{format_quantity(item.quantity)} x {layout.money(unit_price)}",
            layout.money(subtotal),
        )


def _add_payment_summary(layout: _ReceiptLayout) -> None:
    options = layout.options
    subtotal = options.subtotal
    discount = options.total_discount
    tax = options.total_tax

    if has_meaningful_amount(subtotal):
        layout.columns(LABEL_SUBTOTAL, layout.money(layout.convert_summary(subtotal)), "medium")

    if has_meaningful_amount(discount):
        percent = (
            format_percentage(discount / subtotal * 100)
            if has_meaningful_amount(subtotal)
            else None
        )
        label = f"{LABEL_DISCOUNT} (%{percent})" if percent else LABEL_DISCOUNT
        layout.columns(label, f"-{layout.money(layout.convert_summary(discount))}")

    if has_meaningful_amount(tax):
        tax_base = max(subtotal - discount, 0.0)
        percent = (
            format_percentage(tax / tax_base * 100) if has_meaningful_amount(tax_base) else None
        )
        label = f"{LABEL_TAX} (%{percent})" if percent else LABEL_TAX
        layout.columns(label, layout.money(layout.convert_summary(tax)))

    total_display = layout.convert_summary(options.total)
    paid_raw = options.paid if options.paid is not None else options.total
    resolved_paid = layout.convert_summary(paid_raw, options.paid_currency)
    remaining_raw = (
        options.remaining
        if options.remaining is not None
        else max(options.total - paid_raw, 0.0)
    )
    resolved_remaining = layout.convert_summary(remaining_raw)
    has_outstanding_debt = has_meaningful_amount(resolved_remaining)

    # With debt left, the paid row shows the full total.
    display_paid = total_display if has_outstanding_debt else resolved_paid
    layout.columns(LABEL_PAID, layout.money(display_paid))

    if options.change_amount is not None:
        change = max(layout.convert_summary(options.change_amount), 0.0)
    else:
        change = max(resolved_paid - total_display, 0.0)
    if has_meaningful_amount(change):
        layout.columns(LABEL_CHANGE, layout.money(change))

    layout.separator(DOTTED_RULE)
    layout.centered(LABEL_GRAND_TOTAL, "medium")
    layout.add(TextLine(text=layout.money(total_display), preset="large"))

    # Only reachable when the paid row did not already account for the debt.
    if not has_outstanding_debt and has_meaningful_amount(resolved_remaining):
        layout.columns(LABEL_DEBT, layout.money(resolved_remaining))


def build_standard_receipt_lines(options: ReceiptOptions) -> tuple[ReceiptContentLine, ...]:
    """Build the printable lines for one sale.

    The order is fixed: tenant header, title, order information, items,
    payment summary, grand total, thank-you message and paper feed. Sections
    without data are left out; nothing raises on missing or odd values.
    """
    options = options.normalized()
    layout = _ReceiptLayout(options)

    if options.tenant_header_lines:
        layout.add(*options.tenant_header_lines)
        layout.separator()

    if options.title:
        layout.centered(options.title, "medium")
        layout.separator()

    meta_rows = _meta_rows(options)
    if meta_rows:
        layout.centered(LABEL_ORDER_INFO, "medium")
        layout.separator(DOTTED_RULE)
        for row in meta_rows:
            layout.meta_row(row.label, row.value)
        layout.separator()

    _add_items(layout)

    layout.separator()
    layout.centered(LABEL_PAYMENT_SUMMARY, "medium")
    layout.separator()

    _add_payment_summary(layout)

    layout.add(EmptyLine(count=1))
    if options.thank_you_message:
        layout.centered(options.thank_you_message)
    layout.add(EmptyLine(count=FEED_LINES))

    logger.debug(
        "receipt_lines_built",
        items=len(options.items),
        lines=len(layout.lines),
        currency=options.currency,
        target_currency=options.target_currency,
        width=options.receipt_width,
    )
    return tuple(layout.lines)


def build_sale_receipt_lines(options: ReceiptOptions) -> tuple[ReceiptContentLine, ...]:
    """Build receipt lines for a plain sale.

    Fills in the payment fields a simple sale usually lacks (paid defaults
    to the total, remaining to what is still owed) and delegates to
    ``build_standard_receipt_lines``.
    """
    total = finite_or_zero(options.total)
    paid = finite_or_zero(options.paid) if options.paid is not None else total
    remaining = options.remaining if options.remaining is not None else max(total - paid, 0.0)
    return build_standard_receipt_lines(
        replace(
            options,
            subtotal=finite_or_zero(options.subtotal),
            total_discount=finite_or_zero(options.total_discount),
            total_tax=finite_or_zero(options.total_tax),
            total=total,
            paid=paid,
            remaining=remaining,
        )
    )
