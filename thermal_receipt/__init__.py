"""Receipt line layout and money formatting for thermal point-of-sale printers."""

from .money import (
    BASE_CURRENCY,
    SUPPORTED_CURRENCIES,
    CurrencyCode,
    Rates,
    Adjustment,
    GlobalTotals,
    normalize_currency,
    symbol_for,
    format_currency,
    format_in,
    to_base,
    from_base,
    convert_amount,
    apply_global_discount_tax,
)
from .lines import (
    TextLine,
    ColumnsLine,
    SeparatorLine,
    EmptyLine,
    ReceiptContentLine,
    line_from_dict,
)
from .layout import (
    has_meaningful_amount,
    format_percentage,
    format_receipt_money,
    center_line,
    wrap_text_to_width,
    responsive_columns,
    meta_row_lines,
)
from .options import ReceiptItem, ReceiptMetaRow, ReceiptOptions
from .builder import build_standard_receipt_lines, build_sale_receipt_lines
from .render import TextRenderer
from .loader import options_from_mapping, load_options
from .config import ReceiptSettings, configure_logging
from .errors import ReceiptError, InvalidSaleError, ConfigurationError

__all__ = [
    # Money
    "BASE_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "CurrencyCode",
    "Rates",
    "Adjustment",
    "GlobalTotals",
    "normalize_currency",
    "symbol_for",
    "format_currency",
    "format_in",
    "to_base",
    "from_base",
    "convert_amount",
    "apply_global_discount_tax",
    # Lines
    "TextLine",
    "ColumnsLine",
    "SeparatorLine",
    "EmptyLine",
    "ReceiptContentLine",
    "line_from_dict",
    # Layout
    "has_meaningful_amount",
    "format_percentage",
    "format_receipt_money",
    "center_line",
    "wrap_text_to_width",
    "responsive_columns",
    "meta_row_lines",
    # Options
    "ReceiptItem",
    "ReceiptMetaRow",
    "ReceiptOptions",
    # Builder
    "build_standard_receipt_lines",
    "build_sale_receipt_lines",
    # Rendering and input
    "TextRenderer",
    "options_from_mapping",
    "load_options",
    # Configuration
    "ReceiptSettings",
    "configure_logging",
    # Errors
    "ReceiptError",
    "InvalidSaleError",
    "ConfigurationError",
]
