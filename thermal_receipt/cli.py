"""Command line tools for receipt layout and money formatting.

Usage:
    thermal-receipt preview sale.json
    thermal-receipt preview sale.json --width 48 --target USD --format json
    thermal-receipt format 1234.5 --currency EUR --locale de-DE
    thermal-receipt convert 100 --from USD --to EUR --rate USD=32.5 --rate EUR=35.1
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import Optional, Sequence

import structlog

from .builder import build_sale_receipt_lines, build_standard_receipt_lines
from .config import ReceiptSettings, configure_logging
from .errors import ReceiptError
from .loader import given_fields, options_from_mapping, read_payload
from .money import SUPPORTED_CURRENCIES, convert_amount, format_currency
from .render import TextRenderer

logger = structlog.get_logger(__name__)


def _parse_rate(value: str) -> tuple[str, float]:
    code, sep, rate = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected CODE=RATE, got {value!r}")
    try:
        return code.strip().upper(), float(rate)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid rate {rate!r} for {code}")


def _add_rate_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--rate",
        action="append",
        type=_parse_rate,
        default=[],
        metavar="CODE=RATE",
        help="TRY per unit of a foreign currency, repeatable (e.g. --rate USD=32.5)",
    )


def build_parser(settings: ReceiptSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thermal-receipt",
        description="Lay out point-of-sale receipts for thermal printers",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    preview = subparsers.add_parser("preview", help="Show the receipt for a sale JSON file")
    preview.add_argument("sale", help="Path to the sale JSON file")
    preview.add_argument(
        "--width",
        type=int,
        default=None,
        help=f"Characters per line (default: sale value or {settings.width})",
    )
    preview.add_argument(
        "--indent",
        type=int,
        default=None,
        help=f"Column row indent (default: sale value or {settings.indent})",
    )
    preview.add_argument(
        "--target",
        choices=SUPPORTED_CURRENCIES,
        default=None,
        help=f"Currency to print amounts in (default: sale value or {settings.target_currency})",
    )
    _add_rate_argument(preview)
    preview.add_argument(
        "--sale",
        action="store_true",
        help="Treat the payload as a plain sale (paid defaults to total)",
    )
    preview.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output rendered text or the line records as JSON (default: text)",
    )

    fmt = subparsers.add_parser("format", help="Format an amount with a currency symbol")
    fmt.add_argument("amount", type=float)
    fmt.add_argument("--currency", default="TRY", help="Currency code (default: TRY)")
    fmt.add_argument(
        "--locale",
        default=settings.locale,
        help=f"Numeral locale (default: {settings.locale})",
    )
    fmt.add_argument("--digits", type=int, default=None, help="Fraction digits (default: 2)")
    fmt.add_argument("--suffix", action="store_true", help="Put the symbol after the number")
    fmt.add_argument("--no-symbol", action="store_true", help="Leave the symbol out")

    convert = subparsers.add_parser("convert", help="Convert an amount through TRY")
    convert.add_argument("amount", type=float)
    convert.add_argument("--from", dest="source", default="TRY", help="Source currency")
    convert.add_argument("--to", dest="target", default=settings.target_currency, help="Target currency")
    _add_rate_argument(convert)

    return parser


def preview(args: argparse.Namespace, settings: ReceiptSettings) -> str:
    """Build the receipt for ``args.sale`` and return the requested output.

    Layout values come from the command line, then the sale file, then the
    environment settings.
    """
    payload = read_payload(args.sale)
    options = options_from_mapping(payload)
    present = given_fields(payload)

    overrides = {}
    if args.width is not None:
        overrides["receipt_width"] = args.width
    elif "receipt_width" not in present:
        overrides["receipt_width"] = settings.width
    if args.indent is not None:
        overrides["receipt_indent"] = args.indent
    elif "receipt_indent" not in present:
        overrides["receipt_indent"] = settings.indent
    if args.target is not None:
        overrides["target_currency"] = args.target
    elif "target_currency" not in present:
        overrides["target_currency"] = settings.target_currency
    if args.rate:
        overrides["rates"] = {**(options.rates or {}), **dict(args.rate)}
    options = replace(options, **overrides)

    build = build_sale_receipt_lines if args.sale else build_standard_receipt_lines
    lines = build(options)
    logger.info("receipt_preview", sale=args.sale, lines=len(lines), format=args.format)

    if args.format == "json":
        return json.dumps([line.to_dict() for line in lines], ensure_ascii=False, indent=2)
    return TextRenderer(options.normalized().receipt_width).render(lines)


def format_amount(args: argparse.Namespace) -> str:
    return format_currency(
        args.amount,
        args.currency,
        locale=args.locale,
        minimum_fraction_digits=args.digits,
        maximum_fraction_digits=args.digits,
        symbol_position="suffix" if args.suffix else None,
        hide_symbol=args.no_symbol,
    )


def convert(args: argparse.Namespace) -> str:
    rates = dict(args.rate) if args.rate else None
    converted = convert_amount(args.amount, args.source, args.target, rates)
    return f"{converted:.2f}"


COMMANDS = {
    "preview": preview,
    "format": lambda args, settings: format_amount(args),
    "convert": lambda args, settings: convert(args),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = ReceiptSettings.from_env()
    except ReceiptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    args = build_parser(settings).parse_args(argv)

    try:
        output = COMMANDS[args.command](args, settings)
    except ReceiptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
