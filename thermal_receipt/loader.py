"""Build receipt options from decoded JSON.

The POS app posts sales with camelCase keys (``receiptWidth``,
``unitPrice``, ``summaryAlreadyTarget``); snake_case keys are accepted too.
Unknown keys are ignored.
"""

import json
import re
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping, Union

import structlog

from .errors import InvalidSaleError
from .lines import line_from_dict
from .options import ReceiptItem, ReceiptMetaRow, ReceiptOptions

logger = structlog.get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# short payload keys accepted for option fields
_ALIASES = {
    "discount": "total_discount",
    "tax": "total_tax",
    "change": "change_amount",
    "width": "receipt_width",
    "indent": "receipt_indent",
}


def _snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _field_names(cls) -> set[str]:
    return {f.name for f in fields(cls)}


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidSaleError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _require_list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidSaleError(f"{what} must be a list, got {type(value).__name__}")
    return value


# option fields printed as text; numbers are accepted and stringified
_TEXT_FIELDS = (
    "title",
    "order_number",
    "created_at_text",
    "customer_name",
    "seller_name",
    "items_empty_message",
    "thank_you_message",
)


def _text(value: Any, what: str) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidSaleError(f"{what} must be a string, got {type(value).__name__}")


def _text_values(values: dict[str, Any], names, where: str = "") -> dict[str, Any]:
    for name in names:
        if name in values:
            values[name] = _text(values[name], f"{where}{name}")
    return values


def _normalize_keys(data: Mapping[str, Any], allowed: set[str]) -> dict[str, Any]:
    result = {}
    for key, value in data.items():
        name = _snake(str(key))
        name = _ALIASES.get(name, name)
        if name in allowed:
            result[name] = value
    return result


def item_from_mapping(data: Any, index: int = 0) -> ReceiptItem:
    """Build a ReceiptItem from one item object."""
    data = _require_mapping(data, f"items[{index}]")
    values = _normalize_keys(data, _field_names(ReceiptItem))
    return ReceiptItem(**_text_values(values, ("name",), f"items[{index}]."))


def meta_row_from_mapping(data: Any, index: int = 0) -> ReceiptMetaRow:
    """Build a ReceiptMetaRow from a ``{"label": ..., "value": ...}`` object."""
    data = _require_mapping(data, f"extraMetaRows[{index}]")
    return ReceiptMetaRow(label=str(data.get("label", "")), value=data.get("value"))


def options_from_mapping(data: Any) -> ReceiptOptions:
    """Build ReceiptOptions from a decoded sale payload."""
    data = _require_mapping(data, "sale")
    values = _normalize_keys(data, _field_names(ReceiptOptions))
    _text_values(values, _TEXT_FIELDS)

    values["items"] = tuple(
        item_from_mapping(item, i)
        for i, item in enumerate(_require_list(values.get("items"), "items"))
    )
    values["extra_meta_rows"] = tuple(
        meta_row_from_mapping(row, i)
        for i, row in enumerate(_require_list(values.get("extra_meta_rows"), "extraMetaRows"))
    )

    headers = []
    for i, record in enumerate(_require_list(values.get("tenant_header_lines"), "tenantHeaderLines")):
        record = _require_mapping(record, f"tenantHeaderLines[{i}]")
        try:
            headers.append(
                line_from_dict(_text_values(dict(record), ("text",), f"tenantHeaderLines[{i}]."))
            )
        except (TypeError, ValueError) as e:
            raise InvalidSaleError(f"tenantHeaderLines[{i}]", e)
    values["tenant_header_lines"] = tuple(headers)

    rates = values.get("rates")
    if rates is not None:
        values["rates"] = dict(_require_mapping(rates, "rates"))

    return ReceiptOptions(**values)


def given_fields(data: Mapping[str, Any]) -> set[str]:
    """Option field names present in a sale payload."""
    return set(_normalize_keys(data, _field_names(ReceiptOptions)))


def read_payload(path: Union[str, Path]) -> Any:
    """Read and decode a sale JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidSaleError(f"cannot read {path}", e)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidSaleError(f"{path} is not valid JSON", e)
    return data


def load_options(path: Union[str, Path]) -> ReceiptOptions:
    """Read a sale JSON file and build ReceiptOptions from it."""
    options = options_from_mapping(read_payload(path))
    logger.debug("sale_loaded", path=str(path), items=len(options.items))
    return options
