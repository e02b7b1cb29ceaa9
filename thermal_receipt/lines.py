"""Receipt content lines handed to a printing backend.

Each kind of line is its own frozen dataclass carrying only the fields that
kind needs. A backend dispatches on ``line.type`` (or ``isinstance``) and maps
presets, alignment and column widths to real printer commands.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Literal, Optional, Union

Preset = Literal["normal", "medium", "large"]
Align = Literal["left", "center", "right"]

SOLID_RULE = "─"
DOTTED_RULE = "."


class _LineRecord:
    """Shared serialization for line records."""

    type: ClassVar[str]

    def to_dict(self) -> dict[str, Any]:
        """Return the backend record: ``type`` plus every field that is set."""
        record: dict[str, Any] = {"type": self.type}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                record[f.name] = value
        return record


@dataclass(frozen=True)
class TextLine(_LineRecord):
    """A single line of text."""

    type: ClassVar[str] = "text"

    text: str
    preset: Optional[Preset] = None
    align: Optional[Align] = None


@dataclass(frozen=True)
class ColumnsLine(_LineRecord):
    """Left text and right text justified inside ``width`` after ``indent``."""

    type: ClassVar[str] = "columns"

    left: str
    right: str
    indent: int
    width: int
    preset: Optional[Preset] = None


@dataclass(frozen=True)
class SeparatorLine(_LineRecord):
    """A horizontal rule. ``char`` of None means the solid rule."""

    type: ClassVar[str] = "separator"

    length: int
    char: Optional[str] = None

    @property
    def fill(self) -> str:
        return self.char or SOLID_RULE


@dataclass(frozen=True)
class EmptyLine(_LineRecord):
    """``count`` blank lines (paper feed)."""

    type: ClassVar[str] = "empty"

    count: int = 1


ReceiptContentLine = Union[TextLine, ColumnsLine, SeparatorLine, EmptyLine]

LINE_TYPES: dict[str, type] = {
    TextLine.type: TextLine,
    ColumnsLine.type: ColumnsLine,
    SeparatorLine.type: SeparatorLine,
    EmptyLine.type: EmptyLine,
}


def line_from_dict(record: dict[str, Any]) -> ReceiptContentLine:
    """Rebuild a line from its backend record.

    Records without a ``type`` are text lines, as the POS app sends header
    lines as ``{"text": ..., "align": ...}``.
    """
    kind = record.get("type", TextLine.type)
    line_cls = LINE_TYPES.get(kind)
    if line_cls is None:
        raise ValueError(f"Unknown receipt line type: {kind}")
    names = {f.name for f in fields(line_cls)}
    return line_cls(**{k: v for k, v in record.items() if k in names})
