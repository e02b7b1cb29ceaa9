"""Plain-text preview of receipt lines.

Shows what a monospaced thermal printer would put on paper, without any
printer commands. Presets (font sizes) have no effect on the text.
"""

from typing import Iterable

from .layout import center_line
from .lines import ColumnsLine, EmptyLine, ReceiptContentLine, SeparatorLine, TextLine


class TextRenderer:
    """Renders receipt lines as monospaced text."""

    def __init__(self, width: int):
        self.width = max(width, 1)

    def render(self, lines: Iterable[ReceiptContentLine]) -> str:
        """Render all lines, joined by newlines."""
        output: list[str] = []
        for line in lines:
            output.extend(self.render_line(line))
        return "\n".join(output)

    def render_line(self, line: ReceiptContentLine) -> list[str]:
        """Render one line record to zero or more rows of text."""
        method = getattr(self, f"_render_{line.type}", None)
        if method:
            return method(line)
        return [f"[Unknown line: {line.type}]"]

    def _render_text(self, line: TextLine) -> list[str]:
        if line.align == "center":
            return [center_line(line.text, self.width).text.rstrip()]
        if line.align == "right":
            return [line.text.strip().rjust(self.width)]
        return [line.text.rstrip()]

    def _render_columns(self, line: ColumnsLine) -> list[str]:
        indent = " " * max(line.indent, 0)
        available = max(line.width - len(indent), 0)
        gap = available - len(line.left) - len(line.right)
        if gap < 1:
            return [f"{indent}{line.left} {line.right}".rstrip()]
        return [f"{indent}{line.left}{' ' * gap}{line.right}"]

    def _render_separator(self, line: SeparatorLine) -> list[str]:
        return [line.fill * max(line.length, 0)]

    def _render_empty(self, line: EmptyLine) -> list[str]:
        return [""] * max(line.count, 0)
