"""Tests for the plain-text receipt preview."""

from thermal_receipt.builder import build_sale_receipt_lines
from thermal_receipt.layout import center_line
from thermal_receipt.lines import ColumnsLine, EmptyLine, SeparatorLine, TextLine
from thermal_receipt.options import ReceiptItem, ReceiptOptions
from thermal_receipt.render import TextRenderer


class TestTextRenderer:
    """Tests for TextRenderer."""

    def test_columns_padded_to_width(self) -> None:
        renderer = TextRenderer(20)
        rendered = renderer.render_line(ColumnsLine(left="Ödenen", right="5.00 TL", indent=1, width=20))
        assert rendered == [" Ödenen" + " " * 6 + "5.00 TL"]
        assert len(rendered[0]) == 20

    def test_columns_too_wide_keep_one_space(self) -> None:
        renderer = TextRenderer(10)
        rendered = renderer.render_line(ColumnsLine(left="abcdef", right="ghijk", indent=0, width=10))
        assert rendered == ["abcdef ghijk"]

    def test_columns_with_empty_left(self) -> None:
        renderer = TextRenderer(12)
        rendered = renderer.render_line(ColumnsLine(left="", right="50.00 TL", indent=1, width=12))
        assert rendered == ["    50.00 TL"]

    def test_text_alignment(self) -> None:
        renderer = TextRenderer(10)
        assert renderer.render_line(TextLine(text="ab  ")) == ["ab"]
        assert renderer.render_line(TextLine(text="ab", align="right")) == ["        ab"]
        assert renderer.render_line(TextLine(text="ab", align="center")) == ["    ab"]

    def test_centered_odd_space_goes_right(self) -> None:
        """Centered text matches center_line padding, not str.center."""
        renderer = TextRenderer(5)
        assert renderer.render_line(TextLine(text="ab", align="center")) == [" ab"]
        assert renderer.render_line(center_line("ab", 5)) == [" ab"]

    def test_separator(self) -> None:
        renderer = TextRenderer(4)
        assert renderer.render_line(SeparatorLine(length=4)) == ["────"]
        assert renderer.render_line(SeparatorLine(length=4, char=".")) == ["...."]

    def test_empty_lines(self) -> None:
        renderer = TextRenderer(4)
        assert renderer.render_line(EmptyLine(count=3)) == ["", "", ""]
        assert renderer.render_line(EmptyLine(count=0)) == []

    def test_render_joins_rows(self) -> None:
        renderer = TextRenderer(4)
        lines = [TextLine(text="a"), EmptyLine(count=1), SeparatorLine(length=2, char="=")]
        assert renderer.render(lines) == "a\n\n=="

    def test_minimum_width(self) -> None:
        assert TextRenderer(0).width == 1


class TestRenderedReceipt:
    """A full receipt rendered as text."""

    def test_no_row_exceeds_paper_width(self) -> None:
        options = ReceiptOptions(
            items=[
                ReceiptItem(name="Kahve", quantity=2, unit_price=25),
                ReceiptItem(name="Cheesecake", quantity=1, unit_price=140),
            ],
            order_number="A-1001",
            subtotal=190,
            total=190,
            receipt_width=32,
        )
        rendered = TextRenderer(32).render(build_sale_receipt_lines(options))
        rows = rendered.split("\n")
        assert all(len(row) <= 32 for row in rows)
        assert " Ödenen" + " " * 16 + "190.00 TL" in rows
        assert "190.00 TL" in rows
