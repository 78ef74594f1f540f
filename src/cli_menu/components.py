"""Menu item components for cli_menu.

Each item turns itself into plain text rows that fit the style's content
width. Colours, margins and padding are added later by the painter.
- MenuItem: Base class for all items
- SelectableItem: Item with a marker and an optional extra
- StaticItem: Plain wrapped text
- LineBreakItem: Full-width rule made of a repeated character
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.cells import cell_len, chop_cells

from .style import MenuStyle


def _wrap(text: str, width: int) -> list[str]:
    """Wrap text to ``width`` terminal cells, keeping blank input as one empty row.

    Words are measured in cells, so wide glyphs count double. Words longer
    than ``width`` are split.
    """
    width = max(width, 1)
    rows: list[str] = []
    line = ""
    for word in text.split():
        for piece in chop_cells(word, width):
            candidate = f"{line} {piece}" if line else piece
            if cell_len(candidate) <= width:
                line = candidate
                continue
            if line:
                rows.append(line)
            line = piece
    if line:
        rows.append(line)
    return rows or [""]


@dataclass
class MenuItem:
    """Base class for menu items.

    Attributes:
        text: Display text for this item.
        disabled: Whether this item can be interacted with.
    """

    text: str
    disabled: bool = False

    def can_select(self) -> bool:
        return not self.disabled

    def get_rows(self, style: MenuStyle, selected: bool = False) -> list[str]:
        """Lay this item out as rows no wider than the content width.

        Args:
            style: Style supplying markers and geometry.
            selected: Whether the cursor is on this item.

        Returns:
            Rows of plain text, without escape codes or padding.
        """
        raise NotImplementedError


@dataclass
class SelectableItem(MenuItem):
    """Item prefixed by the selection marker.

    Attributes:
        show_item_extra: Append the style's item extra when the style
            displays extras.
    """

    show_item_extra: bool = False

    def get_rows(self, style: MenuStyle, selected: bool = False) -> list[str]:
        marker = f"{style.get_marker(selected)} "
        marker_len = cell_len(marker)
        extra_len = 0
        if style.get_displays_extra():
            extra_len = cell_len(style.get_item_extra()) + 2

        wrapped = _wrap(self.text, style.get_content_width() - marker_len - extra_len)
        rows = [marker + wrapped[0]]
        rows.extend(" " * marker_len + line for line in wrapped[1:])

        if self.show_item_extra and style.get_displays_extra():
            first = rows[0]
            gap = style.get_content_width() - cell_len(first) - cell_len(style.get_item_extra())
            rows[0] = first + " " * max(gap, 1) + style.get_item_extra()
        return rows


@dataclass
class StaticItem(MenuItem):
    """Non-interactive text, wrapped to the content width."""

    disabled: bool = True

    def get_rows(self, style: MenuStyle, selected: bool = False) -> list[str]:
        return _wrap(self.text, style.get_content_width())


@dataclass
class LineBreakItem(MenuItem):
    """Visual separator spanning the content width.

    Non-interactive; the break character is repeated ``lines`` times.
    """

    text: str = " "
    lines: int = 1
    disabled: bool = True

    def get_rows(self, style: MenuStyle, selected: bool = False) -> list[str]:
        unit = cell_len(self.text) or 1
        return [self.text * (style.get_content_width() // unit)] * self.lines
