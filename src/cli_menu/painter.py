"""Turn item rows into coloured, full-width terminal lines.

Every painted line is exactly ``style.get_width()`` columns wide:

    margin | set code | padding | row | right-hand padding | unset code | margin

Nothing here writes to the terminal; callers decide where lines go.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.cells import cell_len

from .components import MenuItem, StaticItem
from .style import MenuStyle


def paint_row(style: MenuStyle, row: str, selected: bool = False) -> str:
    """Paint a single row of text in the selected or unselected colours."""
    if selected:
        set_code, unset_code = style.get_selected_set_code(), style.get_selected_unset_code()
    else:
        set_code, unset_code = style.get_unselected_set_code(), style.get_unselected_unset_code()

    margin = " " * style.get_margin()
    padding = " " * style.get_padding()
    right = " " * max(style.get_right_hand_padding(cell_len(row)), 0)
    return f"{margin}{set_code}{padding}{row}{right}{unset_code}{margin}"


def paint_item(style: MenuStyle, item: MenuItem, selected: bool = False) -> list[str]:
    """Paint every row of ``item``."""
    return [paint_row(style, row, selected) for row in item.get_rows(style, selected)]


def paint_title(style: MenuStyle, title: str) -> list[str]:
    """Paint the title followed by a rule of the title separator."""
    lines = paint_item(style, StaticItem(title))
    separator = style.get_title_separator()
    rule = separator * (style.get_content_width() // (cell_len(separator) or 1))
    lines.append(paint_row(style, rule))
    return lines


def paint_menu(
    style: MenuStyle,
    items: Sequence[MenuItem],
    title: str | None = None,
    selected_index: int | None = None,
) -> str:
    """Paint a whole menu frame as a newline-joined string.

    Args:
        style: Style to paint with.
        items: Items in display order.
        title: Optional title shown above the items.
        selected_index: Index of the highlighted item, if any. Disabled
            items are never highlighted.

    Returns:
        The painted frame. Blank padded rows frame the content.
    """
    blank = paint_row(style, "")
    lines = [blank]
    if title:
        lines.extend(paint_title(style, title))
    for index, item in enumerate(items):
        selected = index == selected_index and item.can_select()
        lines.extend(paint_item(style, item, selected))
    lines.append(blank)
    return "\n".join(lines)
