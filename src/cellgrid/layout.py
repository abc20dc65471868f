"""
Column layout calculation.

Partitions the ordered cells into logical rows of a caller-supplied column
count and derives the per-column widths every rendered line is built from.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import GridShapeError, InvalidArgumentError
from .models import RESET_SEQUENCE, Cell


@dataclass
class ColumnStats:
    """
    Sizing of one column across every logical row.

    Attributes:
        width: Visible width, the widest line of any cell in the column
        style_len: Longest style prefix in the column (invisible, affects
            buffer capacity only)
    """

    width: int = 0
    style_len: int = 0

    def capacity(self, padding: int) -> int:
        """Characters this column contributes to a line, trailing border included."""
        size = self.width + 2 * padding + 1
        if self.style_len:
            size += self.style_len + len(RESET_SEQUENCE)
        return size


@dataclass
class Layout:
    """Column statistics plus the grid shape they were computed for."""

    columns: list[ColumnStats]
    rows: int

    def row(self, cells: Sequence[Cell], index: int) -> Sequence[Cell]:
        """Return the cells of logical row ``index``."""
        start = index * len(self.columns)
        return cells[start : start + len(self.columns)]

    def line_capacity(self, padding: int, indent: int = 0) -> int:
        """
        Exact length of the widest line this layout can produce.

        Rule lines and fully styled content lines have exactly this length;
        compact lines and lines with shorter style prefixes are shorter.

        Args:
            padding: Spaces between border and text
            indent: Left shift of the table
        """
        return indent + 1 + sum(col.capacity(padding) for col in self.columns)


def compute_layout(cells: Sequence[Cell], columns: int) -> Layout:
    """
    Compute per-column widths for a grid of ``columns`` columns.

    Cells are walked in row-major order: row 0 columns ``0..columns-1``,
    then row 1, and so on.

    Args:
        cells: Ordered table entries
        columns: Number of columns

    Returns:
        Layout with one ``ColumnStats`` per column

    Raises:
        InvalidArgumentError: If ``columns`` is not positive or there are no cells
        GridShapeError: If the cells do not fill a whole number of rows
    """
    if columns <= 0:
        raise InvalidArgumentError("columns", columns, "must be positive")
    if not cells:
        raise InvalidArgumentError("entries", 0, "table has no entries")

    rows, remainder = divmod(len(cells), columns)
    if remainder:
        raise GridShapeError(len(cells), columns)

    stats = [ColumnStats() for _ in range(columns)]
    for index, cell in enumerate(cells):
        col = stats[index % columns]
        col.width = max(col.width, cell.width)
        col.style_len = max(col.style_len, cell.style_len)

    return Layout(columns=stats, rows=rows)
