"""The table: an ordered collection of cells plus its configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from .config import TableConfig
from .exceptions import InvalidArgumentError, ResourceExhaustedError
from .models import Cell
from .renderer import LineSink, Renderer
from .styles import TableStyle

logger = logging.getLogger(__name__)


class Table:
    """
    Build and render an aligned ASCII table.

    Cells are appended in display order (row-major); the column count is
    chosen at render time, so the same table can be rendered with any
    column count that divides its entry count.

    Example:
        table = Table()
        table.append(None, "Name")
        table.append(None, "Count")
        table.append("\\x1b[0;34m", "item-%d", 1)
        table.append(None, "%d", 10)
        for line in table.render_lines(TableStyle.REGULAR_HEAD_ON, columns=2):
            print(line)

    Output:
        +========+=======+
        | Name   | Count |
        +========+=======+
        | item-1 | 10    |
        +--------+-------+
    """

    def __init__(self, config: TableConfig | None = None) -> None:
        self.config = config if config is not None else TableConfig()
        self._cells: list[Cell] = []

    @property
    def entries(self) -> int:
        """Number of cells in the table."""
        return len(self._cells)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def reset(self) -> None:
        """Drop all cells and restore the default configuration."""
        self.teardown()
        self.config = TableConfig()

    def append(self, style: str | None = None, fmt: str | None = None, *args: Any) -> Cell:
        """
        Add a cell at the end of the table.

        Args:
            style: Escape prefix for the cell, e.g. ``"\\x1b[4m"``. The reset
                sequence is added automatically.
            fmt: printf-style format string; ``\\n`` starts a new line
                within the cell
            *args: Format arguments

        Returns:
            The stored cell

        Raises:
            InvalidArgumentError: If the format and its arguments do not match.
                The table is left unchanged.
            ResourceExhaustedError: If the cell cannot be allocated. The
                table is left unchanged.
        """
        try:
            cell = Cell.build(style, fmt, *args)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError("fmt", fmt, str(e)) from e
        except MemoryError as e:
            raise ResourceExhaustedError("cell", e) from e
        self._cells.append(cell)
        return cell

    def render(
        self,
        sink: LineSink,
        style: TableStyle | str = TableStyle.REGULAR_HEAD_ON,
        indent: int = 0,
        columns: int = 1,
    ) -> int:
        """
        Render the table line by line into ``sink``.

        Rendering does not modify the table and may be repeated with other
        styles, sinks or column counts.

        Returns:
            Number of lines sent to the sink

        Raises:
            InvalidArgumentError: On an unusable argument or a non-rectangular
                grid, before any line is emitted
            ResourceExhaustedError: If render buffers cannot be allocated
        """
        return Renderer(self._cells, self.config).render(sink, style, indent, columns)

    def render_lines(
        self,
        style: TableStyle | str = TableStyle.REGULAR_HEAD_ON,
        indent: int = 0,
        columns: int = 1,
    ) -> list[str]:
        """Render the table and return its lines."""
        lines: list[str] = []
        self.render(lines.append, style, indent, columns)
        return lines

    def teardown(self) -> None:
        """Release every cell. Safe to call on an empty table."""
        if self._cells:
            logger.debug("Releasing %d cells", len(self._cells))
        self._cells.clear()
