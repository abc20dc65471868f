"""
Table renderer.

Turns a column layout into fully bordered text lines and hands them one at a
time to a caller-supplied sink. A logical row expands into several physical
lines when any of its cells contains line breaks; cells with fewer lines are
blank-padded so every column stays aligned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence

from .buffer import LineBuffer
from .config import MAX_INDENT, TableConfig
from .exceptions import InvalidArgumentError, ResourceExhaustedError
from .layout import Layout, compute_layout
from .models import RESET_SEQUENCE, Cell
from .styles import Rule, StyleRules, TableStyle, get_style_rules

logger = logging.getLogger(__name__)

LineSink = Callable[[str], object]


class Renderer:
    """Render a sequence of cells with one table configuration."""

    def __init__(self, cells: Sequence[Cell], config: TableConfig) -> None:
        self._cells = cells
        self._config = config

    def render(
        self,
        sink: LineSink,
        style: TableStyle | str,
        indent: int = 0,
        columns: int = 1,
    ) -> int:
        """
        Send every line of the table to ``sink``.

        All arguments are validated before the first line is produced, so a
        rejected call never emits partial output.

        Args:
            sink: Called once per output line, in order
            style: Border style
            indent: Number of spaces to shift the table right (0..MAX_INDENT)
            columns: Number of table columns

        Returns:
            Number of lines sent to the sink

        Raises:
            InvalidArgumentError: If any argument is unusable or the cells do
                not form a rectangular grid
            ResourceExhaustedError: If the line buffers cannot be allocated
        """
        if not callable(sink):
            raise InvalidArgumentError("sink", sink, "must be callable")
        try:
            rules = get_style_rules(style)
        except ValueError:
            raise InvalidArgumentError("style", style, "unknown table style") from None
        if not isinstance(indent, int) or not 0 <= indent <= MAX_INDENT:
            raise InvalidArgumentError("indent", indent, f"must be between 0 and {MAX_INDENT}")
        self._config.validate()
        layout = compute_layout(self._cells, columns)

        capacity = layout.line_capacity(self._config.padding, indent)
        try:
            grid_rule = self._rule_line(layout, indent, capacity, self._config.grid_fill)
            head_rule = self._rule_line(layout, indent, capacity, self._config.head_fill)
            line = LineBuffer(capacity)
        except MemoryError as e:
            raise ResourceExhaustedError("render buffers", e) from e
        rule_lines = {Rule.GRID: grid_rule, Rule.HEAD: head_rule}

        emitted = 0

        def emit_rule(rule: Rule) -> None:
            nonlocal emitted
            if rule is not Rule.NONE:
                sink(rule_lines[rule])
                emitted += 1

        # Lines already sent to the sink stay sent if a later line fails.
        try:
            emit_rule(rules.top)
            for row in range(layout.rows):
                for text in self._row_lines(layout, rules, row, indent, line):
                    sink(text)
                    emitted += 1
                if row == layout.rows - 1:
                    break
                emit_rule(rules.after_header if row == 0 else rules.between_rows)
            emit_rule(rules.bottom)
        except MemoryError as e:
            raise ResourceExhaustedError("table line", e) from e

        logger.debug(
            "Rendered %d lines (%d rows x %d columns, style=%s)",
            emitted,
            layout.rows,
            columns,
            TableStyle(style).value,
        )
        return emitted

    def _rule_line(self, layout: Layout, indent: int, capacity: int, fill: str) -> str:
        """Build a horizontal rule such as ``+-------+-----+``."""
        padding = self._config.padding
        buf = LineBuffer(capacity)
        buf.fill(" ", indent)
        buf.write(self._config.connector)
        for col in layout.columns:
            buf.fill(fill, col.width + 2 * padding)
            buf.write(self._config.connector)
        return buf.getvalue()

    def _row_lines(
        self,
        layout: Layout,
        rules: StyleRules,
        row: int,
        indent: int,
        buf: LineBuffer,
    ) -> Iterator[str]:
        """Yield the physical lines of one logical row."""
        cells = layout.row(self._cells, row)
        cursors = [0] * len(cells)
        padding = self._config.padding
        if rules.header and row == 0:
            boundary = self._config.head_boundary
            separator = self._config.head_separator
        else:
            boundary = self._config.grid_boundary
            separator = self._config.grid_separator
        last = len(cells) - 1

        more = True
        while more:
            more = False
            buf.reset()
            buf.fill(" ", indent)
            if rules.borders:
                buf.write(boundary)
                buf.fill(" ", padding)

            for j, cell in enumerate(cells):
                if j:
                    buf.fill(" ", padding)
                if cell.style:
                    buf.write(cell.style)

                start = cursors[j]
                end = cell.text.find("\n", start)
                if end < 0:
                    end = len(cell.text)
                    cursors[j] = end
                else:
                    cursors[j] = end + 1
                    more = True
                segment = cell.text[start:end]
                buf.write(segment)
                buf.fill(" ", layout.columns[j].width - len(segment))

                if cell.style:
                    buf.write(RESET_SEQUENCE)
                buf.fill(" ", padding)
                if rules.borders and j < last:
                    buf.write(separator)

            if rules.borders:
                buf.write(boundary)
            yield buf.getvalue()
