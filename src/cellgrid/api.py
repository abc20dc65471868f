"""
Boolean-returning table operations.

Each function mirrors a :class:`~cellgrid.table.Table` method but reports
failure as ``False`` instead of raising, and treats ``None`` as an absent
table handle. Rejected calls are logged at DEBUG level.

Example:
    table = Table()
    init(table)
    append(table, None, "Head")
    append(table, "\\x1b[0;33m", "%d", 4711)
    render(table, print, TableStyle.REGULAR_HEAD_ON, 0, 1)
    teardown(table)
"""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import CellGridError
from .renderer import LineSink
from .styles import TableStyle
from .table import Table

logger = logging.getLogger(__name__)


def init(table: Table | None) -> bool:
    """Reset ``table`` to the empty state with default configuration."""
    if table is None:
        logger.debug("init rejected: no table")
        return False
    table.reset()
    return True


def append(table: Table | None, style: str | None, fmt: str | None, *args: Any) -> bool:
    """Append a cell; ``True`` also when no text was supplied."""
    if table is None:
        logger.debug("append rejected: no table")
        return False
    try:
        table.append(style, fmt, *args)
    except CellGridError as e:
        logger.debug("append failed: %s", e)
        return False
    return True


def render(
    table: Table | None,
    sink: LineSink | None,
    style: TableStyle | str,
    indent: int,
    columns: int,
) -> bool:
    """Render ``table`` into ``sink``; ``True`` iff every line was emitted."""
    if table is None:
        logger.debug("render rejected: no table")
        return False
    if sink is None:
        logger.debug("render rejected: no sink")
        return False
    try:
        table.render(sink, style, indent, columns)
    except CellGridError as e:
        logger.debug("render failed: %s", e)
        return False
    return True


def teardown(table: Table | None) -> None:
    """Release every cell of ``table``; no-op for ``None``."""
    if table is not None:
        table.teardown()
