"""
cellgrid: Dynamic, aligned ASCII text tables.

This library renders an ordered collection of text cells as a bordered grid:
- Column widths computed from multi-line cell content
- Embedded line breaks expand a row into several aligned lines
- Optional per-cell terminal escape sequences (colors, underline, ...)
- Five border styles and configurable border characters
- Lines are streamed to any callable sink

Example:
    from cellgrid import Table, TableStyle

    table = Table()
    table.append(None, "Name")
    table.append(None, "Count")
    table.append("\\x1b[0;34m", "item-%d", 1)
    table.append(None, "%d", 10)
    table.render(print, TableStyle.SEPARATED_HEAD_ON, indent=2, columns=2)
"""

from importlib.metadata import PackageNotFoundError, version

from .api import append, init, render, teardown
from .config import MAX_INDENT, TableConfig, resolve_style
from .exceptions import (
    BufferOverflowError,
    CellGridError,
    GridShapeError,
    InvalidArgumentError,
    ResourceExhaustedError,
)
from .layout import ColumnStats, Layout, compute_layout
from .models import MAX_STYLE_LEN, MAX_TEXT_LEN, RESET_SEQUENCE, Cell
from .styles import StyleRules, TableStyle, get_style_rules
from .table import Table

try:
    __version__ = version("cellgrid")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "TableConfig",
    "Cell",
    # Styles
    "TableStyle",
    "StyleRules",
    "get_style_rules",
    "resolve_style",
    # Layout
    "ColumnStats",
    "Layout",
    "compute_layout",
    # Operations
    "init",
    "append",
    "render",
    "teardown",
    # Constants
    "MAX_TEXT_LEN",
    "MAX_STYLE_LEN",
    "MAX_INDENT",
    "RESET_SEQUENCE",
    # Exceptions
    "CellGridError",
    "InvalidArgumentError",
    "GridShapeError",
    "ResourceExhaustedError",
    "BufferOverflowError",
]
