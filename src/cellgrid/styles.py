"""
Border styles and the rule lines each one draws.

Example output of each style:

    REGULAR_HEAD_ON          REGULAR_HEAD_OFF         COMPACT
    +=======+=======+        +-------+-------+        Head1 Head2
    | Head1 | Head2 |        | Head1 | Head2 |        Row2  Row2
    +=======+=======+        | Row2  | Row2  |        Row3  Row3
    | Row2  | Row2  |        | Row3  | Row3  |
    | Row3  | Row3  |        +-------+-------+
    +-------+-------+

    SEPARATED_HEAD_ON        SEPARATED_HEAD_OFF
    +=======+=======+        +-------+-------+
    | Head1 | Head2 |        | Head1 | Head2 |
    +=======+=======+        +-------+-------+
    | Row2  | Row2  |        | Row2  | Row2  |
    +-------+-------+        +-------+-------+
    | Row3  | Row3  |        | Row3  | Row3  |
    +-------+-------+        +-------+-------+
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TableStyle(Enum):
    """Available table styles."""

    REGULAR_HEAD_ON = "regular-head-on"
    REGULAR_HEAD_OFF = "regular-head-off"
    SEPARATED_HEAD_ON = "separated-head-on"
    SEPARATED_HEAD_OFF = "separated-head-off"
    COMPACT = "compact"


class Rule(Enum):
    """Which pre-rendered rule line to emit at a boundary."""

    NONE = "none"
    GRID = "grid"
    HEAD = "head"


@dataclass(frozen=True)
class StyleRules:
    """
    Boundary emission policy for one style.

    Attributes:
        top: Rule before the first row
        after_header: Rule after row 0 (only when there is more than one row)
        between_rows: Rule between the remaining rows
        bottom: Rule after the last row
        header: Row 0 uses the header boundary and separator characters
        borders: Boundary and separator characters are drawn at all
    """

    top: Rule
    after_header: Rule
    between_rows: Rule
    bottom: Rule
    header: bool
    borders: bool = True


_RULES: dict[TableStyle, StyleRules] = {
    TableStyle.REGULAR_HEAD_ON: StyleRules(
        top=Rule.HEAD,
        after_header=Rule.HEAD,
        between_rows=Rule.NONE,
        bottom=Rule.GRID,
        header=True,
    ),
    TableStyle.REGULAR_HEAD_OFF: StyleRules(
        top=Rule.GRID,
        after_header=Rule.NONE,
        between_rows=Rule.NONE,
        bottom=Rule.GRID,
        header=False,
    ),
    TableStyle.SEPARATED_HEAD_ON: StyleRules(
        top=Rule.HEAD,
        after_header=Rule.HEAD,
        between_rows=Rule.GRID,
        bottom=Rule.GRID,
        header=True,
    ),
    TableStyle.SEPARATED_HEAD_OFF: StyleRules(
        top=Rule.GRID,
        after_header=Rule.GRID,
        between_rows=Rule.GRID,
        bottom=Rule.GRID,
        header=False,
    ),
    TableStyle.COMPACT: StyleRules(
        top=Rule.NONE,
        after_header=Rule.NONE,
        between_rows=Rule.NONE,
        bottom=Rule.NONE,
        header=False,
        borders=False,
    ),
}


def get_style_rules(style: TableStyle | str) -> StyleRules:
    """
    Get the boundary emission policy for a style.

    Args:
        style: A ``TableStyle`` member or its string value

    Returns:
        The rules for that style

    Raises:
        ValueError: If the style is unknown
    """
    return _RULES[TableStyle(style)]
