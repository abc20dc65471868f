"""Table configuration.

Border characters and padding are plain per-table settings. Defaults can be
overridden from the environment:

- ``CELLGRID_PADDING``: spaces between border and text
- ``CELLGRID_CONNECTOR``: rule-line connector character
- ``CELLGRID_STYLE``: default style for the command-line interface
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields

from .exceptions import InvalidArgumentError
from .styles import TableStyle

MAX_INDENT = 30
"""Maximum left shift of a rendered table, in characters."""

PADDING_ENV_VAR = "CELLGRID_PADDING"
CONNECTOR_ENV_VAR = "CELLGRID_CONNECTOR"
STYLE_ENV_VAR = "CELLGRID_STYLE"

DEFAULT_STYLE = TableStyle.REGULAR_HEAD_ON


@dataclass
class TableConfig:
    """
    Border characters and spacing for a table.

    All fields may be changed between appends and renders.

    Attributes:
        grid_fill: Fill character of grid rule lines
        grid_boundary: Left/right border of body rows
        grid_separator: Column separator of body rows
        head_fill: Fill character of header rule lines
        head_boundary: Left/right border of the header row
        head_separator: Column separator of the header row
        connector: Character where rule lines meet column borders
        padding: Spaces between a border and the cell text
    """

    grid_fill: str = "-"
    grid_boundary: str = "|"
    grid_separator: str = "|"
    head_fill: str = "="
    head_boundary: str = "|"
    head_separator: str = "|"
    connector: str = "+"
    padding: int = 1

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check every field.

        Raises:
            InvalidArgumentError: If a border field is not a single character
                or padding is negative
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "padding":
                if not isinstance(value, int) or value < 0:
                    raise InvalidArgumentError(f.name, value, "must be a non-negative integer")
            elif not isinstance(value, str) or len(value) != 1:
                raise InvalidArgumentError(f.name, value, "must be a single character")

    @classmethod
    def from_env(cls) -> TableConfig:
        """Build a config, taking padding and connector from the environment."""
        config = cls()
        padding = os.environ.get(PADDING_ENV_VAR)
        if padding:
            try:
                config.padding = int(padding)
            except ValueError:
                raise InvalidArgumentError(PADDING_ENV_VAR, padding, "must be an integer") from None
        connector = os.environ.get(CONNECTOR_ENV_VAR)
        if connector:
            config.connector = connector
        config.validate()
        return config


def resolve_style(style: TableStyle | str | None) -> TableStyle:
    """Resolve a style from explicit arg, env var, or default.

    Resolution order: ``style`` arg -> ``CELLGRID_STYLE`` env var ->
    ``regular-head-on``.

    Raises:
        InvalidArgumentError: If the resolved name is not a known style
    """
    value = style or os.environ.get(STYLE_ENV_VAR) or DEFAULT_STYLE
    try:
        return TableStyle(value)
    except ValueError:
        raise InvalidArgumentError("style", value, "unknown table style") from None
