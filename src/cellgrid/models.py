"""Core models for cellgrid."""

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

MAX_TEXT_LEN = 96
"""Maximum stored length of a cell's formatted text; longer text is truncated."""

MAX_STYLE_LEN = 24
"""Style prefixes must be shorter than this; longer ones are dropped."""

RESET_SEQUENCE = "\x1b[0m"
"""Suffix emitted after the content of every styled cell."""


def max_line_width(text: str) -> int:
    """
    Return the length of the longest ``\\n``-delimited segment of ``text``.

    The result is at least 1, so an empty cell still reserves one column.

    Example:
        >>> max_line_width("x\\ny\\nzz")
        2
    """
    widest = 1
    run = 0
    for ch in text:
        if ch == "\n":
            widest = max(widest, run)
            run = 0
        else:
            run += 1
    return max(widest, run)


@dataclass(frozen=True)
class Cell:
    """
    A single table entry with optional style annotation.

    Cells are immutable once built; use :meth:`Cell.build` to apply the
    truncation and prefix-dropping policies.

    Attributes:
        text: Formatted text, at most ``MAX_TEXT_LEN`` characters
        style: Escape prefix emitted before the text, or ``None``
        width: Longest ``\\n``-delimited segment of ``text`` (minimum 1)
    """

    text: str = ""
    style: str | None = None
    width: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", max_line_width(self.text))

    @property
    def style_len(self) -> int:
        """Length of the style prefix (0 when unstyled)."""
        return len(self.style) if self.style else 0

    @classmethod
    def build(
        cls,
        style: str | None = None,
        fmt: str | None = None,
        *args: Any,
    ) -> "Cell":
        """
        Create a cell from a printf-style format and its arguments.

        The format is evaluated once with ``fmt % args``, like a single
        ``sprintf`` call: ``"100%%"`` becomes ``"100%"``.

        Args:
            style: Escape prefix such as ``"\\x1b[0;34m"``. Dropped when it
                is ``MAX_STYLE_LEN`` characters or longer.
            fmt: Format string, or ``None`` for an empty cell
            *args: Values for the format's conversion specifiers

        Returns:
            The new cell. Empty or absent text yields an unstyled empty cell.

        Raises:
            TypeError: If the arguments do not match the format
            ValueError: If the format string is malformed
        """
        if fmt is None:
            return cls()

        text = fmt % args
        if not text:
            return cls()

        if len(text) > MAX_TEXT_LEN:
            logger.debug("Truncating cell text from %d to %d characters", len(text), MAX_TEXT_LEN)
            text = text[:MAX_TEXT_LEN]

        if style is not None and len(style) >= MAX_STYLE_LEN:
            logger.debug("Dropping style prefix of %d characters", len(style))
            style = None

        return cls(text=text, style=style or None)
